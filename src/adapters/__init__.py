"""Adapters binding the core ports to Flask, requests, BeautifulSoup and SQLite."""
