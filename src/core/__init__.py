"""Core domain package for lingrbot.

Core contains message classification, reply handlers and the dispatcher
without any Flask, HTTP client or storage-specific code.
"""
