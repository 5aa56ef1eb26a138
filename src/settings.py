"""Static configuration for lingrbot.

All user-editable settings (server, counter store, outbound services, reply
limits, logging) live in a single JSON file for quick edits without touching
Python. Deployment overrides come from the environment (or a .env file).
"""

import json
import os

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# LINGRBOT_CONFIG points at an alternative config file, e.g. per deployment.
CONFIG_PATH = os.getenv("LINGRBOT_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _project_path(path: str) -> str:
    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Webhook listener. Environment variables win so a host can assign the port.
_server = _CONFIG.get("server", {})
HOST = os.getenv("LINGRBOT_HOST") or _server.get("host", "127.0.0.1")
PORT = int(os.getenv("LINGRBOT_PORT") or _server.get("port", 8080))
INDEX_PATH = _project_path(_server.get("index_path", "index.html"))

# Where to store the SQLite counter database.
_counter_store = _CONFIG.get("counter_store", {})
COUNTER_DB_PATH = _project_path(_counter_store.get("db_path", "lingrbot.db"))

# Outbound services used by the !go and !godoc commands.
_services = _CONFIG.get("services", {})
PLAYGROUND_URL = _services.get("playground_url", "http://play.golang.org/compile")
GODOC_URL = _services.get("godoc_url", "http://godoc.org")
GODOC_USER_AGENT = _services.get("godoc_user_agent", "curl/7.16.2")

# Shared HTTP client settings for title, doc and code-run requests.
_http = _CONFIG.get("http", {})
HTTP_TIMEOUT_SECONDS = float(_http.get("timeout_seconds", 10))
HTTP_USER_AGENT = _http.get("user_agent", "lingrbot/1.0")

# Reply assembly.
_reply = _CONFIG.get("reply", {})
REPLY_MAX_CHARS = int(_reply.get("max_chars", 1000))
NOT_FOUND_TEXT = _reply.get("not_found_text", "No such documents")

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
