"""Logging setup driven by the ``logging`` section of config.json."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_PATH = "logs/lingrbot.log"


def _file_handler(file_cfg: dict, project_root: str) -> RotatingFileHandler:
    path = file_cfg.get("path", DEFAULT_LOG_PATH)
    if not os.path.isabs(path):
        path = os.path.join(project_root, path)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
        backupCount=int(file_cfg.get("backup_count", 5)),
        encoding="utf-8",
    )


def build_handlers(config: dict, project_root: str) -> list[logging.Handler]:
    """Return the console and rotating-file handlers the config enables."""

    handlers: list[logging.Handler] = []
    if config.get("console", True):
        handlers.append(logging.StreamHandler())
    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        handlers.append(_file_handler(file_cfg, project_root))

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(config: dict, project_root: str) -> None:
    """Install the configured handlers on the root logger; no-op when disabled."""

    if not config or not config.get("enabled", False):
        return
    handlers = build_handlers(config, project_root)
    if not handlers:
        return
    level = getattr(logging, str(config.get("level", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, handlers=handlers)
