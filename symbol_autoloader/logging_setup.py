"""
JSONL logging bootstrap.
Installs a single structured log sink on the root logger.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

DEFAULT_PATH = os.environ.get("SYMBOL_AUTOLOADER_LOG_PATH", "./symbol-autoloader.log.jsonl")
DEFAULT_LEVEL = os.environ.get("SYMBOL_AUTOLOADER_LOG_LEVEL", "INFO").upper()

# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonlHandler(logging.Handler):
    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = {
                "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
                "lvl": record.levelname,
                "schema": {"name": "symbol-autoloader.log", "ver": "1.0.0"},
                "logger": record.name,
                "message": record.getMessage(),
            }
            for key, value in record.__dict__.items():
                if key not in _RESERVED:
                    payload.setdefault(key, value)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
        except Exception:
            self.handleError(record)


def resolve_level(level: str | None) -> int:
    return getattr(logging, (level or DEFAULT_LEVEL).upper(), logging.INFO)


def init_json_logging(path: str | None = None, level: str | None = None) -> JsonlHandler:
    root = logging.getLogger()
    root.setLevel(resolve_level(level))
    # Replace rather than stack handlers on repeated calls
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
    handler = JsonlHandler(path or DEFAULT_PATH)
    root.addHandler(handler)
    return handler
