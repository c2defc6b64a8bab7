"""Logging setup utilities and the log-once-per-key helper."""

from __future__ import annotations

import logging
import os
import sys
import threading
from pathlib import Path
from typing import Any, TextIO


def configure_logging(
    *,
    log_path: Path | None = None,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure project-wide logging handlers.

    Console records go to ``stream`` (stdout by default). Calling again with a
    different stream replaces the existing console handler.
    """

    logger = logging.getLogger("dofpath")
    logger.setLevel(level)
    stream = stream or sys.stdout

    stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    for handler in list(stream_handlers):
        if handler.stream is not stream:
            logger.removeHandler(handler)
            stream_handlers.remove(handler)

    if not stream_handlers:
        stream_handler = logging.StreamHandler(stream=stream)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path and os.path.abspath(log_path) not in existing_files:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class OnceLogger:
    """Emit an info record at most once per key for the lifetime of the instance.

    The set of seen keys only grows. A lock guards it so the same instance can
    be shared between threads.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("dofpath")
        self._seen: set[str] = set()
        self._lock = threading.Lock()

    def once(self, key: str, msg: str, *args: Any) -> bool:
        """Log ``msg % args`` unless ``key`` was logged before. Returns True when logged."""
        with self._lock:
            if key in self._seen:
                return False
            self._seen.add(key)
        self.logger.info(msg, *args)
        return True

    def seen(self, key: str) -> bool:
        with self._lock:
            return key in self._seen

    @property
    def keys(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._seen)


__all__ = ["OnceLogger", "configure_logging"]
