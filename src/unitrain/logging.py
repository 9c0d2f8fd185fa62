"""Logging Utilities
====================

Root logging setup for the ``unitrain`` command line.

Library modules only create named loggers; handlers are installed here, and
only the CLI calls :func:`configure_logging`.

Contents
--------
Classes
^^^^^^^
* :class:`JsonFormatter` – One JSON object per record.

Functions
^^^^^^^^^
* :func:`configure_logging` – Install stderr (and optional file) handlers on the root logger.
* :func:`get_logging_config` – Report level, log file and formatter kind of the root logger.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s %(name)-28s %(levelname)-8s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Serialize log records as single-line JSON.

    The ``method`` attribute, set by the training entry point through
    ``extra={"method": ...}``, is carried into the payload when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, self.datefmt),
            "name": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        method = getattr(record, "method", None)
        if method is not None:
            payload["method"] = method
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _make_formatter(fmt: Optional[str], structured: bool) -> logging.Formatter:
    if structured:
        return JsonFormatter(datefmt=DATE_FORMAT)
    return logging.Formatter(fmt or DEFAULT_FORMAT, datefmt=DATE_FORMAT)


def configure_logging(
    level: str = "INFO",
    fmt: Optional[str] = None,
    file: Optional[str] = None,
    structured: bool = False,
) -> None:
    """Configure application-wide logging.

    Existing root handlers are replaced so repeated calls (e.g. from tests)
    do not duplicate output.

    Parameters
    ----------
    level : str, default="INFO"
        Level name; unknown names fall back to ``INFO``.
    fmt : str, optional
        Format string for plain-text output. Ignored when ``structured=True``.
    file : str, optional
        Also append records to this file, creating parent directories.
    structured : bool, default=False
        Emit JSON records through :class:`JsonFormatter`.
    """
    lvl = getattr(logging, str(level).upper(), None)
    if not isinstance(lvl, int):
        lvl = logging.INFO

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if file:
        fpath = Path(file)
        fpath.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(fpath))

    for handler in handlers:
        handler.setFormatter(_make_formatter(fmt, structured))
        handler.setLevel(lvl)
        root.addHandler(handler)
    root.setLevel(lvl)


def get_logging_config() -> dict:
    """Return the current root logging configuration.

    Returns
    -------
    dict
        Mapping with keys ``level`` (str), ``file`` (str | None) and
        ``structured`` (bool).
    """
    root = logging.getLogger()
    file_path = None
    structured = False
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            file_path = handler.baseFilename
        if isinstance(handler.formatter, JsonFormatter):
            structured = True
    return {"level": logging.getLevelName(root.level), "file": file_path, "structured": structured}


__all__ = ["configure_logging", "get_logging_config", "JsonFormatter"]
