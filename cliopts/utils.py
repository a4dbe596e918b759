# cliopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""Logging setup for programs built on cliopts."""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODE_ENV = "CLIOPTS_LOG_MODE"
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def _build_formatter(as_json: bool) -> logging.Formatter:
    if as_json:
        return pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
    return logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route log records to the console and, optionally, to a file.

    The library itself only emits records on the "cliopts" logger. Call this
    from an entry point to make them visible.

    Args:
        mode (str | None): "cli" for a Rich console handler or "json" for JSON
            lines on stderr. Falls back to `CLIOPTS_LOG_MODE`, then "cli".
        log_filename (str | None): Log file path. No file handler when omitted.
        json_log_to_file (bool): Write JSON lines to the file instead of text.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    mode = mode or os.getenv(LOG_MODE_ENV) or "cli"
    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_build_formatter(as_json=True))
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    console_handler.setLevel(console_log_level)

    handlers = [console_handler]
    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(_build_formatter(as_json=json_log_to_file))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers[:] = handlers

    logging.getLogger("cliopts").debug("Logging initialized in '%s' mode.", mode)
