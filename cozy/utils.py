# Cozy Flag Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for programs embedding the Cozy flag parser.

`setup_logging()` only touches the "cozy" logger. Handlers it installs are
tagged so a second call replaces them without disturbing handlers the host
program attached to the root logger or to "cozy" itself.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from cozy.logger import logger as cozy_logger

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_INSTALLED_ATTR = "_cozy_installed"


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def installed_handlers(target: logging.Logger = cozy_logger) -> list[logging.Handler]:
    """Return the handlers a previous `setup_logging()` call put on `target`."""
    return [h for h in target.handlers if getattr(h, _INSTALLED_ATTR, False)]


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = "cozy.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Route the parser's "cozy" records to a console handler and, optionally,
    a log file.

    Args:
        mode (str | None):
            Console output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `COZY_LOG_MODE` environment variable
            or fallback based on container detection.
        log_filename (str | None):
            Path to the log file. Defaults to "cozy.log". Pass None to skip
            file logging.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Returns:
        logging.Logger: The configured "cozy" logger. It stops propagating to
        the root logger so records are not emitted twice.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("COZY_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    handlers = [_console_handler(mode)]
    handlers[0].setLevel(console_log_level)
    if log_filename:
        handlers.append(_file_handler(log_filename, json_log_to_file))
        handlers[-1].setLevel(file_log_level)

    for handler in installed_handlers():
        cozy_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        setattr(handler, _INSTALLED_ATTR, True)
        cozy_logger.addHandler(handler)

    cozy_logger.setLevel(min(handler.level for handler in handlers))
    cozy_logger.propagate = False
    cozy_logger.debug("Logging initialized in '%s' mode.", mode)
    return cozy_logger
