"""Centralized logging setup for Matilda Polish.

All modules share one queue-backed listener so that logging from the
classification worker thread never blocks the caller.
"""

import atexit
import logging
import os
import sys
import threading
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import SimpleQueue

_LISTENER_LOCK = threading.Lock()
_LOG_QUEUE: SimpleQueue | None = None
_LOG_LISTENER: QueueListener | None = None

DEFAULT_LOG_FILENAME = "matilda-polish.log"


def _is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


def _stop_listener() -> None:
    global _LOG_LISTENER
    if _LOG_LISTENER is not None:
        _LOG_LISTENER.stop()
        _LOG_LISTENER = None


def _resolve_logs_dir() -> Path | None:
    env_dir = os.environ.get("MATILDA_LOG_DIR") or os.environ.get("MATILDA_POLISH_LOG_DIR")
    logs_dir = Path(env_dir) if env_dir else Path.home() / ".matilda" / "logs"

    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return None
    return logs_dir


def _build_file_handler(log_level: int, formatter: logging.Formatter) -> logging.Handler | None:
    logs_dir = _resolve_logs_dir()
    if logs_dir is None:
        return None

    log_path = logs_dir / os.environ.get("MATILDA_POLISH_LOG_FILE", DEFAULT_LOG_FILENAME)
    try:
        handler = RotatingFileHandler(
            log_path,
            maxBytes=_env_int("MATILDA_LOG_MAX_BYTES", 10 * 1024 * 1024),
            backupCount=_env_int("MATILDA_LOG_BACKUP_COUNT", 5),
        )
    except OSError:
        return None
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    return handler


def _ensure_listener(log_level: int, include_console: bool, include_file: bool) -> QueueListener | None:
    global _LOG_QUEUE, _LOG_LISTENER
    with _LISTENER_LOCK:
        if _LOG_LISTENER is not None and _LOG_QUEUE is not None:
            return _LOG_LISTENER

        handlers: list[logging.Handler] = []
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        if include_file:
            file_handler = _build_file_handler(log_level, formatter)
            if file_handler is not None:
                handlers.append(file_handler)

        if include_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(log_level)
            console_handler.setFormatter(formatter)
            handlers.append(console_handler)

        if not handlers:
            return None

        _LOG_QUEUE = SimpleQueue()
        _LOG_LISTENER = QueueListener(_LOG_QUEUE, *handlers, respect_handler_level=True)
        _LOG_LISTENER.start()
        atexit.register(_stop_listener)
        return _LOG_LISTENER


def setup_logging(
    module_name: str,
    log_level: str = "INFO",
    include_console: bool | None = None,
    include_file: bool = True,
    log_filename: str | None = None,
) -> logging.Logger:
    """Setup standardized logging for polish modules.

    Args:
        module_name: Name of the module (usually __name__)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        include_console: Whether to log to the console. If None, uses
            MATILDA_POLISH_CONSOLE_LOGS ("1"/"true"/"yes" enables).
        include_file: Whether to log to file
        log_filename: Accepted for call-site compatibility; all modules
            share the single sink named by MATILDA_POLISH_LOG_FILE.

    Returns:
        Configured logger instance

    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    level = getattr(logging, log_level.upper())
    logger.setLevel(level)
    if include_console is None:
        include_console = _is_truthy(os.environ.get("MATILDA_POLISH_CONSOLE_LOGS"))

    # Keep records out of the root logger so console output is not duplicated
    logger.propagate = False

    listener = _ensure_listener(level, include_console, include_file)
    if listener is None or _LOG_QUEUE is None:
        logger.addHandler(logging.NullHandler())
        return logger

    queue_handler = QueueHandler(_LOG_QUEUE)
    queue_handler.setLevel(level)
    logger.addHandler(queue_handler)

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger for a module with default polish settings."""
    return setup_logging(module_name)


__all__ = ["setup_logging", "get_logger"]
