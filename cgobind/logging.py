"""Logger setup for cgobind.

Every logger sits under the ``cgobind`` namespace. Console output goes to
stderr so that commands writing generated code to stdout stay clean. When a
log directory is configured, records are also written there, either as text
or as JSON lines carrying the type fields attached through ``extra``.
"""

import datetime as _dt
import json
import logging as _logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional

_NAMESPACE = "cgobind"

_CONSOLE_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Fields generation code passes through ``extra``; copied into JSON records.
RECORD_FIELDS = ("native_type", "pointer_depth", "raw_declaration", "output_path")

_LEVEL_COLORS = {
    _logging.WARNING: "\033[33m",
    _logging.ERROR: "\033[31m",
    _logging.CRITICAL: "\033[41m",
}
_RESET = "\033[0m"


@dataclass
class LoggingState:
    console_level: int
    file_level: int
    log_path: Optional[str] = None
    jsonl: bool = False


_state: Optional[LoggingState] = None


def parse_level(value, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, int):
        return value
    name = str(value).strip().upper()
    if name.isdigit():
        return int(name)
    level = _logging.getLevelNamesMapping().get(name)
    if level is None:
        raise ValueError(f"Unknown log level: {value}")
    return level


class _ConsoleFormatter(_logging.Formatter):
    def __init__(self, use_color: bool) -> None:
        super().__init__(_CONSOLE_FORMAT)
        self.use_color = use_color

    def format(self, record: _logging.LogRecord) -> str:
        message = super().format(record)
        color = _LEVEL_COLORS.get(record.levelno) if self.use_color else None
        return f"{color}{message}{_RESET}" if color else message


class _JsonLinesFormatter(_logging.Formatter):
    def format(self, record: _logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, _DATEFMT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in RECORD_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def get_logger(name: Optional[str] = None) -> _logging.Logger:
    if not name or name == _NAMESPACE:
        return _logging.getLogger(_NAMESPACE)
    if name.startswith(_NAMESPACE + "."):
        return _logging.getLogger(name)
    return _logging.getLogger(f"{_NAMESPACE}.{name}")


def _log_file_path(log_dir: str, jsonl: bool) -> str:
    stamp = _dt.datetime.now().strftime("%Y%m%dT%H%M%S")
    suffix = "jsonl" if jsonl else "log"
    return os.path.join(log_dir, f"cgobind-{stamp}.{suffix}")


def configure_logging(
    config: Dict[str, Any],
    *,
    console_level_override: Optional[str] = None,
    log_dir_override: Optional[str] = None,
    force_reconfigure: bool = False,
) -> LoggingState:
    """Install the cgobind handlers once; later calls return the same state."""
    global _state

    logger = get_logger()
    if _state is not None and logger.handlers and not force_reconfigure:
        return _state

    logging_cfg: Dict[str, Any] = config.get("logging", {}) if config else {}
    console_level = parse_level(console_level_override, parse_level(logging_cfg.get("console_level"), _logging.INFO))
    file_level = parse_level(logging_cfg.get("file_level"), _logging.DEBUG)
    jsonl = bool(logging_cfg.get("jsonl", False))
    log_dir = log_dir_override or logging_cfg.get("dir") or None

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    console = _logging.StreamHandler(stream=sys.stderr)
    console.setLevel(console_level)
    use_color = logging_cfg.get("color", True) and sys.stderr.isatty()
    console.setFormatter(_ConsoleFormatter(use_color))
    logger.addHandler(console)

    log_path = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_path = _log_file_path(os.path.abspath(log_dir), jsonl)
        file_handler = _logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(file_level)
        if jsonl:
            file_handler.setFormatter(_JsonLinesFormatter())
        else:
            file_handler.setFormatter(_logging.Formatter(_FILE_FORMAT, _DATEFMT))
        logger.addHandler(file_handler)
        logger.setLevel(min(console_level, file_level))
    else:
        logger.setLevel(console_level)

    _state = LoggingState(
        console_level=console_level,
        file_level=file_level,
        log_path=log_path,
        jsonl=jsonl and log_path is not None,
    )
    return _state


def get_logging_state() -> Optional[LoggingState]:
    return _state


def is_configured() -> bool:
    return bool(get_logger().handlers)
