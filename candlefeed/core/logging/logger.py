"""Structured logging utilities with trace propagation."""

from __future__ import annotations

import json
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import IO, Any, Iterator
from uuid import uuid4

from loguru import logger

from candlefeed.core.logging.config import LogConfig

_TRACE_ID_VAR: ContextVar[str | None] = ContextVar("candlefeed_trace_id", default=None)
_CONTEXT_VAR: ContextVar[dict[str, Any]] = ContextVar("candlefeed_log_context", default={})

_RESERVED_KEYS = {"trace_id", "symbol", "logger_name"}


def _ensure_trace_id() -> str:
    trace_id = _TRACE_ID_VAR.get()
    if trace_id is None:
        trace_id = uuid4().hex
        _TRACE_ID_VAR.set(trace_id)
    return trace_id


def _patch_record(record: dict[str, Any]) -> None:
    extra = record["extra"]
    if extra.get("trace_id"):
        _TRACE_ID_VAR.set(extra["trace_id"])
    else:
        extra["trace_id"] = _ensure_trace_id()

    for key, value in _CONTEXT_VAR.get({}).items():
        extra.setdefault(key, value)
    extra.setdefault("symbol", None)


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _format_payload(record: dict[str, Any]) -> dict[str, Any]:
    extra = record.get("extra", {})
    context = {k: v for k, v in extra.items() if k not in _RESERVED_KEYS}
    level = record.get("level")
    payload: dict[str, Any] = {
        "timestamp": record["time"].isoformat() if "time" in record else datetime.now(timezone.utc).isoformat(),
        "level": getattr(level, "name", "INFO"),
        "message": record.get("message"),
        "logger": extra.get("logger_name") or record.get("name"),
        "trace_id": extra.get("trace_id"),
        "symbol": extra.get("symbol"),
    }
    if context:
        payload["context"] = context
    exception = record.get("exception")
    if exception:
        payload["exception"] = str(exception.value) if exception.value else str(exception)
    return payload


class _StreamJsonSink:
    """Sink writing structured JSON payloads to a text stream.

    Without an explicit stream, ``sys.stderr`` is looked up on every write.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream

    def __call__(self, message: Any) -> None:
        stream = self._stream or sys.stderr
        payload = _format_payload(message.record)
        stream.write(json.dumps(payload, default=_json_default))
        stream.write("\n")
        stream.flush()


class _FileJsonSink:
    """Sink persisting JSON lines to a file path."""

    def __init__(self, path: str) -> None:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self._path = path

    def __call__(self, message: Any) -> None:  # pragma: no cover - simple file IO
        payload = _format_payload(message.record)
        with open(self._path, "a", encoding="utf-8") as file:
            file.write(json.dumps(payload, default=_json_default))
            file.write("\n")


def _configure_from_config(config: LogConfig) -> None:
    handlers: list[dict[str, Any]] = []
    if config.console_output:
        handlers.append({"sink": _StreamJsonSink(config.console_stream), "level": config.level.upper()})
    if config.file_output and config.file_path:
        handlers.append({"sink": _FileJsonSink(config.file_path), "level": config.level.upper()})

    configure_kwargs: dict[str, Any] = {"handlers": handlers, "patcher": _patch_record}
    if config.extra:
        configure_kwargs["extra"] = config.extra
    logger.configure(**configure_kwargs)


def configure_logging(level: str = "INFO", **kwargs: Any) -> None:
    """Configure structured logging with the provided level and options."""

    _configure_from_config(LogConfig(level=level, **kwargs))


def get_logger(name: str | None = None):
    """Return the shared logger, bound to ``name`` when given."""

    if name:
        return logger.bind(logger_name=name)
    return logger


@contextmanager
def log_context(*, trace_id: str | None = None, **extra: Any) -> Iterator[str]:
    """Propagate a trace id and extra fields to every record logged inside."""

    previous_context = _CONTEXT_VAR.get({})
    context_token = _CONTEXT_VAR.set({**previous_context, **extra})

    active_trace = trace_id or uuid4().hex
    trace_token = _TRACE_ID_VAR.set(active_trace)

    try:
        yield active_trace
    finally:
        _TRACE_ID_VAR.reset(trace_token)
        _CONTEXT_VAR.reset(context_token)


def current_trace_id() -> str:
    """Return the currently active trace id, generating one if required."""

    return _ensure_trace_id()


configure_logging()


__all__ = [
    "configure_logging",
    "current_trace_id",
    "get_logger",
    "log_context",
    "logger",
]
