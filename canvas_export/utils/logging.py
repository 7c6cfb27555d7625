"""
Structured event logging for the export service.

Every call produces one JSON document routed through loguru::

    {
        "@timestamp": "...",
        "level": "INFO",
        "event": "export.generation.completed",
        "message": "...",
        "service": {...},
        "context": {"correlation_id": "...", "project_id": "..."},
        "data": {...},
        "error": {...}
    }

Request- and project-scoped fields come from ``log_context`` so callers only
pass what is specific to the event.
"""
import json
import os
import socket
import time
import traceback
from contextvars import ContextVar
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Dict, Optional

from loguru import logger as loguru_logger

from canvas_export.config import settings

correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)
project_id_var: ContextVar[Optional[str]] = ContextVar('project_id', default=None)
extra_context_var: ContextVar[Dict[str, Any]] = ContextVar('extra_context', default={})

_SERVICE = {
    "name": settings.app_name,
    "version": settings.app_version,
    "environment": settings.environment,
    "instance": os.getenv("INSTANCE_ID", socket.gethostname()),
}


def _describe_exception(exc: BaseException) -> Dict[str, str]:
    return {
        "type": type(exc).__name__,
        "message": str(exc),
        "stacktrace": "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        ),
    }


class StructuredLogger:
    """JSON event logger bound to a module name"""

    def __init__(self, name: str):
        self.name = name
        self._sink = loguru_logger.bind(name=name)

    def _record(
        self,
        level: str,
        event: str,
        message: Optional[str],
        extra: Optional[Dict[str, Any]],
        exc_info: Optional[BaseException],
    ) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "@timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "event": event,
            "message": message or event,
            "logger": self.name,
            "service": _SERVICE,
            "context": {
                "correlation_id": correlation_id_var.get(),
                "project_id": project_id_var.get(),
                **extra_context_var.get(),
            },
        }
        if extra:
            record["data"] = extra
        if exc_info is not None:
            record["error"] = _describe_exception(exc_info)
        return record

    def _log(
        self,
        level: str,
        event: str,
        message: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None,
    ) -> None:
        record = self._record(level, event, message, extra, exc_info)
        # depth=2 attributes the line to the caller of debug()/info()/...
        self._sink.opt(depth=2).log(level, json.dumps(record, default=str))

    def debug(self, event: str, message: str = None, extra: Dict = None):
        self._log("DEBUG", event, message, extra)

    def info(self, event: str, message: str = None, extra: Dict = None):
        self._log("INFO", event, message, extra)

    def warning(self, event: str, message: str = None, extra: Dict = None):
        self._log("WARNING", event, message, extra)

    def error(self, event: str, message: str = None, extra: Dict = None,
              exc_info: BaseException = None):
        self._log("ERROR", event, message, extra, exc_info)

    def critical(self, event: str, message: str = None, extra: Dict = None,
                 exc_info: BaseException = None):
        self._log("CRITICAL", event, message, extra, exc_info)

    def performance(self, event: str, duration_ms: float, extra: Dict = None):
        """Timing event; ``duration_ms`` lands under ``data.duration_ms``"""
        data = {"duration_ms": round(duration_ms, 3)}
        if extra:
            data.update(extra)
        self._log("INFO", event, f"{event} took {duration_ms:.2f}ms", data)


def get_logger(name: str) -> StructuredLogger:
    """
    Usage:
        logger = get_logger(__name__)
        logger.info("export.generation.started", extra={"components": 3})
    """
    return StructuredLogger(name)


class log_context:
    """
    Scope correlation fields to a block; nested scopes restore on exit.

    Usage:
        with log_context(correlation_id=request_id, project_id=project.id):
            ...
    """

    def __init__(self, correlation_id: str = None, project_id: str = None, **kwargs):
        self._values = [
            (correlation_id_var, correlation_id),
            (project_id_var, project_id),
        ]
        self._extra = kwargs
        self._tokens = []

    def __enter__(self):
        for var, value in self._values:
            if value:
                self._tokens.append((var, var.set(value)))
        if self._extra:
            merged = {**extra_context_var.get(), **self._extra}
            self._tokens.append((extra_context_var, extra_context_var.set(merged)))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        while self._tokens:
            var, token = self._tokens.pop()
            var.reset(token)


def trace_sync(event_prefix: str):
    """
    Emit ``<prefix>.completed`` with the duration, or ``<prefix>.failed``
    before re-raising.

    Usage:
        @trace_sync("export.pipeline")
        def export(self, data):
            ...
    """
    def decorator(func):
        trace_logger = get_logger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                trace_logger.warning(
                    f"{event_prefix}.failed",
                    extra={
                        "function": func.__qualname__,
                        "duration_ms": (time.perf_counter() - started) * 1000,
                        "error_type": type(e).__name__,
                    }
                )
                raise

            trace_logger.performance(
                f"{event_prefix}.completed",
                duration_ms=(time.perf_counter() - started) * 1000,
                extra={"function": func.__qualname__}
            )
            return result

        return wrapper
    return decorator


"""
EVENT NAMES

<domain>.<subject>.<outcome>, e.g.:
- http.request.received / http.request.completed
- export.validation.failed
- export.generation.started / .completed / .failed
- export.pipeline.completed / .failed
- api.export.invalid_project / api.export.failed
- health.store.unavailable
"""
