"""Structured logging with request_id/trace_id correlation."""
import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any

import structlog

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")


def set_request_context(request_id: str | None = None, trace_id: str | None = None) -> tuple[str, str]:
    """Bind ids for the current request; trace_id falls back to request_id."""
    rid = request_id or str(uuid.uuid4())
    tid = trace_id or rid
    request_id_var.set(rid)
    trace_id_var.set(tid)
    return rid, tid


def clear_request_context() -> None:
    request_id_var.set("")
    trace_id_var.set("")


def add_request_context(logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor to inject request_id and trace_id into log events."""
    rid = request_id_var.get()
    tid = trace_id_var.get()
    if rid:
        event_dict.setdefault("request_id", rid)
    if tid:
        event_dict.setdefault("trace_id", tid)
    return event_dict


def configure_logging(json_logs: bool = True, level: str = "INFO") -> None:
    """Configure structlog for JSON (or console) output and request correlation."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_request_context,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
