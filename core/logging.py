# ============================================================================
# CONTEXT LOGGING
# ============================================================================
# EPOCH: 1 - UPLET REPORTING
# STATUS: Core - Loggers that carry the uplet being reported
# PURPOSE: Attach uplet id/type and route to every client and mock log record
# CREATED: 18 OCT 2026
# ============================================================================
"""
Context Logging

Every report concerns one uplet and one orchestrator route. The client
opens a log_context for the duration of a call, and every record emitted
inside it carries those fields under record.extra, alongside any extra=
passed at the call site (e.g. the target url).

Usage:
    from core.logging import get_logger, log_context

    logger = get_logger(__name__)

    with log_context(uplet_id=uplet_id, route="/learndone"):
        logger.error("Cannot reach orchestrator", extra={"url": url})

Handlers and formatters are left to the embedding application.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict

# Fields a report context may carry
CONTEXT_FIELDS = ("uplet_id", "uplet_type", "route")

_local = threading.local()


def current_context() -> Dict[str, str]:
    """Fields of the innermost active log_context on this thread."""
    stack = getattr(_local, "stack", None)
    if not stack:
        return {}
    return dict(stack[-1])


@contextmanager
def log_context(**fields: Any):
    """
    Add report fields to log records emitted in this block.

    Values are stringified; None leaves an outer value in place.

    Raises:
        TypeError for a field outside CONTEXT_FIELDS
    """
    unknown = set(fields) - set(CONTEXT_FIELDS)
    if unknown:
        raise TypeError(f"Unknown log context fields: {sorted(unknown)}")

    merged = current_context()
    merged.update({k: str(v) for k, v in fields.items() if v is not None})

    if not hasattr(_local, "stack"):
        _local.stack = []
    _local.stack.append(merged)
    try:
        yield merged
    finally:
        _local.stack.pop()


class ContextLogger(logging.LoggerAdapter):
    """Merges the active report context into each record's extra dict."""

    def process(self, msg, kwargs):
        data = current_context()
        data.update(kwargs.get("extra") or {})
        kwargs["extra"] = {"extra": data}
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    return ContextLogger(logging.getLogger(name), {})


__all__ = [
    "CONTEXT_FIELDS",
    "ContextLogger",
    "current_context",
    "get_logger",
    "log_context",
]
