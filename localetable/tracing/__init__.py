"""Tracing and logging for localetable loads."""

from .logger import LoadTracer, get_tracer, log_load_event, setup_tracing

__all__ = [
    "LoadTracer",
    "get_tracer",
    "setup_tracing",
    "log_load_event",
]
