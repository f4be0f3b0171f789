"""Load event tracing for localetable.

Events always go to the ``localetable`` logger and a bounded in-memory
buffer. Nothing reaches the console until ``setup_tracing`` attaches a
stderr handler; stdout is reserved for CLI output.
"""

import logging
import sys
from collections import deque
from datetime import datetime
from typing import Any

LOGGER_NAME = "localetable"
MAX_EVENTS = 500

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"

# Library default: silent unless an application configures handlers
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _console_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]


class LoadTracer:
    """Records load events (file reads, malformed lines, declarations).

    Only the most recent ``max_events`` events are kept.
    """

    def __init__(
        self,
        name: str = LOGGER_NAME,
        console: bool = False,
        max_events: int = MAX_EVENTS,
    ):
        self.logger = logging.getLogger(name)
        self.events: deque[dict[str, Any]] = deque(maxlen=max_events)
        if console:
            self._attach_console()
        else:
            self._detach_console()

    def _attach_console(self) -> None:
        if _console_handlers(self.logger):
            return
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        self.logger.addHandler(handler)

    def _detach_console(self) -> None:
        for handler in _console_handlers(self.logger):
            self.logger.removeHandler(handler)

    def log(
        self,
        event_type: str,
        source: str,
        message: str,
        data: dict[str, Any] | None = None,
        level: int = logging.INFO,
    ) -> None:
        """Record an event and emit it on the logger.

        Args:
            event_type: e.g. "load_start", "malformed_line".
            source: File the event relates to.
            message: Human-readable message.
            data: Optional extra fields.
            level: Logging level for the emitted record.
        """
        self.events.append({
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            "source": source,
            "message": message,
            "data": data or {},
        })

        log_msg = f"[{source}] {event_type}: {message}"
        if data:
            log_msg += f" | {data}"
        self.logger.log(level, log_msg)

    def get_events(self, event_type: str | None = None) -> list[dict[str, Any]]:
        """Get buffered events, optionally filtered by type."""
        return [e for e in self.events if event_type is None or e["event_type"] == event_type]

    def clear(self) -> None:
        self.events.clear()


_tracer: LoadTracer | None = None


def setup_tracing(log_level: str = "INFO", console: bool = True) -> LoadTracer:
    """Replace the global tracer.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        console: Attach a stderr handler; False removes any existing one.

    Returns:
        The new LoadTracer.
    """
    global _tracer
    _tracer = LoadTracer(console=console)
    _tracer.logger.setLevel(getattr(logging, log_level.upper()))
    return _tracer


def get_tracer() -> LoadTracer:
    """Get the global tracer, creating a quiet one on first use."""
    global _tracer
    if _tracer is None:
        _tracer = LoadTracer()
    return _tracer


def log_load_event(
    event_type: str,
    source: str,
    message: str,
    data: dict[str, Any] | None = None,
    level: int = logging.INFO,
) -> None:
    """Log a load event using the global tracer."""
    get_tracer().log(event_type, source, message, data, level)
