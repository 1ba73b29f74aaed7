"""Structured logging with bound context.

Container and chain internals log through BoundLogger: key-value context,
human-readable console output for development and JSON lines for aggregation.
Nothing is emitted below WARNING unless configured, so library internals stay
quiet by default.

Quick Start:
    >>> from frozencase.runtime.observability import configure_logging, get_logger
    >>> configure_logging(format="console", level="DEBUG")
    >>> log = get_logger("frozencase.try")
    >>> log.debug("fault captured", error_type="ZeroDivisionError")
"""

from __future__ import annotations

import dataclasses
import logging
import sys
import time
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Callable, Protocol, TextIO, Union, runtime_checkable

import orjson

if TYPE_CHECKING:
    from types import TracebackType

    from frozencase.foundation.config import FrozencaseSettings

JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]

_LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}

_scoped_context: ContextVar[JsonDict] = ContextVar("frozencase_log_context", default={})


# ─────────────────────────────────────────────────────────────────────────────
# Entries & renderers
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class LogEntry:
    """One log event with its merged context."""

    timestamp: float
    level: str
    event: str
    context: JsonDict

    def clock(self) -> str:
        """Wall-clock time with milliseconds, e.g. ``14:02:07.513``."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]

    def record(self) -> JsonDict:
        """Flat mapping for machine output; context keys follow the fixed fields."""
        stamp = datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()
        return {"timestamp": stamp, "level": self.level, "event": self.event, **self.context}


@runtime_checkable
class LogRenderer(Protocol):
    """Anything that can write a LogEntry somewhere."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable lines: ``[level] event key=value ...`` (optionally timestamped)."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    show_timestamp: bool = True

    def format(self, entry: LogEntry) -> str:
        head = f"[{entry.level}] {entry.event}"
        if self.show_timestamp:
            head = f"{entry.clock()} {head}"
        pairs = (f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in sorted(entry.context.items()))
        return " ".join((head, *pairs))

    def render(self, entry: LogEntry) -> None:
        self.output.write(self.format(entry) + "\n")


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines through orjson; values it cannot encode are written as their repr."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        line = orjson.dumps(entry.record(), option=orjson.OPT_NON_STR_KEYS, default=repr)
        self.output.write(line.decode() + "\n")


@dataclass(slots=True)
class NoOpRenderer:
    """Discards everything."""

    def render(self, entry: LogEntry) -> None:
        return None


_RENDERERS: dict[str, Callable[[TextIO | None], LogRenderer]] = {
    "console": lambda out: ConsoleRenderer(output=out or sys.stderr),
    "json": lambda out: JsonRenderer(output=out or sys.stdout),
    "none": lambda out: NoOpRenderer(),
}


# ─────────────────────────────────────────────────────────────────────────────
# Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class BoundLogger:
    """Logger carrying key-value context. bind/unbind/new derive new loggers.

    Example:
        >>> log = BoundLogger(context={"container": "ImmutableTreeSet"})
        >>> log.debug("range degraded to empty", operation="sub_set")
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int = logging.WARNING

    def _derive(self, context: JsonDict) -> BoundLogger:
        return dataclasses.replace(self, context=context)

    def bind(self, **kw: JsonValue) -> BoundLogger:
        return self._derive({**self.context, **kw})

    def unbind(self, *keys: str) -> BoundLogger:
        return self._derive({k: v for k, v in self.context.items() if k not in keys})

    def new(self, **kw: JsonValue) -> BoundLogger:
        """Drop inherited context and start over with kw."""
        return self._derive(dict(kw))

    def is_enabled_for(self, level: int) -> bool:
        return level >= self._level

    def _emit(self, level: int, event: str, fields: JsonDict) -> None:
        if level < self._level:
            return
        entry = LogEntry(
            timestamp=time.time(),
            level=_LEVEL_NAMES.get(level) or logging.getLevelName(level).lower(),
            event=event,
            context={**_scoped_context.get(), **self.context, **fields},
        )
        (self._renderer or _current_renderer()).render(entry)

    def debug(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.DEBUG, event, kw)

    def info(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.INFO, event, kw)

    def warning(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.WARNING, event, kw)

    def error(self, event: str, **kw: JsonValue) -> None:
        self._emit(logging.ERROR, event, kw)


# ─────────────────────────────────────────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class _LoggingState:
    """Process-wide renderer and threshold, shared by every thread."""

    renderer: LogRenderer | None = None
    level: int = logging.WARNING


_state = _LoggingState()


def configure_logging(
    format: str = "console",  # noqa: A002
    level: str = "WARNING",
    *,
    output: TextIO | None = None,
) -> LogRenderer:
    """Select the renderer ("console", "json" or "none") and the minimum level.

    The choice is process-wide: loggers obtained from get_logger() afterwards,
    in any thread (including parallel_map workers), pick it up. Only
    log_context scopes are per-context.
    """
    try:
        factory = _RENDERERS[format]
    except KeyError:
        raise ValueError(f"Unknown format: {format}. Use one of {', '.join(_RENDERERS)}") from None
    renderer = factory(output)
    _state.level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
    _state.renderer = renderer
    return renderer


def configure_from_settings(settings: FrozencaseSettings | None = None) -> LogRenderer:
    """Apply the logging section of FrozencaseSettings (``debug`` forces DEBUG)."""
    if settings is None:
        from frozencase.foundation.config import get_settings
        settings = get_settings()
    return configure_logging(settings.logging.format, settings.effective_log_level)


def get_logger(name: str | None = None, **initial_context: JsonValue) -> BoundLogger:
    """Logger at the configured level; name, when given, is bound as ``logger``."""
    context: JsonDict = dict(initial_context)
    if name:
        context["logger"] = name
    return BoundLogger(context=context, _level=_state.level)


def _current_renderer() -> LogRenderer:
    if _state.renderer is None:
        _state.renderer = ConsoleRenderer()
    return _state.renderer


class log_context:
    """Adds key-value pairs to every entry logged inside the ``with`` block."""

    __slots__ = ("_fields", "_token")

    def __init__(self, **kw: JsonValue) -> None:
        self._fields: JsonDict = kw
        self._token: Token[JsonDict] | None = None

    def __enter__(self) -> log_context:
        self._token = _scoped_context.set({**_scoped_context.get(), **self._fields})
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> None:
        if self._token is not None:
            _scoped_context.reset(self._token)
            self._token = None
