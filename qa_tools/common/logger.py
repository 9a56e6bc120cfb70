"""
================================================================================
Structured Logger
================================================================================

Leveled, contextual logging facade for the automation suites.

Key Features:
  - JSON-line output by default (easy to parse in CI), plain lines on demand
  - Child loggers that inherit and extend the parent's context
  - One output sink per level; by default each level is routed to loguru
  - Serialisation never raises from inside a logging call

The default sinks emit bare records only once loguru has been configured by
``qa_tools.common.global_config.init_logger()`` (format ``{message}``). Before
that, loguru's own default handler prefixes each line with its time, level
and location.

Usage:
  log = create_logger({"svc": "qa-automation"})
  step_log = log.child({"test": "checkout"})
  step_log.info("Cart loaded", {"items": 2})

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Union

from loguru import logger as _loguru

from .utils import now_iso, safe_json_dumps


class LogLevel(str, Enum):
    """Ordered log levels: debug < info < warn < error."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return LEVEL_RANK[self]

    @classmethod
    def parse(cls, value: Union["LogLevel", str]) -> "LogLevel":
        """
        Coerce a level name into a LogLevel.

        Accepts enum members and case-insensitive names; ``warning`` is an
        alias for ``warn``.

        Raises:
            ValueError: If the name is not a known level
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "warning":
            name = "warn"
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Unknown log level: {value!r}. Expected one of: "
                f"{', '.join(level.value for level in cls)}"
            ) from None


LEVEL_RANK: Dict[LogLevel, int] = {
    LogLevel.DEBUG: 10,
    LogLevel.INFO: 20,
    LogLevel.WARN: 30,
    LogLevel.ERROR: 40,
}

# loguru level names used by the default sinks
LOGURU_LEVELS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARNING",
    LogLevel.ERROR: "ERROR",
}

Sink = Callable[[str], None]


@dataclass(frozen=True)
class LoggerSettings:
    """
    Explicit logger configuration.

    Built once at startup (see ``global_config.load_logger_settings``) and
    passed to the loggers, so the logger itself never reads the environment.

    Attributes:
        level: Explicit minimum level, or None to use the CI-dependent default
        ci: Whether the suite runs under CI
        structured: Emit JSON lines instead of plain lines
    """
    level: Optional[LogLevel] = None
    ci: bool = False
    structured: bool = True

    @property
    def default_level(self) -> LogLevel:
        # CI: only warnings and errors. Local: full info logging.
        if self.level is not None:
            return LogLevel.parse(self.level)
        return LogLevel.WARN if self.ci else LogLevel.INFO


def _route_to_loguru(level_name: str) -> Sink:
    def sink(line: str) -> None:
        _loguru.opt(depth=3).log(level_name, line)
    return sink


def loguru_sinks() -> Dict[LogLevel, Sink]:
    """Default sinks: one loguru-backed writer per level."""
    return {level: _route_to_loguru(name) for level, name in LOGURU_LEVELS.items()}


class Logger:
    """
    Leveled, contextual logger.

    Each instance owns its level and context. ``child()`` returns a new,
    independent instance; changing a child's level never affects its parent.
    """

    def __init__(
        self,
        level: Optional[Union[LogLevel, str]] = None,
        structured: Optional[bool] = None,
        context: Optional[Mapping[str, Any]] = None,
        sinks: Optional[Mapping[LogLevel, Sink]] = None,
        settings: Optional[LoggerSettings] = None,
    ):
        """
        Initialize logger.

        Args:
            level: Minimum level. Defaults to ``settings.default_level``
            structured: JSON-line output. Defaults to ``settings.structured``
            context: Fields merged into every structured record
            sinks: Per-level writers. Defaults to loguru routing
            settings: Startup configuration used for unset options
        """
        settings = settings or LoggerSettings()
        self._level = LogLevel.parse(level) if level is not None else settings.default_level
        self._structured = settings.structured if structured is None else structured
        self._context: Dict[str, Any] = dict(context or {})
        self._sinks: Dict[LogLevel, Sink] = dict(sinks) if sinks is not None else loguru_sinks()

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def structured(self) -> bool:
        return self._structured

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def set_level(self, level: Union[LogLevel, str]) -> None:
        """Change the minimum level of this instance only."""
        self._level = LogLevel.parse(level)

    def child(self, context: Mapping[str, Any]) -> "Logger":
        """
        Derive a logger with extra context.

        The child's context is the parent's overlaid with ``context``
        (child entries win on key collision).
        """
        return Logger(
            level=self._level,
            structured=self._structured,
            context={**self._context, **context},
            sinks=self._sinks,
        )

    def is_enabled_for(self, level: Union[LogLevel, str]) -> bool:
        return LogLevel.parse(level).rank >= self._level.rank

    def format(self, level: LogLevel, msg: str, extra: Any = None) -> str:
        """Render a single record without emitting it."""
        time = now_iso()
        if self._structured:
            # time/level/msg are written last so context can never overwrite them
            record: Dict[str, Any] = {**self._context, "time": time, "level": level.value, "msg": msg}
            if extra is not None:
                record["extra"] = extra
            return safe_json_dumps(record)

        line = f"[{time}] [{level.value.upper()}] {msg}"
        if extra is not None:
            line += f" {safe_json_dumps(extra)}"
        return line

    def _emit(self, level: LogLevel, msg: str, extra: Any) -> None:
        if not self.is_enabled_for(level):
            return
        self._sinks[level](self.format(level, msg, extra))

    def debug(self, msg: str, extra: Any = None) -> None:
        self._emit(LogLevel.DEBUG, msg, extra)

    def info(self, msg: str, extra: Any = None) -> None:
        self._emit(LogLevel.INFO, msg, extra)

    def warn(self, msg: str, extra: Any = None) -> None:
        self._emit(LogLevel.WARN, msg, extra)

    def error(self, msg: str, extra: Any = None) -> None:
        self._emit(LogLevel.ERROR, msg, extra)

    def __repr__(self) -> str:
        return f"Logger(level={self._level.value!r}, structured={self._structured}, context={self._context!r})"


def create_logger(
    context: Optional[Mapping[str, Any]] = None,
    level: Optional[Union[LogLevel, str]] = None,
    settings: Optional[LoggerSettings] = None,
) -> Logger:
    """
    Convenience factory for a Logger.

    Example:
        log = create_logger({"svc": "qa-automation"}, settings=load_logger_settings())
    """
    return Logger(level=level, context=context, settings=settings)


__all__ = [
    "LogLevel",
    "LEVEL_RANK",
    "LoggerSettings",
    "Logger",
    "create_logger",
    "loguru_sinks",
]
