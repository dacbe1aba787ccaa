from __future__ import annotations

"""
The gamelog dispatch engine: level filter, lazy messages, caller annotation.
"""

import copy
import sys
import typing as t

from .caller import CallerIdentity, CallerResolver, identity_of
from .channels import ChannelSet, OutputChannel
from .levels import LogLevel, should_log
from .state import LoggerConfig
from .utils import format_exception, materialize_message

if t.TYPE_CHECKING:
    from .colors import ColorLookup
    from .utils import MessageOrSupplier


class GameLogger:
    """Level-filtered logger that tags each line with the calling type.

    Usage::

        log = GameLogger(channels=ChannelSet.loguru())
        log.set_log_level('warning')
        log.info(lambda: expensive_summary())   # never evaluated
        log.warning("low ammo")                  # "[Player] low ammo"

    Messages may be given as values or as zero-argument callables; callables
    are only invoked when the message passes the filter. Nothing raised while
    producing, formatting or writing a message escapes a log call.
    """

    def __init__(
        self,
        config: t.Optional[LoggerConfig] = None,
        channels: t.Optional[ChannelSet] = None,
        colors: t.Optional['ColorLookup'] = None,
        resolver: t.Optional[CallerResolver] = None,
        colored: bool = True,
        annotate: bool = True,
        max_length: t.Optional[int] = None,
    ):
        self.config = config if config is not None else LoggerConfig()
        self.channels = channels if channels is not None else ChannelSet.loguru()
        self.colors = colors
        self.resolver = resolver if resolver is not None else CallerResolver()
        self.colored = colored
        self.annotate = annotate
        self.max_length = max_length
        self._identity: t.Optional[CallerIdentity] = None

    @property
    def level(self) -> LogLevel:
        """Current filter level."""
        return self.config.level

    def set_log_level(self, level: t.Union[LogLevel, str, int]) -> None:
        """Adjust the filter level at runtime."""
        self.config.level = level

    def should_log(self, level: LogLevel) -> bool:
        return should_log(level, self.config.level)

    def bind(self, caller: t.Any) -> 'GameLogger':
        """Return a logger that always reports ``caller`` as its origin.

        ``caller`` may be a dotted name, a class or an instance. The bound
        logger shares configuration, channels and colors with this one and
        never walks the stack.
        """
        bound = copy.copy(self)
        bound._identity = identity_of(caller)
        return bound

    """
    Dispatch
    """

    def log(self, level: t.Union[LogLevel, str, int], message: 'MessageOrSupplier', context: t.Any = None) -> None:
        """Log ``message`` with severity ``level``."""
        if not isinstance(level, LogLevel):
            try:
                level = LogLevel.parse(level)
            except ValueError:
                level = LogLevel.INFORMATION
        self._dispatch(level, message, context)

    def info(self, message: 'MessageOrSupplier', context: t.Any = None) -> None:
        self._dispatch(LogLevel.INFORMATION, message, context)

    def warning(self, message: 'MessageOrSupplier', context: t.Any = None) -> None:
        self._dispatch(LogLevel.WARNING, message, context)

    def error(self, message: 'MessageOrSupplier', context: t.Any = None) -> None:
        self._dispatch(LogLevel.ERROR, message, context)

    def exception(self, error: t.Union[BaseException, 'MessageOrSupplier'], context: t.Any = None) -> None:
        """Log at ``EXCEPTION``; exceptions are rendered with their traceback."""
        if isinstance(error, BaseException):
            exc = error
            error = lambda: format_exception(exc)
        self._dispatch(LogLevel.EXCEPTION, error, context)

    def always(self, message: 'MessageOrSupplier', context: t.Any = None) -> None:
        """Log regardless of the filter, even at ``LogLevel.NONE``."""
        self._dispatch(LogLevel.ALWAYS, message, context)

    def _dispatch(self, level: LogLevel, message: 'MessageOrSupplier', context: t.Any) -> None:
        if not should_log(level, self.config.level):
            return
        channel = self.channels.route(level)
        body = materialize_message(message, max_length=self.max_length)
        line = self.format(body, channel) if self.annotate else channel.escape(body)
        self._write(channel, line, context)

    """
    Formatting
    """

    def identify(self) -> CallerIdentity:
        """Return the identity a log call made right now would be tagged with."""
        if self._identity is not None:
            return self._identity
        return self.resolver.identify()

    def lookup_color(self, identity: CallerIdentity) -> t.Optional[str]:
        """Return the color for ``identity`` or ``None`` when unavailable."""
        if not self.colored or self.colors is None:
            return None
        try:
            return self.colors.lookup(identity.full_name)
        except Exception:
            return None

    def format(self, body: str, channel: OutputChannel) -> str:
        """Prefix ``body`` with the caller tag, colored only if a color is set."""
        identity = self.identify()
        prefix = channel.escape(f"[{identity.short_name}]")
        color = self.lookup_color(identity)
        if color:
            prefix = channel.markup(prefix, color)
        return f"{prefix} {channel.escape(body)}"

    def _write(self, channel: OutputChannel, line: str, context: t.Any) -> None:
        try:
            channel.write(line, context)
        except Exception as e:
            stream = sys.__stderr__
            if stream is not None:
                stream.write(f"--- gamelog: {channel.__class__.__name__} failed to write ({e.__class__.__name__}: {e}) ---\n")

    def __repr__(self) -> str:
        bound = f", bound={self._identity.full_name}" if self._identity else ""
        return f"{self.__class__.__name__}(level={self.config.level.name}{bound})"


__all__ = ["GameLogger"]
