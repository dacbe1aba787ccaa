from __future__ import annotations

"""Output channels for gamelog.

A channel is the surface a formatted line is written to. Besides ``write``,
each channel describes its markup language: ``markup`` tints a piece of text
and ``escape`` neutralises markup that happens to appear in message bodies.

Three channels (info, warning, error) are grouped in a ``ChannelSet`` and the
dispatcher picks one per message level.
"""

import abc
import re
import sys
import atexit as _atexit
import typing as t
from dataclasses import dataclass

from loguru._logger import Core as _Core
from loguru._logger import Logger as _Logger

from .formatters import LoggerFormatter
from .levels import LogLevel
from .static import CHANNEL_LOGURU_LEVELS, CHANNEL_ROUTES, RESET_COLOR

if t.TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

_MARKUP_TAG = re.compile(r"(\\*)(</?(?:[fb]g\s)?[^<>\s]*>)")


class OutputChannel(abc.ABC):
    """Destination for formatted log lines."""

    @abc.abstractmethod
    def write(self, line: str, context: t.Any = None) -> None:
        """Write ``line``; ``context`` is an optional handle shown alongside it."""

    def markup(self, text: str, color: str) -> str:
        """Wrap ``text`` in the color markup understood by this channel."""
        return f"<fg #{color}>{text}</>"

    def escape(self, text: str) -> str:
        """Make ``text`` safe to embed next to this channel's markup."""
        return text


class LoguruChannel(OutputChannel):
    """Writes lines through a loguru logger at a fixed level."""

    def __init__(self, logger: 'LoguruLogger', level: str = 'INFO'):
        self.logger = logger
        self.level = level

    def write(self, line: str, context: t.Any = None) -> None:
        log = self.logger if context is None else self.logger.bind(context=context)
        log.opt(colors=True).log(self.level, line)

    def escape(self, text: str) -> str:
        # loguru halves the backslashes in front of a tag; an odd count escapes it
        return _MARKUP_TAG.sub(lambda m: m.group(1) * 2 + "\\" + m.group(2), text)


class StreamChannel(OutputChannel):
    """Prints lines to a file handle, using ANSI 24-bit colors when enabled."""

    def __init__(self, file: t.Optional[t.TextIO] = None, colorize: t.Optional[bool] = None):
        self._file = file
        self._colorize = colorize

    @property
    def file(self) -> t.TextIO:
        return self._file if self._file is not None else sys.stderr

    @property
    def colorize(self) -> bool:
        if self._colorize is not None:
            return self._colorize
        isatty = getattr(self.file, 'isatty', None)
        return bool(isatty and isatty())

    def write(self, line: str, context: t.Any = None) -> None:
        if context is not None:
            line = f"{line} ({context})"
        print(line, file=self.file)

    def markup(self, text: str, color: str) -> str:
        if not self.colorize:
            return text
        r, g, b = (int(color[i:i + 2], 16) for i in (0, 2, 4))
        return f"\x1b[38;2;{r};{g};{b}m{text}{RESET_COLOR}"


class MemoryChannel(OutputChannel):
    """Keeps every written line in memory."""

    def __init__(self):
        self.records: t.List[t.Tuple[str, t.Any]] = []

    def write(self, line: str, context: t.Any = None) -> None:
        self.records.append((line, context))

    @property
    def lines(self) -> t.List[str]:
        return [line for line, _ in self.records]

    def clear(self) -> None:
        self.records.clear()


@dataclass
class ChannelSet:
    """The info, warning and error channels a logger routes to."""

    info: OutputChannel
    warning: OutputChannel
    error: OutputChannel

    def route(self, level: LogLevel) -> OutputChannel:
        """Return the channel for messages at ``level``."""
        return getattr(self, CHANNEL_ROUTES.get(level, 'info'))

    @classmethod
    def single(cls, channel: OutputChannel) -> 'ChannelSet':
        return cls(info=channel, warning=channel, error=channel)

    @classmethod
    def memory(cls) -> 'ChannelSet':
        return cls(info=MemoryChannel(), warning=MemoryChannel(), error=MemoryChannel())

    @classmethod
    def stream(cls, file: t.Optional[t.TextIO] = None, colorize: t.Optional[bool] = None) -> 'ChannelSet':
        return cls.single(StreamChannel(file=file, colorize=colorize))

    @classmethod
    def loguru(cls, logger: t.Optional['LoguruLogger'] = None, **kwargs: t.Any) -> 'ChannelSet':
        """Route through ``logger``, creating a dedicated one when omitted.

        ``kwargs`` are passed to :func:`create_loguru_logger`.
        """
        if logger is None:
            logger = create_loguru_logger(**kwargs)
        return cls(**{
            name: LoguruChannel(logger, level=level)
            for name, level in CHANNEL_LOGURU_LEVELS.items()
        })


def create_loguru_logger(
    sink: t.Any = None,
    colorize: t.Optional[bool] = None,
    format: t.Optional[t.Callable[[t.Dict[str, t.Any]], str]] = None,
    **kwargs: t.Any,
) -> 'LoguruLogger':
    """Create a loguru logger with its own core and a single synchronous sink.

    Its handlers are independent of ``loguru.logger``, so configuring one does
    not affect the other.

    Args:
        sink: Where to write. Defaults to ``sys.stderr``.
        colorize: Force or disable markup rendering. ``None`` lets loguru
            decide based on whether the sink is a terminal.
        format: Record formatter. Defaults to ``LoggerFormatter.default_formatter``.
        **kwargs: Forwarded to :meth:`loguru.Logger.add`.
    """
    # >= 0.7.0
    try:
        _logger = _Logger(
            core=_Core(),
            exception=None,
            depth=0,
            record=False,
            lazy=False,
            colors=False,
            raw=False,
            capture=True,
            patchers=[],
            extra={},
        )
    # < 0.7.0
    except TypeError:
        _logger = _Logger(
            core=_Core(),
            exception=None,
            depth=0,
            record=False,
            lazy=False,
            colors=False,
            raw=False,
            capture=True,
            patcher=None,
            extra={},
        )

    _logger.add(
        sink if sink is not None else sys.stderr,
        level=0,
        colorize=colorize,
        format=format if format is not None else LoggerFormatter.default_formatter,
        enqueue=False,
        backtrace=False,
        **kwargs,
    )
    _atexit.register(_logger.remove)
    return _logger


def release_loguru_logger(logger: 'LoguruLogger') -> None:
    """Remove every handler of a logger made by :func:`create_loguru_logger`."""
    logger.remove()
    _atexit.unregister(logger.remove)


__all__ = [
    "OutputChannel",
    "LoguruChannel",
    "StreamChannel",
    "MemoryChannel",
    "ChannelSet",
    "create_loguru_logger",
    "release_loguru_logger",
]
