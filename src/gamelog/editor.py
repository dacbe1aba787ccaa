from __future__ import annotations

"""Editor-only logging channel.

Gated solely by ``LoggerConfig.editor_enabled``: no level filter, no caller
tag and no colors. Messages reach the level-routed channels as written.
"""

import sys
import typing as t

from .channels import ChannelSet, OutputChannel
from .levels import LogLevel
from .state import LoggerConfig
from .utils import format_exception, materialize_message

if t.TYPE_CHECKING:
    from .utils import MessageOrSupplier


class EditorLogger:
    """Development-time diagnostics that can be switched off without touching call sites."""

    def __init__(
        self,
        config: t.Optional[LoggerConfig] = None,
        channels: t.Optional[ChannelSet] = None,
    ):
        self.config = config if config is not None else LoggerConfig()
        self.channels = channels if channels is not None else ChannelSet.loguru()

    @property
    def enabled(self) -> bool:
        return self.config.editor_enabled

    def set_enabled(self, enabled: bool) -> None:
        self.config.editor_enabled = bool(enabled)

    def log(self, message: 'MessageOrSupplier', context: t.Any = None) -> None:
        if self.config.editor_enabled:
            self._emit(LogLevel.INFORMATION, message, context)

    def warning(self, message: 'MessageOrSupplier', context: t.Any = None) -> None:
        if self.config.editor_enabled:
            self._emit(LogLevel.WARNING, message, context)

    def error(self, message: 'MessageOrSupplier', context: t.Any = None) -> None:
        if self.config.editor_enabled:
            self._emit(LogLevel.ERROR, message, context)

    def exception(self, error: t.Union[BaseException, 'MessageOrSupplier'], context: t.Any = None) -> None:
        if not self.config.editor_enabled:
            return
        if isinstance(error, BaseException):
            exc = error
            error = lambda: format_exception(exc)
        self._emit(LogLevel.EXCEPTION, error, context)

    info = log

    def _emit(self, level: LogLevel, message: 'MessageOrSupplier', context: t.Any) -> None:
        channel: OutputChannel = self.channels.route(level)
        line = channel.escape(materialize_message(message))
        try:
            channel.write(line, context)
        except Exception as e:
            stream = sys.__stderr__
            if stream is not None:
                stream.write(f"--- gamelog: {channel.__class__.__name__} failed to write ({e.__class__.__name__}: {e}) ---\n")


__all__ = ["EditorLogger"]
