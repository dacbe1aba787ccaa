from __future__ import annotations

"""Factory helpers and the process-default gamelog loggers.

The module-level functions mirror a host's debug-print facility, so call sites
can switch to gamelog by changing an import.
"""

import sys
import threading
import typing as t

from pydantic import ValidationError
from pydantic_settings import SettingsError

from .base import GameLogger
from .caller import CallerResolver
from .channels import ChannelSet, create_loguru_logger, release_loguru_logger
from .colors import ColorMapping
from .editor import EditorLogger
from .levels import LogLevel
from .null_logger import NullEditorLogger
from .settings import GameLogSettings
from .state import LoggerConfig

if t.TYPE_CHECKING:
    from .colors import ColorLookup
    from .utils import MessageOrSupplier

_lock = threading.Lock()
_logger: t.Optional[GameLogger] = None
_editor_logger: t.Optional[t.Union[EditorLogger, NullEditorLogger]] = None
_loguru_logger: t.Optional[t.Any] = None


def _get_sink(settings: GameLogSettings) -> t.TextIO:
    return sys.stdout if settings.sink == 'stdout' else sys.stderr


def create_config(settings: t.Optional[GameLogSettings] = None) -> LoggerConfig:
    """Build the shared configuration value from ``settings``."""
    settings = settings if settings is not None else GameLogSettings()
    return LoggerConfig(level=settings.level, editor_enabled=settings.editor_default)


def create_logger(
    settings: t.Optional[GameLogSettings] = None,
    config: t.Optional[LoggerConfig] = None,
    channels: t.Optional[ChannelSet] = None,
    colors: t.Optional['ColorLookup'] = None,
) -> GameLogger:
    """Create a dispatch logger configured from ``settings``.

    Args:
        settings: Startup settings. Read from the environment when omitted.
        config: Shared configuration value. Built from ``settings`` when omitted.
        channels: Output channels. Defaults to a dedicated loguru logger writing
            to the configured sink.
        colors: Color lookup service. Defaults to ``settings.colors``.
    """
    settings = settings if settings is not None else GameLogSettings()
    if config is None:
        config = create_config(settings)
    if channels is None:
        channels = ChannelSet.loguru(sink=_get_sink(settings))
    if colors is None and settings.colors:
        colors = ColorMapping.from_mapping(settings.colors)
    return GameLogger(
        config=config,
        channels=channels,
        colors=colors,
        resolver=CallerResolver(max_depth=settings.max_stack_depth),
        colored=settings.colors_default,
        annotate=settings.annotate,
    )


def create_editor_logger(
    settings: t.Optional[GameLogSettings] = None,
    config: t.Optional[LoggerConfig] = None,
    channels: t.Optional[ChannelSet] = None,
) -> t.Union[EditorLogger, NullEditorLogger]:
    """Create the editor-channel logger, or its no-op variant for stripped builds."""
    settings = settings if settings is not None else GameLogSettings()
    if settings.strip_editor:
        return NullEditorLogger(config)
    if config is None:
        config = create_config(settings)
    return EditorLogger(config=config, channels=channels)


def init_logger(
    settings: t.Optional[GameLogSettings] = None,
    channels: t.Optional[ChannelSet] = None,
    colors: t.Optional['ColorLookup'] = None,
) -> GameLogger:
    """Initialise the process-default loggers.

    The dispatch logger and the editor logger share one ``LoggerConfig`` and
    one set of channels. Call once at startup; calling again replaces both and
    releases the loguru handlers created for the previous defaults.
    """
    global _logger, _editor_logger, _loguru_logger
    settings = settings if settings is not None else GameLogSettings()
    with _lock:
        loguru_logger = None
        if channels is None:
            loguru_logger = create_loguru_logger(sink=_get_sink(settings))
            channels = ChannelSet.loguru(loguru_logger)
        logger = create_logger(settings, channels=channels, colors=colors)
        _editor_logger = create_editor_logger(settings, config=logger.config, channels=logger.channels)
        _logger = logger
        previous, _loguru_logger = _loguru_logger, loguru_logger
    if previous is not None:
        release_loguru_logger(previous)
    return logger


def _load_default_settings() -> GameLogSettings:
    """Read settings from the environment, falling back to the defaults when they are invalid."""
    try:
        return GameLogSettings()
    except (ValidationError, SettingsError) as e:
        stream = sys.__stderr__
        if stream is not None:
            stream.write(f"--- gamelog: invalid settings, using defaults ({e.__class__.__name__}: {e}) ---\n")
        return GameLogSettings.model_construct()


def get_logger() -> GameLogger:
    """Return the process-default logger, creating it from the environment if needed."""
    if _logger is None:
        init_logger(_load_default_settings())
    return _logger


def get_editor_logger() -> t.Union[EditorLogger, NullEditorLogger]:
    if _editor_logger is None:
        init_logger(_load_default_settings())
    return _editor_logger


def get_config() -> LoggerConfig:
    return get_logger().config


"""
Drop-in module-level API
"""

def set_log_level(level: t.Union[LogLevel, str, int]) -> None:
    get_logger().set_log_level(level)


def get_log_level() -> LogLevel:
    return get_logger().level


def set_editor_enabled(enabled: bool) -> None:
    get_editor_logger().set_enabled(enabled)


def log(level: t.Union[LogLevel, str, int], message: 'MessageOrSupplier', context: t.Any = None) -> None:
    get_logger().log(level, message, context)


def info(message: 'MessageOrSupplier', context: t.Any = None) -> None:
    get_logger().info(message, context)


def warning(message: 'MessageOrSupplier', context: t.Any = None) -> None:
    get_logger().warning(message, context)


def error(message: 'MessageOrSupplier', context: t.Any = None) -> None:
    get_logger().error(message, context)


def exception(error: t.Union[BaseException, 'MessageOrSupplier'], context: t.Any = None) -> None:
    get_logger().exception(error, context)


def always(message: 'MessageOrSupplier', context: t.Any = None) -> None:
    get_logger().always(message, context)


def editor_log(message: 'MessageOrSupplier', context: t.Any = None) -> None:
    get_editor_logger().log(message, context)


def editor_warning(message: 'MessageOrSupplier', context: t.Any = None) -> None:
    get_editor_logger().warning(message, context)


def editor_error(message: 'MessageOrSupplier', context: t.Any = None) -> None:
    get_editor_logger().error(message, context)


__all__ = [
    "create_config",
    "create_logger",
    "create_editor_logger",
    "init_logger",
    "get_logger",
    "get_editor_logger",
    "get_config",
    "set_log_level",
    "get_log_level",
    "set_editor_enabled",
    "log",
    "info",
    "warning",
    "error",
    "exception",
    "always",
    "editor_log",
    "editor_warning",
    "editor_error",
]
