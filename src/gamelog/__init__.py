from __future__ import annotations

"""Public façade for gamelog.

gamelog is a level-filtered logging facade that tags every line with the type
that issued it, colors that tag per type, builds messages lazily and offers a
separately switched editor-only channel. This module re-exports the entry
points so callers can import everything from a single location.
"""

from .levels import LogLevel, should_log
from .state import (
    LoggerConfig,
    register_wrapper_module,
    unregister_wrapper_module,
)
from .caller import (
    CallerIdentity,
    CallerResolver,
    SENTINEL_IDENTITY,
    identity_of,
)
from .colors import (
    ColorLookup,
    ColorMapping,
    ColorEntry,
    to_html_rgb,
)
from .channels import (
    OutputChannel,
    LoguruChannel,
    StreamChannel,
    MemoryChannel,
    ChannelSet,
    create_loguru_logger,
    release_loguru_logger,
)
from .settings import GameLogSettings
from .base import GameLogger
from .editor import EditorLogger
from .null_logger import NullEditorLogger
from .main import (
    create_config,
    create_logger,
    create_editor_logger,
    init_logger,
    get_logger,
    get_editor_logger,
    get_config,
    set_log_level,
    get_log_level,
    set_editor_enabled,
    log,
    info,
    warning,
    error,
    exception,
    always,
    editor_log,
    editor_warning,
    editor_error,
)

__all__ = [
    "LogLevel",
    "should_log",
    "LoggerConfig",
    "register_wrapper_module",
    "unregister_wrapper_module",
    "CallerIdentity",
    "CallerResolver",
    "SENTINEL_IDENTITY",
    "identity_of",
    "ColorLookup",
    "ColorMapping",
    "ColorEntry",
    "to_html_rgb",
    "OutputChannel",
    "LoguruChannel",
    "StreamChannel",
    "MemoryChannel",
    "ChannelSet",
    "create_loguru_logger",
    "release_loguru_logger",
    "GameLogSettings",
    "GameLogger",
    "EditorLogger",
    "NullEditorLogger",
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
