from __future__ import annotations

"""Static mappings shared by the gamelog dispatcher, channels and formatters."""

from .levels import LogLevel


# Which output channel a message level is routed to
CHANNEL_ROUTES = {
    LogLevel.ALWAYS: 'info',
    LogLevel.ALL: 'info',
    LogLevel.INFORMATION: 'info',
    LogLevel.WARNING: 'warning',
    LogLevel.ERROR: 'error',
    LogLevel.EXCEPTION: 'error',
    LogLevel.NONE: 'info',
}

# Loguru level names used by each channel
CHANNEL_LOGURU_LEVELS = {
    'info': 'INFO',
    'warning': 'WARNING',
    'error': 'ERROR',
}

DEFAULT_CONTEXT_COLOR = '<fg #808080>'
RESET_COLOR = '\x1b[0m'

# Identity reported when no caller frame can be attributed
SENTINEL_MODULE = 'gamelog'
SENTINEL_TYPE = 'GameLogger'

DEFAULT_MAX_STACK_DEPTH = 32
