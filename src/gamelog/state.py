from __future__ import annotations

"""Shared state for gamelog: the logger configuration value and wrapper modules."""

import functools
import typing as t

from .levels import LogLevel

_wrapper_modules: set[str] = {'gamelog'}


class LoggerConfig:
    """Mutable configuration shared by reference between loggers.

    Holds the current filter level and the editor-channel flag. Both are
    single attribute stores, so readers on other threads never observe a
    partially written value.
    """

    __slots__ = ('_level', 'editor_enabled')

    def __init__(
        self,
        level: t.Union[LogLevel, str, int] = LogLevel.ALL,
        editor_enabled: bool = True,
    ) -> None:
        self._level = LogLevel.ALL
        self.level = level
        self.editor_enabled = bool(editor_enabled)

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: t.Union[LogLevel, str, int]) -> None:
        level = LogLevel.parse(value)
        if level is LogLevel.ALWAYS:
            raise ValueError("LogLevel.ALWAYS cannot be used as a filter level")
        self._level = level

    def __repr__(self) -> str:
        return f"LoggerConfig(level={self._level.name}, editor_enabled={self.editor_enabled})"


def register_wrapper_module(module: str) -> None:
    """Record ``module`` (and its submodules) as a logging wrapper.

    Frames from wrapper modules are skipped when resolving the caller, which
    lets projects put their own helpers in front of gamelog.
    """
    _wrapper_modules.add(module)
    is_wrapper_module.cache_clear()


def unregister_wrapper_module(module: str) -> None:
    """Remove a module previously added with :func:`register_wrapper_module`."""
    if module == 'gamelog':
        raise ValueError("The gamelog package itself is always a wrapper module")
    _wrapper_modules.discard(module)
    is_wrapper_module.cache_clear()


@functools.lru_cache(maxsize=1000)
def is_wrapper_module(name: str) -> bool:
    """Return ``True`` when ``name`` is a registered wrapper module or inside one."""
    return any(name == module or name.startswith(f"{module}.") for module in _wrapper_modules)


__all__ = [
    "LoggerConfig",
    "register_wrapper_module",
    "unregister_wrapper_module",
    "is_wrapper_module",
]
