from __future__ import annotations

"""Severity model for the gamelog dispatch engine.

``LogLevel`` orders ``ALL < INFORMATION < WARNING < ERROR < EXCEPTION < NONE``.
``ALWAYS`` is kept out of that order on purpose: comparing it raises
``TypeError`` and the dispatcher handles it before any comparison happens.
"""

import functools
import typing as t
from enum import Enum


@functools.total_ordering
class LogLevel(Enum):
    """Runtime filter and message severity."""

    ALWAYS = -1
    ALL = 0
    INFORMATION = 1
    WARNING = 2
    ERROR = 3
    EXCEPTION = 4
    NONE = 5

    def _rank(self, other: t.Any) -> t.Optional[tuple[int, int]]:
        if not isinstance(other, LogLevel):
            return None
        if self is LogLevel.ALWAYS or other is LogLevel.ALWAYS:
            raise TypeError("LogLevel.ALWAYS does not take part in level ordering")
        return self.value, other.value

    def __lt__(self, other: t.Any) -> bool:
        ranks = self._rank(other)
        if ranks is None:
            return NotImplemented
        return ranks[0] < ranks[1]

    @classmethod
    def parse(cls, value: t.Union['LogLevel', str, int]) -> 'LogLevel':
        """Resolve a member from a name, alias or integer value.

        >>> LogLevel.parse('warn')
        <LogLevel.WARNING: 2>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid log level: {value!r}")
        if isinstance(value, int):
            for member in cls:
                if member.value == value:
                    return member
            raise ValueError(f"Invalid log level: {value!r}")
        if isinstance(value, str):
            key = value.strip().upper()
            if key.lstrip('-').isdigit():
                return cls.parse(int(key))
            key = LEVEL_ALIASES.get(key, key)
            if key in cls.__members__:
                return cls.__members__[key]
        raise ValueError(f"Invalid log level: {value!r}")


LEVEL_ALIASES: dict[str, str] = {
    'INFO': 'INFORMATION',
    'WARN': 'WARNING',
    'ERR': 'ERROR',
    'FATAL': 'EXCEPTION',
    'OFF': 'NONE',
}


def should_log(level: LogLevel, threshold: LogLevel) -> bool:
    """Return ``True`` when a message at ``level`` passes ``threshold``.

    ``ALWAYS`` passes unconditionally, including when the threshold is
    ``NONE``. ``NONE`` as a threshold suppresses every other level.
    """
    if level is LogLevel.ALWAYS:
        return True
    if threshold is LogLevel.NONE or threshold is LogLevel.ALWAYS:
        return False
    return level >= threshold


__all__ = [
    "LogLevel",
    "LEVEL_ALIASES",
    "should_log",
]
