from __future__ import annotations

"""Caller identity resolution.

The resolver walks the interpreter stack outward from the dispatcher until it
leaves the registered wrapper modules, then attributes the call to the
nearest *declared* type enclosing the code that made it.

Synthesized scopes are recognised by the interpreter's naming convention for
them: every qualified-name component wrapped in angle brackets (``<lambda>``,
``<genexpr>``, ``<listcomp>``, ``<locals>`` ...) is generated rather than
declared. ``<locals>`` marks the body of the function right before it, so that
function is stripped along with it. Whatever is left names a class; if nothing
is left, the module itself is the identity.
"""

import functools
import sys
import typing as t
from dataclasses import dataclass

from .state import is_wrapper_module
from .static import DEFAULT_MAX_STACK_DEPTH, SENTINEL_MODULE, SENTINEL_TYPE
from .utils import get_short_name

if t.TYPE_CHECKING:
    from types import FrameType


@dataclass(frozen=True)
class CallerIdentity:
    """Logical origin of a log call."""

    full_name: str
    short_name: str

    @classmethod
    def from_name(cls, name: str) -> 'CallerIdentity':
        return cls(full_name=name, short_name=get_short_name(name))

    def __str__(self) -> str:
        return self.full_name


SENTINEL_IDENTITY = CallerIdentity(
    full_name=f"{SENTINEL_MODULE}.{SENTINEL_TYPE}",
    short_name=SENTINEL_TYPE,
)


def is_synthetic_name(name: str) -> bool:
    """Return ``True`` for qualified-name parts generated by the compiler."""
    return name.startswith('<')


def declared_type_path(qualname: str) -> list[str]:
    """Return the qualified-name parts of the type declaring ``qualname``.

    >>> declared_type_path('Widget.update.<locals>.<lambda>')
    ['Widget']
    >>> declared_type_path('build.<locals>.Inner.run')
    ['build', '<locals>', 'Inner']
    """
    parts = qualname.split('.')[:-1]
    while parts and is_synthetic_name(parts[-1]):
        if parts.pop() == '<locals>' and parts:
            parts.pop()
    return parts


@functools.lru_cache(maxsize=1024)
def resolve_identity(module: str, qualname: str) -> CallerIdentity:
    """Attribute code named ``qualname`` in ``module`` to its declaring type."""
    parts = declared_type_path(qualname)
    if not parts:
        return CallerIdentity.from_name(module)
    return CallerIdentity(
        full_name=f"{module}.{'.'.join(parts)}",
        short_name=parts[-1],
    )


def identity_of(caller: t.Any) -> CallerIdentity:
    """Build an identity from an explicit caller tag.

    Accepts an identity, a dotted name, a class or an instance of one.
    """
    if isinstance(caller, CallerIdentity):
        return caller
    if isinstance(caller, str):
        return CallerIdentity.from_name(caller)
    cls = caller if isinstance(caller, type) else type(caller)
    return CallerIdentity(
        full_name=f"{cls.__module__}.{cls.__qualname__}",
        short_name=cls.__name__,
    )


class CallerResolver:
    """Find the identity of the code that invoked the logger.

    ``max_depth`` caps the number of frames inspected per call.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_STACK_DEPTH):
        self.max_depth = max_depth

    def identify(self) -> CallerIdentity:
        """Return the caller identity, or the sentinel when none can be found."""
        frame = None
        try:
            frame = sys._getframe(1)
            return self._walk(frame)
        except Exception:
            return SENTINEL_IDENTITY
        finally:
            del frame

    def _walk(self, frame: t.Optional['FrameType']) -> CallerIdentity:
        depth = 0
        while frame is not None and depth < self.max_depth:
            module = frame.f_globals.get('__name__')
            if module and not is_wrapper_module(module):
                return resolve_identity(module, frame.f_code.co_qualname)
            frame = frame.f_back
            depth += 1
        return SENTINEL_IDENTITY


__all__ = [
    "CallerIdentity",
    "CallerResolver",
    "SENTINEL_IDENTITY",
    "declared_type_path",
    "identity_of",
    "is_synthetic_name",
    "resolve_identity",
]
