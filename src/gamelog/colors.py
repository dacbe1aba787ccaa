from __future__ import annotations

"""Color lookup for caller identities.

``ColorLookup`` is the narrow interface the dispatcher depends on. ``ColorMapping``
is the in-memory implementation: a validated list of entries with a lazily
built ``identity -> RRGGBB`` cache that is swapped wholesale on every change,
so readers never see a half-built dictionary.
"""

import re
import threading
import typing as t

from pydantic import BaseModel, Field, PrivateAttr, field_validator

_HEX_COLOR = re.compile(r"^#?(?P<hex>[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

ColorValue = t.Union[str, t.Tuple[int, int, int], t.Tuple[float, float, float]]


@t.runtime_checkable
class ColorLookup(t.Protocol):
    """Maps a caller identity to a display color (``RRGGBB``) or ``None``."""

    def lookup(self, identity: str) -> t.Optional[str]:
        ...


def to_html_rgb(value: ColorValue) -> str:
    """Normalise a color into upper-case ``RRGGBB``.

    Accepts ``#RGB``, ``#RRGGBB`` or ``RRGGBB`` strings, integer RGB triples
    in ``0..255`` and float RGB triples in ``0.0..1.0``.
    """
    if isinstance(value, str):
        match = _HEX_COLOR.match(value.strip())
        if not match:
            raise ValueError(f"Invalid color: {value!r}")
        digits = match.group('hex')
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        return digits.upper()

    if isinstance(value, (tuple, list)) and len(value) == 3:
        if all(isinstance(c, int) and not isinstance(c, bool) for c in value):
            channels = list(value)
        elif all(isinstance(c, (int, float)) and not isinstance(c, bool) for c in value):
            if any(c < 0.0 or c > 1.0 for c in value):
                raise ValueError(f"Float color channels must be within 0..1: {value!r}")
            channels = [round(c * 255) for c in value]
        else:
            raise ValueError(f"Invalid color: {value!r}")
        if any(c < 0 or c > 255 for c in channels):
            raise ValueError(f"Color channels must be within 0..255: {value!r}")
        return ''.join(f"{c:02X}" for c in channels)

    raise ValueError(f"Invalid color: {value!r}")


def type_key(item: t.Union[str, type]) -> str:
    """Return the lookup key for a dotted name or a class."""
    if isinstance(item, type):
        return f"{item.__module__}.{item.__qualname__}"
    return item


class ColorEntry(BaseModel):
    """A single ``type name -> color`` row."""

    type_name: str
    color: str

    @field_validator('color', mode='before')
    @classmethod
    def validate_color(cls, value: t.Any) -> str:
        return to_html_rgb(value)


class ColorMapping(BaseModel):
    """Identity to color mapping used to tint log prefixes."""

    entries: t.List[ColorEntry] = Field(default_factory=list)

    _cache: t.Optional[t.Dict[str, str]] = PrivateAttr(default=None)
    _lock: t.Any = PrivateAttr(default_factory=threading.Lock)

    @classmethod
    def from_mapping(cls, mapping: t.Optional[t.Mapping[t.Union[str, type], ColorValue]] = None) -> 'ColorMapping':
        """Build a mapping from ``{name_or_class: color}``."""
        return cls(entries=[
            ColorEntry(type_name=type_key(key), color=value)
            for key, value in (mapping or {}).items()
        ])

    def _build_cache(self) -> t.Dict[str, str]:
        return {entry.type_name: entry.color for entry in self.entries}

    def lookup(self, identity: t.Union[str, type]) -> t.Optional[str]:
        """Return the ``RRGGBB`` color configured for ``identity``, if any."""
        cache = self._cache
        if cache is None:
            with self._lock:
                if self._cache is None:
                    self._cache = self._build_cache()
                cache = self._cache
        return cache.get(type_key(identity))

    def set_color(self, identity: t.Union[str, type], color: ColorValue) -> None:
        """Add or replace the color for ``identity``."""
        entry = ColorEntry(type_name=type_key(identity), color=color)
        with self._lock:
            entries = [e for e in self.entries if e.type_name != entry.type_name]
            entries.append(entry)
            self.entries = entries
            self._cache = self._build_cache()

    def remove_color(self, identity: t.Union[str, type]) -> bool:
        """Drop the color for ``identity``. Returns ``False`` if none was set."""
        key = type_key(identity)
        with self._lock:
            entries = [e for e in self.entries if e.type_name != key]
            if len(entries) == len(self.entries):
                return False
            self.entries = entries
            self._cache = self._build_cache()
        return True

    def __len__(self) -> int:
        return len(self.entries)


__all__ = [
    "ColorLookup",
    "ColorMapping",
    "ColorEntry",
    "ColorValue",
    "to_html_rgb",
    "type_key",
]
