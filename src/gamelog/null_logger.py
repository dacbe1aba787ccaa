from __future__ import annotations

"""No-op editor logger used when the editor channel is stripped from a build."""

import typing as t

from .state import LoggerConfig


class NullEditorLogger:
    """Same interface as :class:`~gamelog.editor.EditorLogger`; every call is a no-op.

    Suppliers are never invoked and the enabled flag cannot be turned on.
    """

    def __init__(self, config: t.Optional[LoggerConfig] = None, *args: t.Any, **kwargs: t.Any):
        self.config = config

    @property
    def enabled(self) -> bool:
        return False

    def set_enabled(self, enabled: bool) -> None: ...
    def log(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def info(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def warning(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def error(self, *args: t.Any, **kwargs: t.Any) -> None: ...
    def exception(self, *args: t.Any, **kwargs: t.Any) -> None: ...


__all__ = ["NullEditorLogger"]
