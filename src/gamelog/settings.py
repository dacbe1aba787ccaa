from __future__ import annotations

"""
Startup configuration for gamelog, read from ``GAMELOG_*`` environment variables.
"""

import typing as t

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import LogLevel
from .static import DEFAULT_MAX_STACK_DEPTH


class GameLogSettings(BaseSettings):
    """Settings resolved once at process start.

    ``build_mode`` decides the defaults of the optional switches: a
    ``development`` process logs to the editor channel and colors prefixes, a
    ``production`` one does neither unless told otherwise.
    """

    level: LogLevel = Field(default=LogLevel.ALL, description="Initial filter level")
    build_mode: t.Literal['development', 'production'] = Field(default='development')
    editor_enabled: t.Optional[bool] = Field(default=None, description="Defaults to True in development builds")
    colors_enabled: t.Optional[bool] = Field(default=None, description="Defaults to True in development builds")
    strip_editor: bool = Field(default=False, description="Replace the editor channel with a no-op implementation")
    annotate: bool = Field(default=True, description="Prefix lines with the caller type")
    colors: t.Dict[str, str] = Field(default_factory=dict, description="Caller identity to color mapping")
    sink: t.Literal['stderr', 'stdout'] = Field(default='stderr')
    max_stack_depth: int = Field(default=DEFAULT_MAX_STACK_DEPTH, ge=1)

    model_config = SettingsConfigDict(
        env_prefix='GAMELOG_',
        case_sensitive=False,
        extra='ignore',
    )

    @field_validator('level', mode='before')
    @classmethod
    def validate_level(cls, value: t.Any) -> LogLevel:
        level = LogLevel.parse(value)
        if level is LogLevel.ALWAYS:
            raise ValueError("LogLevel.ALWAYS cannot be used as a filter level")
        return level

    @field_validator('build_mode', mode='before')
    @classmethod
    def validate_build_mode(cls, value: t.Any) -> t.Any:
        if isinstance(value, str):
            value = value.strip().lower()
            return {'dev': 'development', 'prod': 'production'}.get(value, value)
        return value

    @property
    def is_production(self) -> bool:
        return self.build_mode == 'production'

    @property
    def editor_default(self) -> bool:
        """Resolved initial value of the editor-channel flag."""
        if self.strip_editor:
            return False
        if self.editor_enabled is not None:
            return self.editor_enabled
        return not self.is_production

    @property
    def colors_default(self) -> bool:
        if self.colors_enabled is not None:
            return self.colors_enabled
        return not self.is_production


__all__ = ["GameLogSettings"]
