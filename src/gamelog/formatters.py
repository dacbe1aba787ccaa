from __future__ import annotations

from .static import DEFAULT_CONTEXT_COLOR
from typing import Dict, Any, Union


class LoggerFormatter:

    time_format: str = 'YYYY-MM-DD HH:mm:ss.SSS'

    @classmethod
    def context_formatter(cls, record: Dict[str, Union[Dict[str, Any], Any]]) -> str:
        """
        Formats the context handle attached with `logger.bind(context=...)`
        """
        if record['extra'].get('context') is None:
            return ''
        return ' ' + DEFAULT_CONTEXT_COLOR + '({extra[context]})</>'

    @classmethod
    def default_formatter(cls, record: Dict[str, Union[Dict[str, Any], Any]]) -> str:
        """
        Level and time are tinted; the message keeps whatever markup the
        dispatcher put on the caller prefix and nothing else.
        """
        return "<level>{level: <8}</> <green>{time:" + cls.time_format + "}</>: " \
            + "{message}" + cls.context_formatter(record) + "\n"

    @classmethod
    def plain_formatter(cls, record: Dict[str, Union[Dict[str, Any], Any]]) -> str:
        """
        Just the message, used by capture sinks
        """
        return "{message}" + cls.context_formatter(record) + "\n"
