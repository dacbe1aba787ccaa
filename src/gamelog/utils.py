from __future__ import annotations

"""Utility helpers for turning gamelog messages into text."""

import traceback
import typing as t

if t.TYPE_CHECKING:
    from pydantic import BaseModel

    Primitives = t.Union[str, int, float, bool, tuple, list, type(None)]
    MsgItem = t.Union[BaseModel, dict[str, t.Any], Primitives]
    MessageOrSupplier = t.Union[MsgItem, t.Callable[[], MsgItem]]
else:
    MsgItem = t.Any
    MessageOrSupplier = t.Any


def get_short_name(name: str) -> str:
    """Return the last dotted component of ``name``."""

    return name.rsplit(".", 1)[-1]


def is_supplier(message: t.Any) -> bool:
    """Return ``True`` when ``message`` should be treated as a lazy producer."""

    return callable(message) and not isinstance(message, type)


def format_item(msg: MsgItem, max_length: int | None = None) -> str:
    """Normalise diverse message inputs into a printable string."""

    if isinstance(msg, str):
        return msg[:max_length] if max_length else msg
    if isinstance(msg, (float, int, bool, type(None))):
        rendered = str(msg)
        return rendered[:max_length] if max_length else rendered
    if isinstance(msg, BaseException):
        return format_exception(msg)
    if isinstance(msg, (list, set)):
        rendered = "".join(f"- {item}\n" for item in msg).rstrip("\n")
        return rendered[:max_length] if max_length else rendered
    if isinstance(msg, dict):
        rendered = ""
        for key, value in msg.items():
            value_text = f"{value}"
            if max_length and len(value_text) > max_length:
                value_text = f"{value_text[:max_length]}..."
            rendered += f"- {key}: {value_text}\n"
        return rendered.rstrip("\n")
    if hasattr(msg, "model_dump") and hasattr(msg, "model_fields"):
        rendered = f"[{msg.__class__.__name__}]"
        for field, value in msg.model_dump().items():
            value_text = f"\n  {field}: {value!r}"
            if max_length is not None and len(value_text) > max_length:
                value_text = f"{value_text[:max_length]}..."
            rendered += value_text
        return rendered

    rendered = str(msg)
    return rendered[:max_length] if max_length else rendered


def format_exception(error: BaseException) -> str:
    """Render ``error`` with its traceback, the way the interpreter prints it."""

    lines = traceback.format_exception(type(error), error, error.__traceback__)
    return "".join(lines).rstrip("\n")


def materialize_message(message: MessageOrSupplier, max_length: int | None = None) -> str:
    """Produce the message body, invoking ``message`` first if it is a supplier.

    A supplier that raises is not allowed to escape the log call; the body
    names the failure instead.
    """

    if is_supplier(message):
        try:
            message = message()
        except Exception as e:
            return f"[message supplier raised {e.__class__.__name__}: {e}]"
    try:
        return format_item(message, max_length=max_length)
    except Exception as e:
        return f"[unprintable {message.__class__.__name__}: {e.__class__.__name__}]"


__all__ = [
    "MsgItem",
    "MessageOrSupplier",
    "get_short_name",
    "is_supplier",
    "format_item",
    "format_exception",
    "materialize_message",
]
