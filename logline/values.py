"""Field value rendering: any value becomes one double-quoted token."""

from functools import singledispatch
from typing import Any


@singledispatch
def to_text(value: Any) -> str:
    """Human-readable text for a field value.

    Register more types with ``@to_text.register``, or give a class a
    ``__log_text__()`` method.
    """
    hook = getattr(type(value), "__log_text__", None)
    if hook is not None:
        return str(hook(value))
    return str(value)


@to_text.register
def _(value: str) -> str:
    return value


@to_text.register(bytes)
@to_text.register(bytearray)
def _(value) -> str:
    return bytes(value).decode("utf-8", errors="replace")


@to_text.register
def _(value: BaseException) -> str:
    return str(value)


def _safe_text(value: Any) -> str:
    try:
        return to_text(value)
    except Exception:
        return object.__repr__(value)


def quote(text: str) -> str:
    # Newlines and other control characters stay raw.
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return '"' + escaped + '"'


def render_value(value: Any) -> str:
    return quote(_safe_text(value))
