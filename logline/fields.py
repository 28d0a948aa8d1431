"""Reserved output columns, field-name clash handling, and key ordering."""

from typing import Any

FIELD_KEY_TIME = "time"
FIELD_KEY_LEVEL = "level"
FIELD_KEY_MSG = "msg"
FIELD_KEY_ERROR = "error"
FIELD_KEY_FUNC = "func"
FIELD_KEY_FILE = "file"

CLASH_PREFIX = "fields."

ALWAYS_RESERVED = (FIELD_KEY_TIME, FIELD_KEY_MSG, FIELD_KEY_LEVEL, FIELD_KEY_ERROR)
CALLER_RESERVED = (FIELD_KEY_FUNC, FIELD_KEY_FILE)


def prefix_field_clashes(data: dict[str, Any], report_caller: bool) -> None:
    """Move caller fields named like a reserved column to ``fields.<name>``.

    Without this, ``with_field("level", 1)`` would silently replace the level
    column. The value is kept and rendered as ``fields.level="1"`` instead.
    ``func`` and ``file`` only clash when call-site columns are written.
    If the prefixed name is taken too, the prefix is repeated until free.
    """
    reserved = ALWAYS_RESERVED + CALLER_RESERVED if report_caller else ALWAYS_RESERVED
    for key in reserved:
        if key in data:
            target = CLASH_PREFIX + key
            while target in data:
                target = CLASH_PREFIX + target
            data[target] = data.pop(key)


def ordered_keys(
    data: dict[str, Any],
    *,
    include_time: bool,
    message: str,
    function_text: str = "",
    file_text: str = "",
    report_caller: bool = False,
    sort_fields: bool = True,
) -> list[str]:
    """Return fixed columns first, then the remaining bag keys."""
    keys = []
    if include_time:
        keys.append(FIELD_KEY_TIME)
    keys.append(FIELD_KEY_LEVEL)
    if message:
        keys.append(FIELD_KEY_MSG)
    if data.get(FIELD_KEY_ERROR, "") != "":
        keys.append(FIELD_KEY_ERROR)
    if report_caller:
        if function_text:
            keys.append(FIELD_KEY_FUNC)
        if file_text:
            keys.append(FIELD_KEY_FILE)

    rest = [k for k in data if k not in keys]
    if sort_fields:
        rest.sort()
    keys.extend(rest)
    return keys


def field_keys(keys: list[str], data: dict[str, Any]) -> list[str]:
    """Filter an ordering down to keys rendered as ``key="value"`` pairs.

    Header and call-site columns never survive in the bag after clash
    prefixing, so bag membership is enough.
    """
    return [k for k in keys if k in data]
