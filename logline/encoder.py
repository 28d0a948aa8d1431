"""Text line encoder.

Renders one LogEntry as:

    [<timestamp> ]<LEVEL>[ <file>:<line> <func>()][ <key>="<value>"]* [ ;][ <message>]\\n

The encoder is immutable after construction and keeps no per-call state on
the instance, so one instance can be shared by every handler and thread in
the process.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from logline.fields import (
    FIELD_KEY_ERROR,
    field_keys,
    ordered_keys,
    prefix_field_clashes,
)
from logline.models import LogEntry
from logline.values import render_value

FIELDS_SEPARATOR = ";"


@dataclass(frozen=True)
class EncoderConfig:
    disable_timestamp: bool = False
    timestamp_format: str = ""      # strftime pattern; "" = millisecond default
    sort_fields: bool = True


def format_timestamp(ts: datetime, pattern: str = "") -> str:
    """Format ``ts`` with a strftime pattern, or the millisecond default."""
    if pattern:
        return ts.strftime(pattern)
    # %Y is not zero-padded below year 1000 on every libc.
    return f"{ts.year:04d}-{ts:%m-%dT%H:%M:%S}.{ts.microsecond // 1000:03d}"


def level_text(level: Any) -> str:
    if isinstance(level, Enum):
        name = level.name
    elif isinstance(level, int):
        name = logging.getLevelName(level)
    else:
        name = str(level)
    return name.upper()


def _write(buf: bytearray, text: str) -> None:
    buf.extend(text.encode("utf-8"))


class TextLineEncoder:
    def __init__(self, config: EncoderConfig | None = None):
        self.config = config or EncoderConfig()

    def encode(self, entry: LogEntry) -> bytes:
        """Render ``entry`` as one UTF-8 line ending in a single newline.

        When the entry carries a buffer the line is appended to it; only the
        new line is returned.
        """
        data = dict(entry.data)
        report_caller = entry.has_caller()
        prefix_field_clashes(data, report_caller)
        if entry.error:
            data[FIELD_KEY_ERROR] = entry.error

        function_text = file_text = ""
        if report_caller:
            function_text = entry.caller.function_text()
            file_text = entry.caller.file_text()

        message = entry.message.removesuffix("\n")
        keys = ordered_keys(
            data,
            include_time=not self.config.disable_timestamp,
            message=message,
            function_text=function_text,
            file_text=file_text,
            report_caller=report_caller,
            sort_fields=self.config.sort_fields,
        )

        buf = entry.buffer if entry.buffer is not None else bytearray()
        start = len(buf)

        self._write_header(buf, entry)
        self._write_caller(buf, function_text, file_text)
        written = self._write_fields(buf, field_keys(keys, data), data)
        if written:
            _write(buf, " " + FIELDS_SEPARATOR)
        if message:
            _write(buf, " " + message)
        buf.extend(b"\n")
        return bytes(buf[start:])

    def encode_text(self, entry: LogEntry) -> str:
        return self.encode(entry).decode("utf-8")

    def _write_header(self, buf: bytearray, entry: LogEntry) -> None:
        if not self.config.disable_timestamp:
            _write(buf, format_timestamp(entry.time, self.config.timestamp_format) + " ")
        _write(buf, level_text(entry.level))

    @staticmethod
    def _write_caller(buf: bytearray, function_text: str, file_text: str) -> None:
        caller = " ".join(part for part in (file_text, function_text) if part)
        if caller:
            _write(buf, " " + caller)

    @staticmethod
    def _write_fields(buf: bytearray, keys: list[str], data: dict[str, Any]) -> int:
        for key in keys:
            _write(buf, f" {key}={render_value(data[key])}")
        return len(keys)
