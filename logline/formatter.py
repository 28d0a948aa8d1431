"""logging.Formatter that renders stdlib LogRecords through TextLineEncoder."""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from logline.encoder import EncoderConfig, TextLineEncoder
from logline.models import CallSite, LogEntry

FIELDS_ATTR = "fields"


def exception_text(exc_info) -> str:
    """One-line ``ExcType: message`` summary of an exc_info tuple."""
    if not exc_info or exc_info[0] is None:
        return ""
    exc_type, exc_value = exc_info[0], exc_info[1]
    text = str(exc_value) if exc_value is not None else ""
    if not text:
        return exc_type.__name__
    return f"{exc_type.__name__}: {text}"


class LineFormatter(logging.Formatter):
    """Attach fields with ``extra={"fields": {...}}`` or through FieldLogger."""

    def __init__(
        self,
        config: EncoderConfig | None = None,
        *,
        report_caller: bool = False,
        utc: bool = False,
    ):
        super().__init__()
        self.encoder = TextLineEncoder(config)
        self.report_caller = report_caller
        self.utc = utc

    def to_entry(self, record: logging.LogRecord) -> LogEntry:
        tz = timezone.utc if self.utc else None
        fields: Mapping[str, Any] = getattr(record, FIELDS_ATTR, None) or {}

        caller = None
        if self.report_caller:
            caller = CallSite(
                function=record.funcName or "",
                file=record.pathname or "",
                line=record.lineno or 0,
            )

        return LogEntry(
            time=datetime.fromtimestamp(record.created, tz=tz),
            level=record.levelname,
            message=record.getMessage(),
            data=dict(fields),
            caller=caller,
            error=exception_text(record.exc_info),
        )

    def format(self, record: logging.LogRecord) -> str:
        # Handlers append their own terminator.
        return self.encoder.encode_text(self.to_entry(record)).removesuffix("\n")
