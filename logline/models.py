"""Log entry data model consumed by the text line encoder."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class CallSite:
    function: str = ""   # e.g. "handle_request"
    file: str = ""       # source path
    line: int = 0

    def file_text(self) -> str:
        if not self.file:
            return ""
        return f"{self.file}:{self.line}"

    def function_text(self) -> str:
        if not self.function:
            return ""
        return f"{self.function}()"


@dataclass
class LogEntry:
    time: datetime
    level: Any                      # str, Enum member, or stdlib numeric level
    message: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    caller: CallSite | None = None
    error: str = ""                 # framework-supplied error text
    buffer: bytearray | None = None

    def has_caller(self) -> bool:
        return self.caller is not None
