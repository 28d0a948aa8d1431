"""LoggerAdapter that carries structured fields across calls."""

import logging
from types import MappingProxyType
from typing import Any, Mapping

from logline.fields import FIELD_KEY_ERROR
from logline.formatter import FIELDS_ATTR


class FieldLogger(logging.LoggerAdapter):
    """Immutable field-carrying view over a logger.

    Each ``with_*`` call returns a new adapter, so a base adapter can be
    shared and specialized per request without copying state back.

        log = FieldLogger(logging.getLogger("orders"))
        log.with_field("order_id", 42).info("order placed")
    """

    def __init__(self, logger: logging.Logger, fields: Mapping[str, Any] | None = None):
        super().__init__(logger, {})
        self.fields = MappingProxyType(dict(fields or {}))

    def with_fields(self, fields: Mapping[str, Any]) -> "FieldLogger":
        merged = dict(self.fields)
        merged.update(fields)
        return FieldLogger(self.logger, merged)

    def with_field(self, key: str, value: Any) -> "FieldLogger":
        return self.with_fields({key: value})

    def with_error(self, err: BaseException) -> "FieldLogger":
        return self.with_field(FIELD_KEY_ERROR, err)

    def process(self, msg, kwargs):
        extra = dict(kwargs.get("extra") or {})
        merged = dict(self.fields)
        merged.update(extra.get(FIELDS_ATTR) or {})
        extra[FIELDS_ATTR] = merged
        kwargs["extra"] = extra
        return msg, kwargs
