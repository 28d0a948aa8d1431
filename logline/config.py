"""Configuration loading from optional YAML file and env vars, plus handler setup."""

import logging
import os
import sys
from dataclasses import dataclass, fields
from typing import TextIO

import yaml

from logline.encoder import EncoderConfig
from logline.formatter import LineFormatter

logger = logging.getLogger(__name__)

VALID_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

ENV_VARS = {
    "level": "LOGLINE_LEVEL",
    "disable_timestamp": "LOGLINE_DISABLE_TIMESTAMP",
    "timestamp_format": "LOGLINE_TIMESTAMP_FORMAT",
    "sort_fields": "LOGLINE_SORT_FIELDS",
    "report_caller": "LOGLINE_REPORT_CALLER",
    "utc": "LOGLINE_UTC",
}


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    level: str = "INFO"
    disable_timestamp: bool = False
    timestamp_format: str = ""
    sort_fields: bool = True
    report_caller: bool = False
    utc: bool = False

    def encoder_config(self) -> EncoderConfig:
        return EncoderConfig(
            disable_timestamp=self.disable_timestamp,
            timestamp_format=self.timestamp_format,
            sort_fields=self.sort_fields,
        )


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path or file."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from defaults <- YAML data <- env vars (highest priority)."""
    known = {f.name for f in fields(Config)}
    kwargs: dict = {}

    for key, value in (yaml_data or {}).items():
        if key not in known:
            raise ValueError(f"Unknown config key '{key}'")
        kwargs[key] = value

    for key, env_name in ENV_VARS.items():
        if env_name in os.environ:
            kwargs[key] = os.environ[env_name]

    level = str(kwargs.get("level", Config.level)).strip().upper()
    if level == "WARN":
        level = "WARNING"
    if level not in VALID_LEVELS:
        raise ValueError(f"Invalid level '{level}', expected one of {', '.join(VALID_LEVELS)}")

    return Config(
        level=level,
        disable_timestamp=_parse_bool(kwargs.get("disable_timestamp", Config.disable_timestamp)),
        timestamp_format=str(kwargs.get("timestamp_format") or ""),
        sort_fields=_parse_bool(kwargs.get("sort_fields", Config.sort_fields)),
        report_caller=_parse_bool(kwargs.get("report_caller", Config.report_caller)),
        utc=_parse_bool(kwargs.get("utc", Config.utc)),
    )


def configure_logging(
    config: Config,
    stream: TextIO | None = None,
    name: str | None = None,
) -> logging.Logger:
    """Attach a LineFormatter stream handler to ``name`` (root by default).

    Handlers installed by an earlier call are replaced, so this is safe to
    call again after reloading config.
    """
    target = logging.getLogger(name)
    for handler in list(target.handlers):
        if isinstance(handler.formatter, LineFormatter):
            target.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        LineFormatter(
            config.encoder_config(),
            report_caller=config.report_caller,
            utc=config.utc,
        )
    )
    target.addHandler(handler)
    target.setLevel(config.level)
    return target
