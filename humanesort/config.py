# humanesort/config.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

_WIDTHS = (8, 16, 32, 64, 128)
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OrderCfg(BaseModel):
    numeric_bits: int = Field(64, description="unsigned width a numeric run must fit into")

    model_config = ConfigDict(extra="ignore")

    @field_validator("numeric_bits")
    @classmethod
    def _known_width(cls, v: int) -> int:
        if int(v) not in _WIDTHS:
            raise ValueError(f"numeric_bits must be one of {_WIDTHS}")
        return int(v)


class CliCfg(BaseModel):
    reverse: bool = False      # emit lines in descending humane order
    unique: bool = False       # drop exact-duplicate lines (string equality, not order equality)
    log_level: str = "WARNING"

    model_config = ConfigDict(extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _level_name(cls, v: str) -> str:
        name = str(v).strip().upper()
        if name not in _LEVELS:
            raise ValueError(f"log_level must be one of {_LEVELS}")
        return name

    def level(self) -> int:
        return logging.getLevelName(self.log_level)


class Config(BaseModel):
    order: OrderCfg = Field(default_factory=OrderCfg)
    cli: CliCfg = Field(default_factory=CliCfg)
    model_config = ConfigDict(extra="ignore", validate_assignment=True)


# --- Back-compat for flat YAML ---
_FLAT_KEYS = {
    "numeric_bits": "order",
    "reverse": "cli",
    "unique": "cli",
    "log_level": "cli",
}


def _normalize_data(data: dict[str, Any]) -> dict[str, Any]:
    if not data:
        return {}
    data = dict(data)
    for k in [k for k in data if k in _FLAT_KEYS]:
        section = data.setdefault(_FLAT_KEYS[k], {})
        section.setdefault(k, data.pop(k))
    return data


def load_config(path: str | Path | None = "configs/default.yaml") -> Config:
    data: dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.exists():
            try:
                with p.open("r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise RuntimeError(f"Failed to parse YAML at {path}: {e}") from e
            if not isinstance(data, dict):
                raise RuntimeError(f"Config at {path} must be a mapping, got {type(data).__name__}")
    return Config(**_normalize_data(data))


def _cast_env_value(val: str, current):
    """
    Cast env string to the type of `current`.
    bool accepts 1/true/yes/y/on (anything else is False); int must parse.
    """
    if isinstance(current, bool):
        return str(val).strip().lower() in ("1", "true", "yes", "y", "on")
    if isinstance(current, int):
        return int(val)
    return str(val).strip()


def apply_env_overrides(cfg: Config) -> None:
    """
    Override knobs from environment variables.
    Supported:
      HUMANESORT_NUMERIC_BITS  unsigned width for numeric runs (8/16/32/64/128)
      HUMANESORT_REVERSE       descending output in the CLI
      HUMANESORT_UNIQUE        drop duplicate lines in the CLI
      HUMANESORT_LOG_LEVEL     CLI log level name
    Values that fail to cast or validate are ignored.
    """
    mapping = {
        "HUMANESORT_NUMERIC_BITS": ("order", "numeric_bits"),
        "HUMANESORT_REVERSE": ("cli", "reverse"),
        "HUMANESORT_UNIQUE": ("cli", "unique"),
        "HUMANESORT_LOG_LEVEL": ("cli", "log_level"),
    }
    for env_key, (section, field) in mapping.items():
        raw = os.getenv(env_key)
        if raw is None:
            continue
        sect_obj = getattr(cfg, section)
        current = getattr(sect_obj, field)
        try:
            newv = _cast_env_value(raw, current)
            # rebuild the section so field validators run on the new value
            setattr(cfg, section, type(sect_obj).model_validate({**sect_obj.model_dump(), field: newv}))
        except (ValueError, TypeError):
            logging.getLogger("humanesort.config").warning("ignoring invalid %s=%r", env_key, raw)
            continue


def validate_config(cfg: Config) -> None:
    """Raise ValueError with a precise message if a value is out of range."""
    bits = int(cfg.order.numeric_bits)
    if bits not in _WIDTHS:
        raise ValueError(f"Config invalid: numeric_bits({bits}) not in {_WIDTHS}")
    if cfg.cli.log_level not in _LEVELS:
        raise ValueError(f"Config invalid: log_level({cfg.cli.log_level!r}) not in {_LEVELS}")
