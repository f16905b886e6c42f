#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: config.py
# Author: Wadih Khairallah
# Description: YAML settings for the command line host
# Created: 2026-10-14 16:42:08
# Modified: 2026-10-19 10:05:51

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, ValidationError

from wordlens.errors import ConfigError
from wordlens.models import (
    AnalyzeOptions,
    DensityRanges,
    DEFAULT_GROUP_SIZE,
    DEFAULT_MIN_COUNT,
    MAX_GROUP_SIZE,
    MIN_GROUP_SIZE,
)

DEFAULT_CONFIG_PATH = Path.home() / ".wordlens.yaml"


class Settings(BaseModel):
    """Settings read from the YAML file, after defaults and overrides."""

    model_config = ConfigDict(extra="forbid")

    group_size: StrictInt = Field(
        default=DEFAULT_GROUP_SIZE,
        ge=MIN_GROUP_SIZE,
        le=MAX_GROUP_SIZE,
        description="Words per phrase",
    )
    min_count: StrictInt = Field(
        default=DEFAULT_MIN_COUNT,
        gt=0,
        description="Phrases seen fewer times are dropped",
    )
    case_sensitive: StrictBool = Field(default=False, description="Keep original casing")
    density_ranges: DensityRanges = Field(
        default_factory=DensityRanges,
        description="Percent limits for the density categories",
    )
    top: Optional[StrictInt] = Field(default=50, description="Rows shown by the CLI; 0 or None shows all")
    log_level: str = Field(default="WARNING", description="Logging level name")
    timeout: float = Field(default=10, gt=0, description="HTTP timeout in seconds")


# Used when keys are absent from the YAML file.
DEFAULTS: Dict[str, Any] = Settings().model_dump()


def _config_error(config_path: Path, exc: ValidationError) -> ConfigError:
    error = exc.errors()[0]
    where = ".".join(str(part) for part in error["loc"]) or "config"
    return ConfigError(f"Invalid config {config_path}: {where}: {error['msg']}")


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Load YAML settings, fill in defaults and apply overrides.

    Args:
        path (str | Path): Config file; DEFAULT_CONFIG_PATH when None.
            A missing file is not an error.
        overrides (dict): Values that win over the file; None values are
            ignored so unset CLI flags keep the configured value.

    Returns:
        dict: Merged and validated settings

    Raises:
        ConfigError: Unreadable YAML, unknown keys or invalid values
    """
    cfg = copy.deepcopy(DEFAULTS)
    config_path = Path(path).expanduser() if path else DEFAULT_CONFIG_PATH

    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                file_cfg = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not load config {config_path}: {e}") from e
        if not isinstance(file_cfg, dict):
            raise ConfigError(f"Config {config_path} must be a mapping")
        ranges = file_cfg.pop("density_ranges", None)
        cfg.update(file_cfg)
        if isinstance(ranges, dict):
            cfg["density_ranges"].update(ranges)
        elif ranges is not None:
            cfg["density_ranges"] = ranges

    if overrides:
        cfg.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return Settings.model_validate(cfg).model_dump()
    except ValidationError as e:
        raise _config_error(config_path, e) from e


def density_ranges(cfg: Dict[str, Any]) -> DensityRanges:
    try:
        return DensityRanges.model_validate(cfg.get("density_ranges") or {})
    except ValidationError as e:
        raise ConfigError(f"Invalid density thresholds: {e.errors()[0]['msg']}") from e


def analyze_options(cfg: Dict[str, Any]) -> AnalyzeOptions:
    """Options for analyze() from merged settings; raises InvalidOptionsError."""
    return AnalyzeOptions.coerce({
        "group_size": cfg["group_size"],
        "min_count": cfg["min_count"],
        "case_sensitive": cfg["case_sensitive"],
    })
