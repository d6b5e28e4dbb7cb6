"""
Harness settings.

Settings are resolved from, in increasing precedence: built-in defaults, a
YAML or JSON file (``--config`` or ``WORDCOUNT_CONFIG_PATH``), the
``WORDCOUNT_CORPUS`` environment variable, and explicit overrides such as CLI
options. Example file::

    corpus_path: data/war_and_peace.txt
    load_levels: [1, 5, 9]
    strategies: [hashMap, compiled]
    warmup_iterations: 5
    measurement_iterations: 10
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wordcount.exceptions import ConfigurationError
from wordcount.hash_config import LOAD_LEVELS
from wordcount.strategies import STRATEGY_NAMES

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "WORDCOUNT_CONFIG_PATH"
CORPUS_ENV = "WORDCOUNT_CORPUS"


class HarnessSettings(BaseModel):
    """Validated settings for a benchmark run."""

    model_config = ConfigDict(extra="forbid")

    corpus_path: Optional[str] = None
    load_levels: List[int] = Field(default_factory=lambda: list(LOAD_LEVELS))
    strategies: List[str] = Field(default_factory=lambda: list(STRATEGY_NAMES))
    warmup_iterations: int = Field(default=20, ge=0)
    measurement_iterations: int = Field(default=20, ge=1)
    results_dir: str = "results"

    @field_validator("load_levels")
    @classmethod
    def _check_levels(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("at least one load level is required")
        invalid = [level for level in value if level not in LOAD_LEVELS]
        if invalid:
            raise ValueError(f"load levels must be in 1..9, got {invalid}")
        return sorted(set(value))

    @field_validator("strategies")
    @classmethod
    def _check_strategies(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one strategy is required")
        unknown = [name for name in value if name not in STRATEGY_NAMES]
        if unknown:
            raise ValueError(f"unknown strategies {unknown}; available: {list(STRATEGY_NAMES)}")
        return [name for name in STRATEGY_NAMES if name in value]


def _read_config_file(config_path: str) -> Dict[str, Any]:
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}", config_path)

    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in ('.yaml', '.yml'):
                data = yaml.safe_load(f)
            elif path.suffix.lower() == '.json':
                data = json.load(f)
            else:
                raise ConfigurationError(f"Unsupported configuration format: {path.suffix}", config_path)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to parse configuration file: {str(e)}", config_path) from e
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration: {str(e)}", config_path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid configuration format in {config_path}", config_path)

    logger.debug(f"Loaded configuration from {config_path}")
    return data


def load_settings(config_path: Optional[str] = None, **overrides: Any) -> HarnessSettings:
    """
    Build settings from file, environment and overrides.

    Args:
        config_path: Optional settings file; falls back to ``WORDCOUNT_CONFIG_PATH``
        **overrides: Field values that win over everything else; ``None`` values are ignored

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If the file cannot be read or the values are invalid
    """
    config_path = config_path or os.environ.get(CONFIG_PATH_ENV)
    data: Dict[str, Any] = _read_config_file(config_path) if config_path else {}

    corpus_env = os.environ.get(CORPUS_ENV)
    if corpus_env:
        data["corpus_path"] = corpus_env

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return HarnessSettings(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}", config_path) from e
