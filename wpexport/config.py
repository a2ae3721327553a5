"""
Parser configuration.

Configuration is supplied via a JSON file path or directly as a
dictionary.  Missing keys fall back to defaults, and a couple of them can
be overridden through environment variables (``WPEXPORT_CHUNK_SIZE``,
``WPEXPORT_LOG_LEVEL``).
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .utils.dates import WXR_DATE_FORMAT
from .utils.errors import ConfigError

DEFAULT_IGNORED_POST_TYPES: List[str] = [
    "amp_validated_url",
    "nav_menu_item",
    "custom_css",
    "wp_global_styles",
    "wp_navigation",
]


class ParserConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    ignored_post_types: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORED_POST_TYPES)
    )
    modified_date_format: str = WXR_DATE_FORMAT
    chunk_size: int = Field(64 * 1024, gt=0)
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any):
        return str(v).upper() if v else "INFO"


def load_config(config: Optional[Dict[str, Any]] = None, *,
                config_file: Optional[str] = None) -> ParserConfig:
    """Build a :class:`ParserConfig` from a dict, a JSON file and the environment.

    A ``config_file`` that does not exist is ignored; one that exists but
    cannot be decoded raises :class:`ConfigError`.
    """
    if config_file and os.path.exists(config_file):
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"could not decode {config_file}: {e}") from e
    elif config is None:
        config = {}
    else:
        config = dict(config)

    if not isinstance(config, dict):
        raise ConfigError(f"configuration must be a JSON object, got {type(config).__name__}")

    config.setdefault("chunk_size", os.getenv("WPEXPORT_CHUNK_SIZE") or 64 * 1024)
    config.setdefault("log_level", os.getenv("WPEXPORT_LOG_LEVEL") or "INFO")

    try:
        return ParserConfig(**config)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
