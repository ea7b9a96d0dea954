"""Configuration management for api_regions.

Loads settings from environment variables with sensible defaults.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from api_regions.extension import API_REGIONS_EXTENSION_NAME

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass
class ApiRegionsConfig:
    """Settings shared by the codec and logging setup."""
    log_level: str = "INFO"
    json_indent: Optional[int] = None  # None = compact output
    extension_name: str = API_REGIONS_EXTENSION_NAME

    @classmethod
    def from_env(cls) -> "ApiRegionsConfig":
        return cls(
            log_level=os.getenv("API_REGIONS_LOG_LEVEL", "INFO").upper(),
            json_indent=_optional_int(os.getenv("API_REGIONS_JSON_INDENT")),
            extension_name=os.getenv("API_REGIONS_EXTENSION_NAME", API_REGIONS_EXTENSION_NAME),
        )


def configure_logging(config: Optional[ApiRegionsConfig] = None) -> None:
    """Install a root handler at the configured level."""
    config = config or ApiRegionsConfig.from_env()
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
