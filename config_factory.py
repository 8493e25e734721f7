"""
Configuration for the blog API contract harness.

Values are read from the environment once at import time into ``CONF``;
pytest command-line options can override them per run.
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

ENV_BASE_URL = "BLOG_API_BASE_URL"
ENV_TIMEOUT = "BLOG_API_TIMEOUT"
ENV_FIXTURES_DIR = "BLOG_API_FIXTURES_DIR"
ENV_FAKER_SEED = "BLOG_API_FAKER_SEED"
ENV_LOG_LEVEL = "BLOG_API_LOG_LEVEL"
ENV_LOG_FILE = "BLOG_API_LOG_FILE"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class HarnessConfig(BaseModel):
    base_url: Optional[str] = None
    timeout: float = 30.0
    fixtures_dir: Optional[Path] = None
    faker_seed: Optional[int] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().rstrip("/")
        return value or None

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def is_live(self) -> bool:
        """True when requests go to a real service instead of the stub"""
        return self.base_url is not None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HarnessConfig":
        """Build a config from environment variables, ignoring empty ones"""
        environ = os.environ if environ is None else environ
        fields = {
            "base_url": environ.get(ENV_BASE_URL),
            "timeout": environ.get(ENV_TIMEOUT),
            "fixtures_dir": environ.get(ENV_FIXTURES_DIR),
            "faker_seed": environ.get(ENV_FAKER_SEED),
            "log_level": environ.get(ENV_LOG_LEVEL),
            "log_file": environ.get(ENV_LOG_FILE),
        }
        return cls(**{k: v for k, v in fields.items() if v not in (None, "")})

    def to_env(self) -> dict:
        """Inverse of from_env, used to hand the config to a pytest subprocess"""
        env = {
            ENV_BASE_URL: self.base_url,
            ENV_TIMEOUT: str(self.timeout),
            ENV_FIXTURES_DIR: str(self.fixtures_dir) if self.fixtures_dir else None,
            ENV_FAKER_SEED: str(self.faker_seed) if self.faker_seed is not None else None,
            ENV_LOG_LEVEL: self.log_level,
            ENV_LOG_FILE: self.log_file,
        }
        return {k: v for k, v in env.items() if v is not None}


CONF = HarnessConfig.from_env()

logging.getLogger(__name__).debug(
    f"Loaded harness config (live={CONF.is_live}, seed={CONF.faker_seed})"
)
