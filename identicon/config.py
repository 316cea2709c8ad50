"""Runtime configuration.

Only I/O concerns are configurable; hashing, grid layout, colour and canvas
size are fixed. Values come from ``IDENTICON_*`` environment variables and may
be overridden by command line flags.
"""

import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "IDENTICON_"
ENV_OUTPUT_DIR = f"{ENV_PREFIX}OUTPUT_DIR"
ENV_LOG_LEVEL = f"{ENV_PREFIX}LOG_LEVEL"

DEFAULT_OUTPUT_DIR = "."
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class IdenticonConfig(BaseSettings):
    """Identicon settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX, env_ignore_empty=True, frozen=True
    )

    output_dir: str = DEFAULT_OUTPUT_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        if not isinstance(logging.getLevelName(value.upper()), int):
            raise ValueError(f"Unknown log level: {value}")
        return value

    def with_overrides(
        self, output_dir: Optional[str] = None, log_level: Optional[str] = None
    ) -> "IdenticonConfig":
        """Return a validated copy with every non-``None`` argument applied."""
        update = {
            key: value
            for key, value in (("output_dir", output_dir), ("log_level", log_level))
            if value is not None
        }
        return self.model_validate(self.model_copy(update=update).model_dump())


def load_config() -> IdenticonConfig:
    """Build an :class:`IdenticonConfig` from the environment."""
    return IdenticonConfig()


def configure_logging(config: IdenticonConfig) -> None:
    logging.basicConfig(
        level=config.log_level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
