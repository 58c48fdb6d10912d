from typing import Literal, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDPRINT_")

    app_name: str = "cardprint"

    # Forces DEBUG logging regardless of log_level
    debug: bool = False

    log_level: LogLevel = "INFO"

    # Grading authority recorded on descriptors mapped from PSA cert lookups
    default_grading_authority: str = "PSA"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


settings = Settings()


# =============================================================================
# FINGERPRINT SHAPE
# =============================================================================

# PSA cert numbers are 8-9 digits. If the authority changes its numbering
# length these bounds must move with it, or certified fingerprints will be
# read back as composite.
CERT_NUMBER_MIN_DIGITS = 8
CERT_NUMBER_MAX_DIGITS = 9

# player | set | year | card number | variant | grade | grading authority
FINGERPRINT_FIELD_COUNT = 7
