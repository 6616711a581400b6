from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_LOG_FORMATS = {"json", "console"}
ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    app_name: str = Field(default="Gateway Client")
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", description="Log renderer: 'json' or 'console'")
    wallet_provider: str = Field(
        default="masterpass",
        description="Wallet provider key used when a caller does not name one explicitly",
    )
    api_version: int = Field(default=45, ge=1, description="Gateway API version, informational only")

    @model_validator(mode="before")
    @classmethod
    def validate_logging_and_wallet(cls, data: dict) -> dict:
        """
        Validate the logging options and normalise the wallet provider key.

        The provider key selects the ``wallet.<provider>`` object of a wallet
        response, so it is stored stripped and lower case and may not be empty.
        """
        data = dict(data)

        log_format = str(data.get("log_format", "json")).lower()
        if log_format not in ALLOWED_LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {sorted(ALLOWED_LOG_FORMATS)}, got '{log_format}'"
            )
        data["log_format"] = log_format

        log_level = str(data.get("log_level", "INFO")).upper()
        if log_level not in ALLOWED_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(ALLOWED_LOG_LEVELS)}, got '{log_level}'"
            )
        data["log_level"] = log_level

        if "wallet_provider" in data:
            provider = str(data["wallet_provider"] or "").strip().lower()
            if not provider:
                raise ValueError("wallet_provider must not be empty")
            data["wallet_provider"] = provider

        return data


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: The cached settings instance
    """
    return Settings()


def clear_settings_cache() -> None:
    """
    Clear the cached settings instance.

    After calling this function, the next call to get_settings() will
    create a new Settings instance with updated configuration.
    """
    get_settings.cache_clear()
