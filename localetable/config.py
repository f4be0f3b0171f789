"""Configuration settings for localetable."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from ``LOCALETABLE_*`` environment variables."""

    # Default file for the CLI when none is given
    locale_file: str = "LocaleData.cfg"

    # Ambient language; empty means detect from the host
    language: str = ""
    lang_env_var: str = "LANG"

    # Tracing Configuration
    tracing_enabled: bool = True
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "LOCALETABLE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
