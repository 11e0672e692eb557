"""Configuration for tryfn logging."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from TRYFN_* environment variables.

    Built on demand by ``setup_logging``; importing tryfn never reads the
    environment.
    """

    # Logging Configuration
    log_level: str = "INFO"
    json_logs: bool = False
    rich_tracebacks: bool = False

    model_config = {
        "env_prefix": "TRYFN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
