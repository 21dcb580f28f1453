# Assumptions:
# - Configuration management using environment variables
# - Pydantic Settings for validation
# - Prefixed environment variables only, no .env file lookup
# - Defaults reproduce the plain JSON output of the original SDK


from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """SDK settings"""

    # Encoding
    serialize_nulls: bool = False
    pretty_printing: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"

    class Config:
        env_prefix = "PIO_EVENTS_"
        case_sensitive = False


def get_settings() -> Settings:
    """Get SDK settings"""
    return Settings()
