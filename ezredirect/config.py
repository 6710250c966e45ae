"""Configuration management for the redirector."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

from ezredirect.lib.common.logging_config import LOG_LEVELS

REDIRECT_STATUSES = {301, 302, 303, 307, 308}


class Config(BaseSettings):
    """Application configuration."""
    
    # Server settings
    host: str = Field(
        default="127.0.0.1",
        description="Host to bind to"
    )
    
    port: int = Field(
        default=5050,
        ge=1,
        le=65535,
        description="Port to listen on"
    )
    
    # Rule settings
    rules_file: Optional[str] = Field(
        default=None,
        description="Path to the shortcut config file (one '<key> = <url>' per line)"
    )
    
    builtin_rules: bool = Field(
        default=False,
        description="Register the built-in code rules (g, gmail, cal, npm, yt)"
    )
    
    strict_config: bool = Field(
        default=True,
        description="Refuse to start on malformed config lines instead of skipping them"
    )
    
    redirect_status: int = Field(
        default=302,
        description="HTTP status used for redirects"
    )
    
    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )
    
    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )
    
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }
    
    @field_validator("redirect_status")
    @classmethod
    def validate_redirect_status(cls, v: int) -> int:
        """Only redirect statuses carry a Location the browser follows."""
        if v not in REDIRECT_STATUSES:
            raise ValueError(f"redirect_status must be one of {sorted(REDIRECT_STATUSES)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to upper case; uvicorn rejects unknown level names."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_config(**overrides) -> Config:
    """Load configuration from environment, applying explicit overrides."""
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return Config(**overrides)
