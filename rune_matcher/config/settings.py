"""Application settings and configuration management."""

from functools import lru_cache
from typing import List

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Rune Matcher")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    
    # Matching defaults
    default_algorithm: str = Field(default="fuzzy")  # fuzzy, exact, prefix, suffix, equal
    case_mode: str = Field(default="smart")  # smart, ignore, respect
    forward: bool = Field(default=True)
    reset_boundary_on_match: bool = Field(default=False)
    
    # Limits
    max_input_length: int = Field(default=4096)
    max_pattern_length: int = Field(default=256)
    max_batch_size: int = Field(default=10000)
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or console
    
    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )
    
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
