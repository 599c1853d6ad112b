"""Application configuration entity."""
from pydantic import BaseModel, Field


class AppConfig(BaseModel):
    """Application configuration for runtime environment."""
    hash_prefix_length: int = Field(default=8, ge=1, le=32)
    """Number of MD5 hex characters kept in a request hash."""
    normalizer: str = "identity"
    log_level: str = "INFO"
    normalize_rules_path: str | None = None
