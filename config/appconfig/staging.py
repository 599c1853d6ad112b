"""Staging environment configuration."""
from mockhash.domain.entities.app_config import AppConfig

config = AppConfig(
    hash_prefix_length=8,
    normalizer="strip_tracking",
    log_level="INFO",
)
