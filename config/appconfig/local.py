"""Local environment configuration."""
import os
from mockhash.domain.entities.app_config import AppConfig

config = AppConfig(
    hash_prefix_length=int(os.getenv("MOCKHASH_HASH_PREFIX_LENGTH", "8")),
    normalizer=os.getenv("MOCKHASH_NORMALIZER", "identity"),
    log_level=os.getenv("MOCKHASH_LOG_LEVEL", "DEBUG"),
    normalize_rules_path=os.getenv("MOCKHASH_NORMALIZE_RULES_PATH"),
)
