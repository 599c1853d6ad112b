"""Common infrastructure utilities."""
from mockhash.infra.common.config import load_app_config, load_normalize_rules
from mockhash.infra.common.paths import MockPathBuilder
from mockhash.infra.common.logger import setup_logging, get_logger
from mockhash.infra.common.errors import (
    MockHashError,
    ConfigError,
    CapabilityUnavailable,
    EncodingError,
)
from mockhash.infra.common.body_encoding import encode_body, decode_body, data_suffix
from mockhash.infra.common.hash_utils import compute_sha256, require_sha256, compute_md5_string

__all__ = [
    "load_app_config",
    "load_normalize_rules",
    "MockPathBuilder",
    "setup_logging",
    "get_logger",
    "MockHashError",
    "ConfigError",
    "CapabilityUnavailable",
    "EncodingError",
    "encode_body",
    "decode_body",
    "data_suffix",
    "compute_sha256",
    "require_sha256",
    "compute_md5_string",
]
