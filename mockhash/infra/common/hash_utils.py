"""Hash utilities."""
import hashlib
from typing import Optional

from mockhash.infra.common.errors import CapabilityUnavailable
from mockhash.infra.common.logger import get_logger

logger = get_logger(__name__)

SHA256_DIGEST_SIZE = 32
MD5_HEX_LENGTH = 32


def _sha256(data: bytes):
    try:
        return hashlib.new("sha256", data)
    except ValueError as e:
        raise CapabilityUnavailable(f"SHA-256 is not available: {e}") from e


def require_sha256(data: bytes) -> bytes:
    """
    Compute the SHA-256 digest of data.
    
    Args:
        data: Bytes to hash (may be empty)
        
    Returns:
        32-byte digest
        
    Raises:
        CapabilityUnavailable: If the interpreter cannot build a SHA-256 hash
    """
    return _sha256(data).digest()


def compute_sha256(data: bytes) -> Optional[bytes]:
    """
    Compute the SHA-256 digest of data.
    
    Args:
        data: Bytes to hash (may be empty)
        
    Returns:
        32-byte digest, or None if SHA-256 is unavailable
    """
    try:
        return require_sha256(data)
    except CapabilityUnavailable as e:
        logger.warning("%s", e)
        return None


def compute_md5_string(data: bytes) -> str:
    """
    Compute the MD5 hash of data as a lowercase hex string.
    
    Args:
        data: Bytes to hash (may be empty)
        
    Returns:
        32-character lowercase hex string
    """
    return hashlib.md5(data, usedforsecurity=False).hexdigest()
