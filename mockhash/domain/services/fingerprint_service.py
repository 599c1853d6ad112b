"""Request fingerprint service."""
from typing import Optional

from mockhash.domain.entities.mock_request import MockRequest
from mockhash.domain.plugins.base import RequestNormalizer
from mockhash.infra.common import get_logger
from mockhash.infra.common.hash_utils import compute_md5_string, MD5_HEX_LENGTH
from mockhash.infra.common.paths import MockPathBuilder
from mockhash.infra.common.body_encoding import data_suffix

logger = get_logger(__name__)

DEFAULT_PREFIX_LENGTH = 8


def normalized_url(request: MockRequest, normalizer: Optional[RequestNormalizer] = None) -> str:
    """Get the request URL after the normalizer (if any) has been applied."""
    if normalizer is None or not request.url:
        return request.url
    return normalizer.normalize_url(request.url)


def build_hash_input(
    request: MockRequest,
    normalizer: Optional[RequestNormalizer] = None,
    url: Optional[str] = None,
) -> bytes:
    """
    Build the bytes a request hash is computed over.
    
    Args:
        request: Request to fingerprint
        normalizer: Optional normalizer applied to the URL and consulted for the body
        url: Already normalized URL; computed from request and normalizer when None
        
    Returns:
        UTF-8 normalized URL followed by the body (when present and allowed)
    """
    if url is None:
        url = normalized_url(request, normalizer)
    
    hash_input = url.encode("utf-8") if url else b""
    
    use_body = True
    if normalizer is not None and request.url:
        use_body = normalizer.use_body_in_hash(request.url)
    
    if request.body and use_body:
        hash_input += request.body
    
    return hash_input


def compute_request_hash(
    request: MockRequest,
    normalizer: Optional[RequestNormalizer] = None,
    prefix_length: int = DEFAULT_PREFIX_LENGTH,
    url: Optional[str] = None,
) -> str:
    """
    Compute the short hash that keys a recorded request.
    
    Args:
        request: Request to fingerprint
        normalizer: Optional normalizer plugin
        prefix_length: Number of MD5 hex characters to keep (1-32)
        url: Already normalized URL, if the caller has one
        
    Returns:
        MD5 hex prefix, or "" if there is nothing to hash
        
    Raises:
        ValueError: If prefix_length is out of range
    """
    if not 1 <= prefix_length <= MD5_HEX_LENGTH:
        raise ValueError(f"prefix_length must be between 1 and {MD5_HEX_LENGTH}, got {prefix_length}")
    
    hash_input = build_hash_input(request, normalizer, url)
    if not hash_input:
        return ""
    
    request_hash = compute_md5_string(hash_input)[:prefix_length]
    logger.debug("Request hash for %s %s: %s", request.method, request.url, request_hash)
    return request_hash


def request_file_names(request: MockRequest, request_hash: str, url: str) -> tuple[str, Optional[str]]:
    """
    Get mock file names for a request.
    
    Args:
        request: Request the names are for
        request_hash: Hash from compute_request_hash
        url: Normalized URL the hash was computed from
    
    Returns:
        Tuple of (request JSON file name, request body file name or None if inline)
    """
    base_name = MockPathBuilder.base_name(url)
    
    json_name = MockPathBuilder.request_file_name(base_name, request_hash)
    body_name = None
    if request.body:
        body_name = MockPathBuilder.request_body_file_name(
            base_name, request_hash, data_suffix(request.content_type)
        )
    return json_name, body_name
