"""Request fingerprint orchestrator."""
from typing import Optional

from mockhash.domain.entities.app_config import AppConfig
from mockhash.domain.entities.fingerprint import Fingerprint
from mockhash.domain.entities.mock_request import MockRequest
from mockhash.domain.plugins.base import RequestNormalizer
from mockhash.domain.services.fingerprint_service import (
    compute_request_hash,
    normalized_url,
    request_file_names,
)
from mockhash.infra.common import get_logger, load_normalize_rules
from mockhash.infra.plugins.registry import NORMALIZERS, get_normalizer
from mockhash.infra.plugins.rules import RulesNormalizer

logger = get_logger(__name__)


def resolve_normalizer(plugin_id: Optional[str], app_config: AppConfig) -> RequestNormalizer:
    """
    Resolve a normalizer by ID.
    
    Registered plugins win. Otherwise the ID is treated as a rules profile and
    loaded from YAML on every call; rules normalizers are never registered, so
    a changed rules path always takes effect.
    
    Args:
        plugin_id: Normalizer ID; defaults to app_config.normalizer
        app_config: Application configuration
        
    Returns:
        Normalizer plugin instance
        
    Raises:
        ValueError: If no plugin ID is given
        ConfigError: If the ID is neither registered nor a loadable rules profile
    """
    import mockhash.infra.plugins  # noqa: F401
    
    plugin_id = plugin_id or app_config.normalizer
    if not plugin_id or plugin_id in NORMALIZERS:
        return get_normalizer(plugin_id)
    
    rules = load_normalize_rules(plugin_id, app_config.normalize_rules_path)
    logger.info("Loaded rules normalizer: %s", rules.profile)
    return RulesNormalizer(rules)


def fingerprint_request(
    request: MockRequest,
    app_config: AppConfig,
    normalizer_id: Optional[str] = None,
    prefix_length: Optional[int] = None,
) -> Fingerprint:
    """
    Compute the request hash and mock file names for a request.
    
    Args:
        request: Request to fingerprint
        app_config: Application configuration
        normalizer_id: Optional normalizer override
        prefix_length: Optional hash length override
        
    Returns:
        Fingerprint
    """
    normalizer = resolve_normalizer(normalizer_id, app_config)
    if prefix_length is None:
        prefix_length = app_config.hash_prefix_length
    
    url = normalized_url(request, normalizer)
    request_hash = compute_request_hash(request, normalizer, prefix_length, url=url)
    request_file, request_body_file = request_file_names(request, request_hash, url)
    
    return Fingerprint(
        url=request.url,
        normalizer=normalizer.id,
        request_hash=request_hash,
        request_file=request_file,
        request_body_file=request_body_file,
    )
