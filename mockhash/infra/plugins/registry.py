"""Plugin registry."""
from typing import Optional

from mockhash.domain.plugins.base import RequestNormalizer


# In-memory registry
NORMALIZERS: dict[str, RequestNormalizer] = {}


def register_normalizer(plugin: RequestNormalizer) -> None:
    """Register a request normalizer plugin."""
    NORMALIZERS[plugin.id] = plugin


def get_normalizer(plugin_id: Optional[str]) -> RequestNormalizer:
    """
    Get request normalizer plugin.
    
    Args:
        plugin_id: Plugin ID from config
        
    Returns:
        Normalizer plugin instance
        
    Raises:
        ValueError: If no normalizer found
    """
    if not plugin_id:
        raise ValueError("Plugin ID is required - no default normalizer available")
    
    if plugin_id not in NORMALIZERS:
        raise ValueError(f"Normalizer plugin '{plugin_id}' not found")
    
    return NORMALIZERS[plugin_id]
