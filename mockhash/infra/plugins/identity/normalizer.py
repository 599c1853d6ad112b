"""Identity normalizer plugin."""
from mockhash.domain.plugins.base import RequestNormalizer


class IdentityNormalizer(RequestNormalizer):
    """Leaves requests untouched."""
    
    id = "identity"
    
    def normalize_url(self, url: str) -> str:
        return url
