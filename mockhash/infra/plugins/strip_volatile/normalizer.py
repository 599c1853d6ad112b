"""Strip-volatile normalizer plugin."""
from urllib.parse import urlsplit, urlunsplit

from mockhash.domain.plugins.base import RequestNormalizer


class StripVolatileNormalizer(RequestNormalizer):
    """Drops query string, fragment and body so only scheme, host and path identify a request."""
    
    id = "strip_volatile"
    
    def normalize_url(self, url: str) -> str:
        parts = urlsplit(url)
        return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    
    def use_body_in_hash(self, url: str) -> bool:
        return False
