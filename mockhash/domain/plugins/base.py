"""Plugin base interfaces."""
from abc import ABC, abstractmethod


class RequestNormalizer(ABC):
    """Request normalizer plugin interface."""
    
    id: str
    
    @abstractmethod
    def normalize_url(self, url: str) -> str:
        """
        Normalize a request URL before hashing.
        
        Args:
            url: Absolute request URL
            
        Returns:
            Normalized URL
        """
        raise NotImplementedError
    
    def use_body_in_hash(self, url: str) -> bool:
        """Whether the request body takes part in the hash for this URL."""
        return True
