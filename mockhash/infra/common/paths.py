"""Centralized mock file naming."""
from typing import Optional
from urllib.parse import urlsplit


class MockPathBuilder:
    """Builder for mock file names following consistent structure."""
    
    @staticmethod
    def base_name(url: Optional[str]) -> str:
        """Get base name (host + path), or "request" when the URL has no host."""
        if not url:
            return "request"
        parts = urlsplit(url)
        if not parts.hostname:
            return "request"
        return f"{parts.hostname}{parts.path}"
    
    @staticmethod
    def request_file_name(base_name: str, request_hash: str) -> str:
        """Get request JSON file name."""
        return f"{base_name}-{request_hash}.json"
    
    @staticmethod
    def request_body_file_name(base_name: str, request_hash: str, suffix: Optional[str]) -> Optional[str]:
        """
        Get request body file name.
        
        Returns None when the body has no dedicated file type and is stored inline.
        """
        if suffix is None:
            return None
        return f"{base_name}-{request_hash}-request.{suffix}"
    
    @staticmethod
    def response_data_file_name(base_name: str, request_hash: str, suffix: Optional[str]) -> Optional[str]:
        """Get response data file name, or None when stored inline."""
        if suffix is None:
            return None
        return f"{base_name}-{request_hash}-response.{suffix}"
    
    @staticmethod
    def with_order_prefix(path: str, order: int) -> str:
        """Prefix the last path component with its position in a sequence."""
        head, sep, last = path.rpartition("/")
        return f"{head}{sep}{order}-{last}"
