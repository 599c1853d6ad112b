"""Body encoding for mock files."""
import base64
import binascii
import json
from typing import Optional

from mockhash.infra.common.errors import EncodingError

TEXT_PREFIX = "text/"
JSON_PREFIX = "application/json"

_SUFFIXES = (
    ("image/jpeg", "jpg"),
    ("image/png", "png"),
    ("image/gif", "gif"),
    ("application/json", "json"),
    ("application/x-www-form-urlencoded", "txt"),
)


def encode_body(body: bytes, content_type: Optional[str] = None) -> str:
    """
    Encode a body for inline storage in a mock JSON file.
    
    Args:
        body: Raw body bytes
        content_type: Content-Type header value, if any
        
    Returns:
        Text for text/* bodies, pretty-printed JSON for JSON bodies,
        base64 for everything else
        
    Raises:
        EncodingError: If a JSON body is not valid JSON
    """
    if content_type:
        if content_type.startswith(TEXT_PREFIX):
            try:
                return body.decode("utf-8")
            except UnicodeDecodeError:
                pass
        
        if content_type.startswith(JSON_PREFIX):
            try:
                parsed = json.loads(body)
            except ValueError as e:
                raise EncodingError(f"Invalid JSON body: {e}") from e
            return json.dumps(parsed, indent=2, ensure_ascii=False)
    
    return base64.b64encode(body).decode("ascii")


def decode_body(text: str, content_type: Optional[str] = None) -> Optional[bytes]:
    """
    Decode a body written by encode_body.
    
    Returns None when the text cannot be decoded for the content type.
    """
    if content_type:
        if content_type.startswith(JSON_PREFIX) or content_type.startswith(TEXT_PREFIX):
            return text.encode("utf-8")
        return None
    
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return None


def data_suffix(content_type: Optional[str]) -> Optional[str]:
    """
    Get the file extension used to store a body in its own file.
    
    Returns None if the body should stay inline in the mock JSON.
    """
    if not content_type:
        return None
    
    for marker, suffix in _SUFFIXES:
        if marker in content_type:
            return suffix
    
    if content_type.startswith(TEXT_PREFIX):
        subtype = content_type[len(TEXT_PREFIX):].split(";")[0].strip()
        return subtype or None
    
    return None
