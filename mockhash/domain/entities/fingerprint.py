"""Fingerprint entity."""
from pydantic import BaseModel


class Fingerprint(BaseModel):
    """Content-addressing keys computed for a request."""
    url: str
    normalizer: str
    request_hash: str
    request_file: str
    request_body_file: str | None = None
