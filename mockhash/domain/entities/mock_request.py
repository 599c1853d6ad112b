"""Mock request entity."""
from pydantic import BaseModel


class MockRequest(BaseModel):
    """HTTP request as seen by the mocking layer."""
    url: str
    method: str = "GET"
    headers: dict[str, str] | None = None
    body: bytes | None = None
    
    @property
    def content_type(self) -> str | None:
        """Get the Content-Type header, matched case-insensitively."""
        if not self.headers:
            return None
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value
        return None
