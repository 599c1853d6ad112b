"""Normalization rules entity."""
from pydantic import BaseModel, Field


class NormalizeRules(BaseModel):
    """Rules applied to a request before it is hashed."""
    profile: str = "default"
    drop_query: bool = False
    drop_query_params: list[str] = Field(default_factory=list)
    drop_fragment: bool = False
    use_body: bool = True
