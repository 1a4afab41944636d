from pydantic import BaseModel
from typing import Optional


def blank_to_none(v):
    """Form posts send empty strings for untouched optional inputs."""
    if isinstance(v, str) and v.strip() == "":
        return None
    return v


class Message(BaseModel):
    detail: str


class UnionSummary(BaseModel):
    id: int
    name: str
    slug: str

    class Config:
        from_attributes = True


class PlaceholderPage(BaseModel):
    """Body of the not-yet-built union pages (payments, grievances)."""
    union: UnionSummary
    items: list = []
    message: Optional[str] = None
