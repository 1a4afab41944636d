from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from app.schemas.common import blank_to_none

class UnionBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None

    @field_validator("description", mode="before")
    @classmethod
    def empty_description_is_none(cls, v):
        return blank_to_none(v)

class UnionCreate(UnionBase):
    pass

class UnionUpdate(BaseModel):
    # Slug is deliberately absent: it never changes after creation
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None

class UnionResponse(UnionBase):
    id: int
    slug: str
    created_by: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
