from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import date, datetime
from app.models.member import MemberStatus
from app.schemas.common import blank_to_none

OPTIONAL_TEXT_FIELDS = ("email", "phone", "member_number", "date_joined")

class MemberBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)
    member_number: Optional[str] = Field(None, max_length=50)
    status: MemberStatus = MemberStatus.active
    date_joined: Optional[date] = None

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def empty_strings_are_none(cls, v):
        return blank_to_none(v)

class MemberCreate(MemberBase):
    pass

class MemberUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)
    member_number: Optional[str] = Field(None, max_length=50)
    status: Optional[MemberStatus] = None
    date_joined: Optional[date] = None

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def empty_strings_are_none(cls, v):
        return blank_to_none(v)

class MemberResponse(MemberBase):
    id: int
    union_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
