"""
Pydantic schemas for company membership management.
"""
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from careerpages.db.models.user import UserRole
from careerpages.schemas.auth import check_password_bytes


class MemberResponse(BaseModel):
    id: int
    email: str
    name: Optional[str]
    role: UserRole

    class Config:
        from_attributes = True


class MemberListResponse(BaseModel):
    users: List[MemberResponse]


class MemberCreate(BaseModel):
    email: EmailStr = Field(..., description="New member email")
    password: str = Field(..., description="Initial password (8-72 bytes)")
    name: Optional[str] = Field(None, max_length=200)
    role: UserRole = UserRole.EDITOR

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        return check_password_bytes(v)


class RoleUpdate(BaseModel):
    role: UserRole


class TeamMember(BaseModel):
    """Roster entry used by the editor for @mentions."""
    email: str
    name: Optional[str]
    role: UserRole

    class Config:
        from_attributes = True
