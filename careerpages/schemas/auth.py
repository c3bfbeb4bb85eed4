"""
Pydantic schemas for authentication endpoints.
"""
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from careerpages.db.models.user import UserRole


def check_password_bytes(v: str) -> str:
    """Validate password length in bytes (bcrypt limit is 72 bytes)."""
    password_bytes = v.encode("utf-8")
    if len(password_bytes) > 72:
        raise ValueError("Password must be 72 characters or fewer")
    if len(password_bytes) < 8:
        raise ValueError("Password must be at least 8 characters")
    return v


class SignupRequest(BaseModel):
    """Request schema for company + admin account signup."""
    company_name: str = Field(..., min_length=1, max_length=200, description="Company display name")
    company_slug: str = Field(..., min_length=1, max_length=100, description="URL identifier of the careers page")
    email: EmailStr = Field(..., description="Admin email address")
    password: str = Field(..., description="Admin password (8-72 bytes)")
    name: Optional[str] = Field(default=None, max_length=200, description="Admin display name (defaults to the company name)")
    
    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        return check_password_bytes(v)
    
    class Config:
        json_schema_extra = {
            "example": {
                "company_name": "TechCorp Solutions",
                "company_slug": "techcorp",
                "email": "recruiter@techcorp.com",
                "password": "SecurePass123"
            }
        }


class SignupResponse(BaseModel):
    success: bool = True
    company_slug: str
    message: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    company_slug: str
    role: UserRole


class MeResponse(BaseModel):
    id: int
    email: str
    name: Optional[str]
    role: UserRole
    company_slug: str
