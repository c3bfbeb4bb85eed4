"""
Pydantic schemas for section comment threads.
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    content: str = Field(..., max_length=5000, description="Comment text; '@Name' or '@email' mentions teammates")


class CommentResponse(BaseModel):
    id: int
    section_id: str = Field(..., validation_alias="section_key")
    user_email: str
    user_name: Optional[str]
    content: str
    mentions: Optional[List[str]]
    created_at: datetime

    class Config:
        from_attributes = True
        populate_by_name = True
