"""
Pydantic schemas for notes
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
import uuid

from tenant_notes.schemas.token import CAMEL_CASE


class NoteCreate(BaseModel):
    """Schema for creating a note"""
    title: Optional[str] = None
    content: Optional[str] = None


class NoteUpdate(BaseModel):
    """Schema for updating a note"""
    title: Optional[str] = None
    content: Optional[str] = None


class NoteAuthor(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    email: str


class NoteResponse(BaseModel):
    """Schema for note response"""
    model_config = CAMEL_CASE

    id: uuid.UUID
    title: str
    content: str
    tenant_id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime
    updated_at: Optional[datetime] = None
    user: NoteAuthor
