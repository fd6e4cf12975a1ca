"""
Note model - tenant-scoped user content
"""

from sqlalchemy import DateTime, Text
from sqlmodel import Field, SQLModel, Relationship
from datetime import datetime
from typing import Optional
import uuid

from tenant_notes.models.base import utcnow
from tenant_notes.models.user import User


class Note(SQLModel, table=True):
    """Note owned by a tenant and attributed to its author"""

    __tablename__ = "notes"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    tenant_id: uuid.UUID = Field(foreign_key="tenants.id", index=True, nullable=False)
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True, nullable=False)

    title: str = Field(sa_type=Text, nullable=False)
    content: str = Field(default="", sa_type=Text, nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False, index=True)
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    user: Optional[User] = Relationship()
