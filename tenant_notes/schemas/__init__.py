"""
Schemas module
"""

from tenant_notes.schemas.token import Principal, LoginUser, LoginResponse
from tenant_notes.schemas.user import UserLogin
from tenant_notes.schemas.note import NoteCreate, NoteUpdate, NoteAuthor, NoteResponse
from tenant_notes.schemas.tenant import TenantSummary, TenantUpgradeResponse, MessageResponse

__all__ = [
    "Principal",
    "LoginUser",
    "LoginResponse",
    "UserLogin",
    "NoteCreate",
    "NoteUpdate",
    "NoteAuthor",
    "NoteResponse",
    "TenantSummary",
    "TenantUpgradeResponse",
    "MessageResponse",
]
