"""
Pydantic schemas for authentication and tokens
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
import uuid

from tenant_notes.models.user import UserRole

# Python attributes stay snake_case; JSON keys are camelCase
CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class Principal(BaseModel):
    """Identity and tenant binding carried inside an access token.

    This is a snapshot taken at login; role and tenant changes made later
    are not visible until the user logs in again.
    """
    model_config = CAMEL_CASE

    user_id: uuid.UUID = Field(..., description="User ID")
    email: str
    role: UserRole
    tenant_id: uuid.UUID = Field(..., description="Tenant ID")
    tenant_slug: str


class LoginUser(BaseModel):
    """User summary returned alongside a token"""
    model_config = CAMEL_CASE

    id: uuid.UUID
    email: str
    role: UserRole
    tenant_slug: str


class LoginResponse(BaseModel):
    """Token response"""
    model_config = CAMEL_CASE

    token: str
    user: LoginUser
