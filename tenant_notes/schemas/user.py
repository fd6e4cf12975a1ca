"""
Pydantic schemas for users
"""

from pydantic import BaseModel
from typing import Optional


class UserLogin(BaseModel):
    """User login schema

    Fields are optional so that a missing value is reported as a 400 with
    a readable message instead of a schema error.
    """
    email: Optional[str] = None
    password: Optional[str] = None
