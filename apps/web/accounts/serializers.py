"""
Pydantic schemas for auth request bodies.

Fields default to "" so a missing field and a blank one get the same
"All fields are required" answer.
"""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Request body for POST /api/auth/register."""

    name: str = ""
    email: str = ""
    password: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.name.strip() and self.email.strip() and self.password)


class LoginRequest(BaseModel):
    """Request body for POST /api/auth/login."""

    email: str = ""
    password: str = ""
