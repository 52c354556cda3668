"""Auth schemas - the session handed back on register and login."""

from pydantic import BaseModel


class AuthUser(BaseModel):
    """Public view of a user account."""

    id: str
    name: str
    email: str


class AuthResponse(BaseModel):
    """Response for POST /api/auth/register and /api/auth/login."""

    token: str
    user: AuthUser
