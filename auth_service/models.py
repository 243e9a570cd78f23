"""Auth Service — request/response models.

Request fields are optional so that a missing email or password reaches the
workflow and gets its message back, rather than a 422 from validation.
"""

from typing import Optional

from pydantic import BaseModel


class UserRegister(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResult(BaseModel):
    success: bool
    message: str
    token: Optional[str] = None


class TokenVerifyRequest(BaseModel):
    token: str


class TokenVerifyResponse(BaseModel):
    valid: bool
    subject: str
    expires_at: int


class HealthResponse(BaseModel):
    status: str
    service: str
