"""Pydantic models for request bodies."""

from pydantic import BaseModel


class Credentials(BaseModel):
    """Username and password submitted to register or log in.

    Both fields are optional so missing values reach the services and are
    reported as a 400 with a message rather than a validation error.
    """

    username: str | None = None
    password: str | None = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    message: str
    access_token: str
    token_type: str = "bearer"
    expires_at: str
