"""Auth Schemas — login request."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    gid: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=200)
