"""User Schemas — student creation and self-service profile update.

Invariants:
    - ProfileUpdate: every field optional; empty strings treated as "not supplied"
    - newPassword requires currentPassword (checked by the service, reported as WrongPassword)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StudentCreate(BaseModel):
    name: str | None = Field(None, max_length=200)


class ProfileUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_password: str | None = Field(None, alias="currentPassword", max_length=200)
    new_password: str | None = Field(None, alias="newPassword", max_length=200)
    new_name: str | None = Field(None, alias="newName", max_length=200)
    email: str | None = Field(None, max_length=200)
    phone: str | None = Field(None, max_length=50)

    @field_validator("new_password", "new_name", "email", "phone")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v
