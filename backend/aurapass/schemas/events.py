"""Event Schemas — event creation."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventCreate(BaseModel):
    """Event creation — id and imageUrl are assigned by the server."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=200)
    type: str | None = Field(None, max_length=100)
    start_date: str | None = Field(None, alias="startDate", max_length=50)
    status: str = Field("Open", max_length=20)
    description: str | None = Field(None, max_length=5000)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v
