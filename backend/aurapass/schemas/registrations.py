"""Registration Schemas — register-for-event request."""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # "101" and 101 both accepted
    event_id: int = Field(alias="eventId")
