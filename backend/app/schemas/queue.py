from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.models.queue import QueueStatus


class RegisterRequest(BaseModel):
    """Anonymous ticket registration."""

    model_config = ConfigDict(populate_by_name=True)

    topic_id: int = Field(
        ...,
        ge=1,
        validation_alias=AliasChoices("topicId", "topic", "topic_id"),
    )
    first_name: str = Field(
        ..., min_length=1, max_length=100, validation_alias=AliasChoices("firstName", "first_name")
    )
    last_name: str = Field(
        ..., min_length=1, max_length=100, validation_alias=AliasChoices("lastName", "last_name")
    )
    note: str | None = Field(None, max_length=255)


class TicketResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    number: str
    topic_id: int = Field(..., alias="topicId")
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    note: str | None = None
    status: QueueStatus
    created_at: datetime = Field(..., alias="createdAt")


class RegisterResponse(BaseModel):
    token: str
    ticket: TicketResponse
