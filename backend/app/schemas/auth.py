from pydantic import BaseModel, ConfigDict, Field

from app.schemas.user import UserResponse


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(..., min_length=1, description="Authorization code from the OAuth callback")
    redirect_uri: str = Field(..., min_length=1, alias="redirectUri")


class LoginResponse(BaseModel):
    token: str
    # Only present for registered staff; unregistered students get a token alone
    user: UserResponse | None = None


class SessionClaims(BaseModel):
    """Claims carried by a session token. Never persisted."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    faculty: str | None = None
    student_id: str | None = Field(None, alias="studentId")
    exp: int | None = None
