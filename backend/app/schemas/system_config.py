from pydantic import BaseModel, ConfigDict, Field


class SystemConfigResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    login_not_cmu: bool = Field(..., alias="loginNotCmu")


class LoginNotCmuUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    login_not_cmu: bool = Field(..., alias="loginNotCmu")


class MessageResponse(BaseModel):
    message: str
