from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    first_name_th: str | None = Field(None, alias="firstNameTH")
    last_name_th: str | None = Field(None, alias="lastNameTH")
    first_name_en: str | None = Field(None, alias="firstNameEN")
    last_name_en: str | None = Field(None, alias="lastNameEN")
    email: str
    counter_id: int | None = Field(None, alias="counterId")
