from pydantic import BaseModel, ConfigDict, Field


class TopicResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    topic_th: str = Field(..., alias="topicTH")
    topic_en: str = Field(..., alias="topicEN")
    code: str
