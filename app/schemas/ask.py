from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class AskRequest(BaseModel):
    question: str | None = None
    topic: str | None = None
    video_id: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class AskResponse(BaseModel):
    answer: str
