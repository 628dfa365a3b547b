from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True, "frozen": True}


class LearnRequest(BaseModel):
    topic: str | None = None


class LearningItem(BaseModel):
    video_id: str = Field(min_length=1)
    title: str
    url: str
    duration_minutes: int | None = None

    model_config = _CAMEL


class LearningModule(BaseModel):
    title: str
    estimated_time_minutes: int | None = None
    items: list[LearningItem]

    model_config = _CAMEL


class LearningTips(BaseModel):
    milestones: list[str]
    exercises: list[str] | None = None
    cheat_sheet: str | None = None

    model_config = _CAMEL


class PlaylistPlan(BaseModel):
    topic: str
    mode: Literal["playlist"] = "playlist"
    playlist_id: str = Field(min_length=1)
    playlist_title: str
    playlist_channel_title: str
    tips: LearningTips | None = None

    model_config = _CAMEL


class CuratedPlan(BaseModel):
    topic: str
    mode: Literal["curated"] = "curated"
    modules: list[LearningModule]
    total_estimated_time_minutes: int | None = None
    tips: LearningTips | None = None

    model_config = _CAMEL


LearningPlan = Annotated[Union[PlaylistPlan, CuratedPlan], Field(discriminator="mode")]


class CuratedDraft(BaseModel):
    """Shape the generative service is asked to return for a curated plan."""

    topic: str | None = None
    modules: list[LearningModule] = Field(min_length=1)
    total_estimated_time_minutes: int | None = None
    tips: LearningTips | None = None

    model_config = _CAMEL
