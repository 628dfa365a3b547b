from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CandidatePlaylist(BaseModel):
    id: str = Field(min_length=1)
    title: str
    description: str = ""
    channel_title: str = ""

    model_config = {"frozen": True}


class CandidateVideo(BaseModel):
    id: str = Field(min_length=1)
    title: str
    description: str = ""
    channel_title: str = ""
    duration_seconds: int | None = None
    published_at: str | None = None

    model_config = {"frozen": True}

    @property
    def duration_minutes(self) -> int | None:
        if not self.duration_seconds:
            return None
        return round(self.duration_seconds / 60)


class PlaylistLessonOut(BaseModel):
    video_id: str
    title: str
    url: str
    duration_minutes: int | None = None
    channel_title: str = ""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
