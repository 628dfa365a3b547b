import json
import logging
import re

from pydantic import ValidationError

from app.clients.claude import complete
from app.clients.youtube import YouTubeAPIError
from app.schemas.catalog import CandidatePlaylist, CandidateVideo
from app.schemas.plan import (
    CuratedDraft,
    CuratedPlan,
    LearningItem,
    LearningModule,
    LearningTips,
    PlaylistPlan,
)
from app.services.catalog import search_playlists, search_videos

logger = logging.getLogger(__name__)

DEFAULT_MILESTONES = ["Start with fundamentals", "Practice regularly", "Review and iterate"]

MAX_CANDIDATES = 20
MAX_DESCRIPTION_CHARS = 500
MAX_PLAN_ITEMS = 10
MAX_MODULES = 3
FALLBACK_MODULE_TITLE = "Getting Started"
FALLBACK_MODULE_ITEMS = 3
FALLBACK_ESTIMATE_MINUTES = 30

CURATION_PROMPT = """You are an expert learning designer. Given a topic and a list of \
YouTube videos (title, description, durationSeconds, channelTitle), create a concise \
learning plan. Keep to at most 10 items total across modules. Prefer videos with clear \
titles and reasonable lengths. Only use video ids from the provided list. Output strict \
JSON with this shape:
{
  "topic": string,
  "modules": [{"title": string, "estimatedTimeMinutes"?: number,
               "items": [{"videoId": string, "title": string, "url": string, "durationMinutes"?: number}]}],
  "totalEstimatedTimeMinutes"?: number,
  "tips": {"milestones": string[], "exercises"?: string[], "cheatSheet"?: string}
}
No markdown. No commentary.
INPUT:
"""

TIPS_PROMPT = """Generate concise learning tips for a topic. Output strict JSON with keys: \
milestones (3-5 bullets), exercises (optional, array), cheatSheet (optional, short string). \
No markdown.
TOPIC: {topic}"""

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")


class MalformedResponse(Exception):
    """Generated text could not be parsed into the expected structure."""


class NoVideosFound(Exception):
    pass


def watch_url(video_id: str, playlist_id: str | None = None) -> str:
    url = f"https://www.youtube.com/watch?v={video_id}"
    if playlist_id:
        url += f"&list={playlist_id}"
    return url


def _strip_fences(text: str) -> str:
    return _FENCE_RE.sub("", text.strip())


def _default_tips() -> LearningTips:
    return LearningTips(milestones=list(DEFAULT_MILESTONES))


def parse_tips(text: str) -> LearningTips:
    try:
        tips = LearningTips.model_validate_json(_strip_fences(text))
    except ValidationError as e:
        raise MalformedResponse(str(e)) from e
    if not tips.milestones:
        raise MalformedResponse("tips carry no milestones")
    return tips


def parse_curated(text: str) -> CuratedDraft:
    try:
        draft = CuratedDraft.model_validate_json(_strip_fences(text))
    except ValidationError as e:
        raise MalformedResponse(str(e)) from e
    if not any(module.items for module in draft.modules):
        raise MalformedResponse("curated plan has no items")
    return draft


def generate_tips(topic: str) -> LearningTips:
    """Milestones and exercises for a topic, or the default milestones."""
    text = complete(TIPS_PROMPT.format(topic=topic), max_tokens=1024)
    if not text:
        return _default_tips()
    try:
        return parse_tips(text)
    except MalformedResponse:
        logger.error("Claude returned malformed tips: %s", text[:300])
        return _default_tips()


def _cap_items(modules: list[LearningModule]) -> list[LearningModule]:
    """Keep the first MAX_MODULES modules and at most MAX_PLAN_ITEMS items overall."""
    capped = []
    remaining = MAX_PLAN_ITEMS
    for module in modules[:MAX_MODULES]:
        if remaining <= 0:
            break
        items = module.items[:remaining]
        remaining -= len(items)
        capped.append(module.model_copy(update={"items": items}))
    return capped


def _curation_input(topic: str, videos: list[CandidateVideo]) -> str:
    return json.dumps({
        "topic": topic,
        "videos": [
            {
                "id": v.id,
                "title": v.title,
                "description": v.description[:MAX_DESCRIPTION_CHARS],
                "durationSeconds": v.duration_seconds,
                "channelTitle": v.channel_title,
            }
            for v in videos
        ],
    })


def fallback_plan(topic: str, videos: list[CandidateVideo]) -> CuratedPlan:
    """Deterministic single-module plan from the first few videos."""
    items = [
        LearningItem(
            video_id=v.id,
            title=v.title,
            url=watch_url(v.id),
            duration_minutes=v.duration_minutes,
        )
        for v in videos[:FALLBACK_MODULE_ITEMS]
    ]
    return CuratedPlan(
        topic=topic,
        modules=[LearningModule(
            title=FALLBACK_MODULE_TITLE,
            estimated_time_minutes=FALLBACK_ESTIMATE_MINUTES,
            items=items,
        )],
        total_estimated_time_minutes=FALLBACK_ESTIMATE_MINUTES,
        tips=_default_tips(),
    )


def _known_items(modules: list[LearningModule], video_ids: set[str]) -> list[LearningModule]:
    """Drop items that point at videos outside the candidate set, then empty modules."""
    kept = []
    for module in modules:
        items = [item for item in module.items if item.video_id in video_ids]
        if items:
            kept.append(module.model_copy(update={"items": items}))
    if not kept:
        raise MalformedResponse("curated plan references no candidate videos")
    return kept


def curate_plan(topic: str, videos: list[CandidateVideo]) -> CuratedPlan:
    """Ask Claude to organize videos into modules; fall back to a fixed module."""
    candidates = videos[:MAX_CANDIDATES]
    text = complete(CURATION_PROMPT + _curation_input(topic, candidates))
    if not text:
        logger.warning("Curation unavailable for '%s', using fallback plan", topic)
        return fallback_plan(topic, videos)

    try:
        draft = parse_curated(text)
        modules = _known_items(draft.modules, {v.id for v in candidates})
    except MalformedResponse:
        logger.error("Claude returned malformed plan for '%s': %s", topic, text[:300])
        return fallback_plan(topic, videos)

    return CuratedPlan(
        topic=draft.topic or topic,
        modules=_cap_items(modules),
        total_estimated_time_minutes=draft.total_estimated_time_minutes,
        tips=draft.tips,
    )


def _playlist_rung(topic: str) -> PlaylistPlan | None:
    try:
        playlists = search_playlists(topic)
    except YouTubeAPIError:
        logger.exception("Playlist search failed for '%s'", topic)
        return None
    if not playlists:
        return None

    playlist: CandidatePlaylist = playlists[0]
    logger.info("Using playlist %s for '%s'", playlist.id, topic)
    return PlaylistPlan(
        topic=topic,
        playlist_id=playlist.id,
        playlist_title=playlist.title,
        playlist_channel_title=playlist.channel_title,
        tips=generate_tips(topic),
    )


def _curated_rung(topic: str) -> CuratedPlan:
    videos = search_videos(topic)
    if not videos:
        raise NoVideosFound(topic)
    plan = curate_plan(topic, videos)
    return plan.model_copy(update={"modules": plan.modules[:MAX_MODULES]})


def generate_learning_plan(topic: str) -> PlaylistPlan | CuratedPlan:
    """Build a learning plan for a topic.

    Prefers an existing playlist; otherwise curates top videos. Raises
    YouTubeConfigError when the catalog is not configured, YouTubeAPIError when
    the video search fails, and NoVideosFound when it returns nothing.
    """
    topic = topic.strip()
    plan = _playlist_rung(topic)
    if plan:
        return plan
    return _curated_rung(topic)
