import logging

from app.clients.youtube import YouTubeAPIError, get_details, list_playlist_items, search
from app.schemas.catalog import CandidatePlaylist, CandidateVideo
from app.services.classifier import EducationalClassifier, default_classifier
from app.services.duration import parse_duration

logger = logging.getLogger(__name__)

PLAYLIST_QUERY_TERMS = "tutorial learn course guide playlist"
VIDEO_QUERY_TERMS = "tutorial learn course guide how to basics fundamentals"

MAX_PLAYLIST_RESULTS = 5
MAX_VIDEO_RESULTS = 15
MAX_FALLBACK_RESULTS = 20
MAX_FALLBACK_VIDEOS = 10
MAX_PLAYLIST_ITEMS = 50


def _dedupe(rows: list[dict]) -> list[dict]:
    seen = set()
    unique = []
    for row in rows:
        if row["id"] and row["id"] not in seen:
            seen.add(row["id"])
            unique.append(row)
    return unique


def _enrich(rows: list[dict]) -> list[CandidateVideo]:
    """Merge batch details (duration, publish date) into search rows by id."""
    if not rows:
        return []
    ids = list(dict.fromkeys(r["id"] for r in rows))
    details = {d["id"]: d for d in get_details(ids)}
    videos = []
    for row in rows:
        detail = details.get(row["id"], {})
        videos.append(CandidateVideo(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            channel_title=row["channel_title"],
            duration_seconds=parse_duration(detail.get("duration_code")),
            published_at=detail.get("published_at") or row.get("published_at"),
        ))
    return videos


def search_playlists(topic: str) -> list[CandidatePlaylist]:
    """Find existing playlists for a topic. Playlists are not classified."""
    rows = search(f"{topic} {PLAYLIST_QUERY_TERMS}", "playlist", MAX_PLAYLIST_RESULTS)
    return [
        CandidatePlaylist(
            id=r["id"],
            title=r["title"],
            description=r["description"],
            channel_title=r["channel_title"],
        )
        for r in rows
        if r["id"]
    ]


def _relaxed_search(topic: str, classifier: EducationalClassifier) -> list[CandidateVideo]:
    try:
        videos = _enrich(_dedupe(search(topic, "video", MAX_FALLBACK_RESULTS)))
    except YouTubeAPIError:
        logger.exception("Relaxed video search failed for '%s'", topic)
        return []
    accepted = [v for v in videos if classifier.is_acceptable(v.title, v.description)]
    return accepted[:MAX_FALLBACK_VIDEOS]


def search_videos(topic: str, classifier: EducationalClassifier = default_classifier) -> list[CandidateVideo]:
    """Educational videos for a topic, enriched with durations.

    The strict pass searches with educational terms appended and keeps only
    classifier-approved videos. When that keeps nothing, a relaxed pass
    searches the bare topic and drops only disqualified videos. Errors in the
    strict pass propagate; errors in the relaxed pass yield an empty list.
    """
    videos = _enrich(_dedupe(search(f"{topic} {VIDEO_QUERY_TERMS}", "video", MAX_VIDEO_RESULTS)))
    educational = [v for v in videos if classifier.is_educational(v.title, v.description)]
    logger.info("Strict pass for '%s': %d of %d videos kept", topic, len(educational), len(videos))
    if educational:
        return educational

    logger.info("No educational videos found for '%s', trying relaxed search", topic)
    relaxed = _relaxed_search(topic, classifier)
    logger.info("Relaxed pass for '%s': %d videos kept", topic, len(relaxed))
    return relaxed


def get_playlist_items(playlist_id: str) -> list[CandidateVideo]:
    """Up to 50 playlist videos in playlist order.

    Enrichment failures keep the items without durations.
    """
    rows = [r for r in list_playlist_items(playlist_id, MAX_PLAYLIST_ITEMS) if r["id"]]
    if not rows:
        return []
    try:
        return _enrich(rows)
    except YouTubeAPIError:
        logger.exception("Duration enrichment failed for playlist %s", playlist_id)
        return [
            CandidateVideo(
                id=r["id"],
                title=r["title"],
                description=r["description"],
                channel_title=r["channel_title"],
                published_at=r.get("published_at"),
            )
            for r in rows
        ]


def suggest_videos(query: str, limit: int = 2) -> list[CandidateVideo]:
    """Plain video search used for related-video suggestions; no filtering."""
    rows = search(query, "video", 5)
    return [
        CandidateVideo(
            id=r["id"],
            title=r["title"],
            description=r["description"],
            channel_title=r["channel_title"],
        )
        for r in _dedupe(rows)[:limit]
    ]
