import pytest

from app.api.v1 import ask as ask_routes
from app.api.v1 import learn as learn_routes
from app.api.v1 import playlists as playlist_routes
from app.clients.youtube import YouTubeAPIError, YouTubeConfigError
from app.schemas.catalog import CandidatePlaylist
from app.services import answering, planner
from app.services.answering import Answer
from app.services.planner import NoVideosFound
from app.services.topics import STARTER_TOPICS


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["youtube_configured"] is True
    assert resp.json()["claude_configured"] is False


def test_learn_rejects_short_topic(client):
    for body in ({}, {"topic": ""}, {"topic": " a "}):
        resp = client.post("/api/v1/learn", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing or invalid topic"}


def test_learn_rejects_malformed_body(client):
    for kwargs in ({"json": {"topic": 5}}, {"json": ["Python"]}, {"content": b"not json"}):
        resp = client.post("/api/v1/learn", headers={"Content-Type": "application/json"}, **kwargs)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing or invalid topic"}


def test_learn_playlist_plan(client, monkeypatch):
    monkeypatch.setattr(
        planner, "search_playlists",
        lambda topic: [CandidatePlaylist(id="PL1", title="Python Course", channel_title="Chan")],
    )
    monkeypatch.setattr(planner, "complete", lambda prompt, max_tokens=None: None)

    resp = client.post("/api/v1/learn", json={"topic": "Python basics"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["mode"] == "playlist"
    assert data["playlistId"] == "PL1"
    assert data["playlistTitle"] == "Python Course"
    assert data["playlistChannelTitle"] == "Chan"
    assert data["tips"]["milestones"] == planner.DEFAULT_MILESTONES
    assert "modules" not in data


def test_learn_curated_fallback_end_to_end(client, monkeypatch, videos):
    """No playlist, five classified videos, curation unavailable."""
    monkeypatch.setattr(planner, "search_playlists", lambda topic: [])
    monkeypatch.setattr(planner, "search_videos", lambda topic: videos)
    monkeypatch.setattr(planner, "complete", lambda prompt, max_tokens=None: None)

    resp = client.post("/api/v1/learn", json={"topic": "Python basics"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["mode"] == "curated"
    assert data["topic"] == "Python basics"
    assert len(data["modules"]) == 1
    assert len(data["modules"][0]["items"]) == 3
    assert data["modules"][0]["items"][0]["videoId"] == "vid1"
    assert data["modules"][0]["items"][0]["durationMinutes"] == 10
    assert data["totalEstimatedTimeMinutes"] == 30
    assert "playlistId" not in data


def test_learn_missing_youtube_key(client, no_youtube_key, monkeypatch):
    resp = client.post("/api/v1/learn", json={"topic": "Python basics"})
    assert resp.status_code == 500
    assert "not configured" in resp.json()["error"]


def test_learn_video_search_error(client, monkeypatch):
    def _boom(topic):
        raise YouTubeAPIError("search", 403, "quota")

    monkeypatch.setattr(planner, "search_playlists", lambda topic: [])
    monkeypatch.setattr(planner, "search_videos", _boom)

    resp = client.post("/api/v1/learn", json={"topic": "Python basics"})
    assert resp.status_code == 500
    assert "Failed to fetch videos" in resp.json()["error"]


def test_learn_no_videos(client, monkeypatch):
    monkeypatch.setattr(planner, "search_playlists", lambda topic: [])
    monkeypatch.setattr(planner, "search_videos", lambda topic: [])

    resp = client.post("/api/v1/learn", json={"topic": "zzzz qqqq"})
    assert resp.status_code == 404
    assert "No relevant videos" in resp.json()["error"]


def test_learn_unexpected_error_returns_json(client, monkeypatch):
    def _boom(topic):
        raise RuntimeError("planner exploded")

    monkeypatch.setattr(learn_routes, "generate_learning_plan", _boom)
    resp = client.post("/api/v1/learn", json={"topic": "Python basics"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "planner exploded"}


def test_ask_returns_answer(client, monkeypatch):
    seen = {}

    def _answer(question, topic=None, video_id=None):
        seen.update(question=question, topic=topic, video_id=video_id)
        return Answer("Use a for loop.", "transcript")

    monkeypatch.setattr(ask_routes, "answer_question", _answer)
    resp = client.post("/api/v1/ask", json={"question": "Loops?", "topic": "Python", "videoId": "abc"})

    assert resp.status_code == 200
    assert resp.json() == {"answer": "Use a for loop."}
    assert seen == {"question": "Loops?", "topic": "Python", "video_id": "abc"}


def test_ask_empty_question(client):
    resp = client.post("/api/v1/ask", json={"question": "  "})
    assert resp.status_code == 200
    assert resp.json() == {"answer": answering.EMPTY_QUESTION_ANSWER}


def test_ask_never_fails_visibly(client, monkeypatch):
    def _boom(video_id):
        raise RuntimeError("transcript service exploded")

    monkeypatch.setattr(answering, "fetch_transcript", _boom)
    resp = client.post("/api/v1/ask", json={"question": "What?", "videoId": "abc"})
    assert resp.status_code == 200
    assert resp.json() == {"answer": answering.ERROR_ANSWER}


def test_ask_malformed_body_still_answers(client, monkeypatch):
    monkeypatch.setattr(ask_routes, "answer_question", lambda *a, **kw: pytest.fail("should not answer"))
    for kwargs in ({"content": b"not json"}, {"json": {"question": 42}}, {"content": b""}):
        resp = client.post("/api/v1/ask", headers={"Content-Type": "application/json"}, **kwargs)
        assert resp.status_code == 200
        assert resp.json() == {"answer": answering.ERROR_ANSWER}


def test_playlist_items(client, monkeypatch, make_video):
    monkeypatch.setattr(
        playlist_routes, "get_playlist_items",
        lambda playlist_id: [make_video(1), make_video(2, duration_seconds=None)],
    )
    resp = client.get("/api/v1/playlists/PL1/items")

    assert resp.status_code == 200
    items = resp.json()
    assert items[0] == {
        "videoId": "vid1",
        "title": "Python Tutorial part 1",
        "url": "https://www.youtube.com/watch?v=vid1&list=PL1",
        "durationMinutes": 10,
        "channelTitle": "Code Academy",
    }
    assert "durationMinutes" not in items[1]


def test_playlist_items_upstream_error(client, monkeypatch):
    def _boom(playlist_id):
        raise YouTubeAPIError("playlistItems", 404, "playlistNotFound")

    monkeypatch.setattr(playlist_routes, "get_playlist_items", _boom)
    resp = client.get("/api/v1/playlists/PL404/items")
    assert resp.status_code == 502


def test_playlist_items_not_configured(client, monkeypatch):
    def _boom(playlist_id):
        raise YouTubeConfigError("YouTube API key not configured")

    monkeypatch.setattr(playlist_routes, "get_playlist_items", _boom)
    resp = client.get("/api/v1/playlists/PL1/items")
    assert resp.status_code == 500


def test_random_topic(client):
    resp = client.get("/api/v1/topics/random")
    assert resp.status_code == 200
    assert resp.json()["topic"] in STARTER_TOPICS
