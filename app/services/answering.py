"""Transcript-grounded answers to learner questions.

Each question runs through an ordered list of tiers. A tier returns an
``Answer`` or None to pass the question on; the first answer wins and no
tier is retried. The last tier always answers, so callers never see an error.
"""
import logging
from dataclasses import dataclass

from app.clients.claude import complete, is_configured
from app.clients.youtube import YouTubeError
from app.config import get_settings
from app.services.catalog import suggest_videos
from app.services.relevance import top_relevant_sentences
from app.services.transcripts import fetch_transcript

logger = logging.getLogger(__name__)

EMPTY_QUESTION_ANSWER = "Please provide a question."
ERROR_ANSWER = "Sorry, I ran into an issue answering that question."

SUMMARY_INTENTS = ("summary", "summarize", "summarise", "outline", "overview", "what is this video about")
SUMMARY_QUERY_TERMS = "introduction overview basics"
MAX_SUMMARY_SENTENCES = 4
MAX_EXTRACT_SENTENCES = 5
MAX_SUGGESTIONS = 2

TUTOR_PROMPT = """You are a concise, helpful tutor. Answer using the video transcript and \
topic below. If the question falls outside them, say you don't know. Provide clear, \
step-by-step guidance when appropriate.

TOPIC: {topic}
TRANSCRIPT:
{transcript}

QUESTION: {question}"""


@dataclass(frozen=True)
class Answer:
    text: str
    tier: str


@dataclass(frozen=True)
class QuestionContext:
    question: str
    topic: str
    transcript: str
    transcript_excerpt: str

    @property
    def topic_label(self) -> str:
        return self.topic or "this topic"


def _bullets(lines: list[str]) -> str:
    return "\n".join(f"- {line}" for line in lines)


def build_context(question: str, topic: str | None, video_id: str | None) -> QuestionContext:
    transcript = fetch_transcript(video_id) if video_id else ""
    budget = get_settings().TRANSCRIPT_CHAR_BUDGET
    return QuestionContext(
        question=question.strip(),
        topic=(topic or "").strip(),
        transcript=transcript,
        transcript_excerpt=transcript[:budget],
    )


def generative_tier(ctx: QuestionContext) -> Answer | None:
    if not is_configured():
        return None
    text = complete(TUTOR_PROMPT.format(
        topic=ctx.topic or "(unspecified)",
        transcript=ctx.transcript_excerpt or "(no transcript available)",
        question=ctx.question,
    ))
    if not text:
        return None
    return Answer(text, "generative")


def summary_tier(ctx: QuestionContext) -> Answer | None:
    lowered = ctx.question.lower()
    if not any(intent in lowered for intent in SUMMARY_INTENTS):
        return None
    sentences = top_relevant_sentences(
        ctx.transcript, f"{ctx.topic} {SUMMARY_QUERY_TERMS}", MAX_SUMMARY_SENTENCES
    )
    if sentences:
        return Answer(f"Here's a quick summary of this video:\n{_bullets(sentences)}", "summary")
    return Answer(
        f"This video introduces {ctx.topic_label} and walks through its core ideas and basics.",
        "summary",
    )


def transcript_tier(ctx: QuestionContext) -> Answer | None:
    sentences = top_relevant_sentences(ctx.transcript, ctx.question, MAX_EXTRACT_SENTENCES)
    if not sentences:
        return None
    return Answer(
        f"From the current video context:\n{_bullets(sentences)}",
        "transcript",
    )


def suggestion_tier(ctx: QuestionContext) -> Answer | None:
    try:
        videos = suggest_videos(f"{ctx.topic} {ctx.question}".strip(), MAX_SUGGESTIONS)
    except YouTubeError:
        logger.exception("Suggestion search failed")
        return None
    if not videos:
        return None
    lines = [f"{v.title} — {v.channel_title}" for v in videos]
    return Answer(
        "I couldn't find that in this video. These videos might cover it:\n" + _bullets(lines),
        "suggestion",
    )


def apology_tier(ctx: QuestionContext) -> Answer:
    return Answer(
        f"I couldn't find an answer to that for \"{ctx.topic_label}\". "
        "Try asking a more specific question or a step-by-step task to get a practical answer.",
        "apology",
    )


TIERS = (generative_tier, summary_tier, transcript_tier, suggestion_tier, apology_tier)


def answer_question(question: str | None, topic: str | None = None, video_id: str | None = None) -> Answer:
    """Answer a question about the current lesson. Never raises."""
    if not question or not question.strip():
        return Answer(EMPTY_QUESTION_ANSWER, "validation")

    try:
        ctx = build_context(question, topic, video_id)
        for tier in TIERS:
            answer = tier(ctx)
            if answer is not None:
                logger.info("Question answered by %s tier", answer.tier)
                return answer
    except Exception:
        logger.exception("Unexpected error answering question")
    return Answer(ERROR_ANSWER, "error")
