import logging

import anthropic

from app.config import get_settings

logger = logging.getLogger(__name__)


def is_configured() -> bool:
    return bool(get_settings().ANTHROPIC_API_KEY)


def get_claude_client() -> anthropic.Anthropic | None:
    settings = get_settings()
    if not settings.ANTHROPIC_API_KEY:
        logger.warning("ANTHROPIC_API_KEY not set, generative features disabled")
        return None
    return anthropic.Anthropic(
        api_key=settings.ANTHROPIC_API_KEY,
        timeout=settings.CLAUDE_TIMEOUT_SECONDS,
        max_retries=0,
    )


def complete(prompt: str, max_tokens: int | None = None) -> str | None:
    """Send a single prompt to Claude and return the reply text.

    Returns None when the service is unavailable: missing key, API error,
    timeout, or an empty reply.
    """
    client = get_claude_client()
    if not client:
        return None

    settings = get_settings()
    try:
        response = client.messages.create(
            model=settings.CLAUDE_MODEL,
            max_tokens=max_tokens or settings.CLAUDE_MAX_TOKENS,
            messages=[{"role": "user", "content": prompt}],
        )
    except Exception:
        logger.exception("Claude API call failed")
        return None

    text = "".join(block.text for block in response.content if block.type == "text").strip()
    if not text:
        logger.warning("Claude returned an empty reply")
        return None
    return text
