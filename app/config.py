from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    YT_API_KEY: str = ""
    ANTHROPIC_API_KEY: str = ""

    CLAUDE_MODEL: str = "claude-sonnet-4-5-20250929"
    CLAUDE_MAX_TOKENS: int = 2048
    CLAUDE_TIMEOUT_SECONDS: float = 30.0
    YOUTUBE_TIMEOUT_SECONDS: float = 8.0
    TRANSCRIPT_TIMEOUT_SECONDS: float = 8.0

    # Transcript retrieval
    TRANSCRIPT_LANGUAGES: list[str] = ["en", "en-US", "en-GB", "es", "fr", "de", "pt", "hi"]
    TRANSCRIPT_CHAR_BUDGET: int = 8000

    # Comma-separated origins for the web front end
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    APP_TITLE: str = "Lesson Curator"
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
