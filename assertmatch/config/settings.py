"""Engine settings read from ``ASSERTMATCH_*`` environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatchSettings(BaseSettings):
    """Settings shared by every matcher.

    Attributes:
        string_limit: Longest rendering of a single value inside a matcher
            message before it is cut with ``...``.
        verbose: Emit the engine's DEBUG records when logging is configured.
        log_json: Render log records as JSON lines instead of console text.
    """

    model_config = SettingsConfigDict(env_prefix='ASSERTMATCH_', frozen=True)

    string_limit: int = Field(default=80, ge=10)
    verbose: bool = False
    log_json: bool = False


@lru_cache(maxsize=1)
def get_settings() -> MatchSettings:
    return MatchSettings()


def reset_settings() -> None:
    get_settings.cache_clear()
