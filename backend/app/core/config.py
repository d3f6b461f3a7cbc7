from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # core
    ENV: str = "dev"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # database
    # Plain string so sqlite:// URLs used in tests are accepted too
    DATABASE_URL: str | None = None

    # auth / sessions
    AUTH_SECRET: str | None = None  # signs the session cookie
    AUTH_URL: str | None = None
    AUTH_GOOGLE_ID: str | None = None
    AUTH_GOOGLE_SECRET: str | None = None
    SESSION_COOKIE: str = "studio_session"
    FRONTEND_ORIGIN: str | None = None
    # Explicit debug-only switch for wide-open CORS in non-prod envs
    CORS_ALLOW_ALL_ORIGINS: bool = False

    # llm
    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str | None = None  # None means the default OpenAI endpoint
    LLM_MODEL: str = "gpt-5"
    LLM_TIMEOUT_SECONDS: float = 120.0

    class Config:
        env_file = ".env"
        case_sensitive = True


# Variables reported (presence only, never value) by the health endpoint
REQUIRED_ENV_VARS = (
    "AUTH_SECRET",
    "AUTH_URL",
    "AUTH_GOOGLE_ID",
    "AUTH_GOOGLE_SECRET",
    "DATABASE_URL",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
)


def env_presence(settings: Settings) -> dict[str, bool]:
    """
    Map each required configuration variable to whether it is set.
    """
    presence: dict[str, bool] = {}
    for name in REQUIRED_ENV_VARS:
        value = getattr(settings, name, None)
        presence[name] = bool(value and str(value).strip())
    return presence


@lru_cache
def get_settings() -> Settings:
    return Settings()
