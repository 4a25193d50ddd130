import secrets

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- AI service ---
    AI_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("AI_API_KEY", "GEMINI_API_KEY", "API_KEY"),
    )
    AI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    FAST_MODEL: str = "gemini-3-flash-preview"
    REASONING_MODEL: str = "gemini-3-pro-preview"
    THINKING_BUDGET: int = 32768

    # --- Web ---
    ALLOWED_ORIGINS: str = "*"
    SESSION_SECRET: str = Field(default_factory=lambda: secrets.token_hex(32))
    MAX_SESSIONS: int = 500

    LOG_LEVEL: str = "INFO"


settings = Settings()
