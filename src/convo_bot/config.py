"""Runtime configuration for Convo Bot."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="CONVO_BOT_", env_file=".env", extra="ignore")

    app_name: str = "convo-bot"
    log_level: str = "WARNING"
    characteristics_path: str | None = Field(
        default=None,
        description="Characteristic catalog file ('name;synonyms;solution-multiplier,...').",
    )
    solutions_path: str | None = Field(default=None, description="Solution catalog file ('name;' per line).")
    default_increment: float = Field(default=1.0, gt=0)
    ranking_limit: int = Field(default=5, ge=1)
    rank_enabled_only: bool = False


settings = Settings()
