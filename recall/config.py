from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from RECALL_* environment variables or a .env file."""

    database_url: str = Field(
        default="sqlite:///recall.db",
        description="SQLAlchemy URL of the review store",
    )
    mastered_level: int = Field(
        default=4,
        description="Repetition level from which an item counts as mastered",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )

    model_config = SettingsConfigDict(
        env_prefix="RECALL_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )


settings = Settings()
