from datetime import date

from pydantic_settings import BaseSettings, SettingsConfigDict

# Every day the calendar holds; daily stepping never examines more
CALENDAR_DAYS = (date.max - date.min).days + 1


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DATEBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Formatting
    default_format: str = "%{yyyy-MM-dd}"
    default_lang: str = "en"

    # Generation safety cap (candidate days); None or 0 disables it
    max_iterations: int | None = CALENDAR_DAYS

    # Logging
    log_level: str = "INFO"


settings = Settings()
