from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional

class Settings(BaseSettings):
    # System Settings
    LOG_LEVEL: str = "WARNING"

    # yt-dlp
    YTDLP_PATH: str = "yt-dlp"
    COOKIES_PATH: Optional[str] = None

    # Output Defaults
    DEFAULT_LANGUAGE: str = "en"
    DEFAULT_FORMAT: Literal["txt", "srt", "json"] = "txt"
    # "minutes" keeps growing past 59 ([75:03]), "hours" switches to [1:15:03]
    TIMESTAMP_STYLE: Literal["minutes", "hours"] = "minutes"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
