from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache

class Settings(BaseSettings):
    TELEGRAM_BOT_TOKEN: str = Field(..., min_length=1, description="Telegram Bot API token from @BotFather")
    MONGO_URI: str = Field(..., min_length=1, description="MongoDB connection string")
    PORT: int = Field(8080, description="Port the webhook server listens on")
    MONGO_DATABASE: str = "test"
    MONGO_COLLECTION: str = "urls"
    MONGO_TIMEOUT_MS: int = 5000
    LOG_LEVEL: str = "INFO"

    # Reply templates
    REPLY_SAVED: str = Field(
        "Message and 3D model link received and saved!",
        description="Sent when a link was found and stored",
    )
    REPLY_MISSING_URL: str = Field(
        "Please send a link starting with http:// or https:// for the 3D model.",
        description="Sent when the message has no link",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        # An empty variable counts as unset: required ones fail, optional ones take the default
        env_ignore_empty=True
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
