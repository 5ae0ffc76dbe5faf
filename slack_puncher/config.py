from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


load_dotenv()


class Settings(BaseSettings):
    slack_api_token: str | None = Field(None, alias="SLACK_API_TOKEN")
    slack_api_base_url: str = Field("https://slack.com/api", alias="SLACK_API_BASE_URL")
    slack_user_agent: str = Field("APIPuncher-v1.0.0;", alias="SLACK_USER_AGENT")
    slack_max_redirects: int = Field(3, alias="SLACK_MAX_REDIRECTS")
    request_timeout_seconds: float = Field(10.0, alias="REQUEST_TIMEOUT_SECONDS")
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def base_url(self) -> str:
        return self.slack_api_base_url.rstrip("/")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings: Settings = get_settings()
