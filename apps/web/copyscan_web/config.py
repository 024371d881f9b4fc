from pydantic_settings import BaseSettings, SettingsConfigDict


class WebSettings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="COPYSCAN_",
        env_file=(".env", "apps/web/.env"),
        env_file_encoding="utf-8",
    )

    api_base_url: str = "http://localhost:8000"
    request_timeout_seconds: float = 120.0


web_settings = WebSettings()
