from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    env: str = "dev"
    api_port: int = 8000
    cors_allow_origins: list[str] = ["*"]
    coingecko_base_url: str = "https://api.coingecko.com/api/v3"
    coingecko_api_key: Optional[str] = None  # demo key, sent as x-cg-demo-api-key
    http_timeout_s: float = 20.0
    vs_currency: str = "usd"
    chart_default_days: int = 7
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="")

settings = Settings()
