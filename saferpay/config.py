"""Client configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    base_url: str = "https://www.saferpay.com/hosting/"
    timeout: float = 30.0  # Seconds per request, enforced by the transport
    verify_ssl: bool = True
    log_level: str = "INFO"

    model_config = {"env_prefix": "SAFERPAY_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
