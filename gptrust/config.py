from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Completion service
    gptrust_base_url: str = "https://api.openai.com/v1"
    gptrust_api_key: str | None = None

    # HTTP client timeouts (seconds)
    gptrust_http_connect_timeout: float = 5.0
    gptrust_http_read_timeout: float = 120.0

    # Logging
    gptrust_log_level: str = "info"

    model_config = {"env_prefix": "", "case_sensitive": False, "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
