"""Configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class FetchSettings(BaseSettings):
    """Fetch configuration."""

    timeout: float = 10.0
    user_agent: str = "vpfetch/0.1"
    follow_redirects: bool = True
    max_connections: int = 100
    max_keepalive_connections: int = 20
    trust_any_certificate: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    model_config = {"env_prefix": "VPFETCH_"}


settings = FetchSettings()
