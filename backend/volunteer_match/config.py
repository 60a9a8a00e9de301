from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    app_name: str = "Volunteer Match API"
    api_prefix: str = "/api"

    # Mock authentication: token = token_prefix + user id
    token_prefix: str = "mock-token-"

    # Load the demo accounts and jobs on startup
    seed_demo_data: bool = True

    # CORS headers sent on every response
    cors_allow_origin: str = "*"
    cors_allow_headers: str = "Content-Type, Authorization"
    cors_allow_methods: str = "GET, POST, PUT, PATCH, DELETE, OPTIONS"

    metrics_enabled: bool = True
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8080

    class Config:
        env_file = ".env"
        env_prefix = "VOLUNTEER_MATCH_"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
