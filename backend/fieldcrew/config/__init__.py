"""
Application Configuration
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Fieldcrew Collaborators"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Collaborator management API
    API_BASE_URL: str = "http://localhost:5000/api"
    API_TOKEN: str = ""
    REQUEST_TIMEOUT: float = 30.0

    # Logging
    LOG_LEVEL: str = "INFO"

    # Collaborator defaults
    DEFAULT_ROLE: str = "Worker"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
