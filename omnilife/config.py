"""
OmniLife - Configuration
Settings for the habit statistics engine and its HTTP surface.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "dev"  # dev | prod
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Goal tracking falls back to this when a habit has no target of its own
    default_target_consistency: int = 85

    class Config:
        env_file = ".env"
        env_prefix = "OMNILIFE_"


settings = Settings()
