from __future__ import annotations
import os
from pydantic import BaseModel

class Settings(BaseModel):
    environment: str = os.getenv("ENVIRONMENT", "dev")
    app_name: str = os.getenv("APP_NAME", "hotel-submissions-api")
    app_display_name: str = os.getenv("APP_DISPLAY_NAME", "Hotel Submission Backend")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    git_sha: str = os.getenv("GIT_SHA", "dev")
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("PORT", os.getenv("API_PORT", "3001")))
    cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Volatile by default: every Store gets its own private in-memory database
    database_url: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    seed_sample_rooms: bool = os.getenv("SEED_SAMPLE_ROOMS", "1") == "1"

settings = Settings()
