# 📁 blueprint_module/config/settings.py
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from dotenv import load_dotenv


env_file_path = Path(__file__).resolve().parent.parent.parent / ".env.app"

class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # --- Core Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOG_DIR: Path = BASE_DIR / "logs"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    # --- Blueprint ingestion ---
    # Reels and shorts are capped at one hour of source time per scene.
    MAX_SCENE_SECONDS: float = 3600.0

    # --- HTTP API ---
    API_TITLE: str = "Scene Blueprint Compiler API"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=env_file_path,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra='ignore'
    )

settings = Settings()
load_dotenv(env_file_path)

def create_directories():
    """Create necessary directories if they don't exist."""
    if settings.LOG_TO_FILE:
        settings.LOG_DIR.mkdir(parents=True, exist_ok=True)

create_directories()
