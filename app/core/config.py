from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


# Load .env early for local development
load_dotenv()

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True)

    # Storage for the persisted blobs (places, currentRoute, ...)
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./city_explorer.db")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_dir: str = os.getenv("LOG_DIR", "./logs")

    # Reference point standing in for the user's location (Kirov city centre)
    user_latitude: float = float(os.getenv("USER_LATITUDE", "58.6035"))
    user_longitude: float = float(os.getenv("USER_LONGITUDE", "49.6680"))

    # External navigator deep link
    navigator_url: str = os.getenv("NAVIGATOR_URL", "https://yandex.ru/maps/")
    navigator_transport: str = os.getenv("NAVIGATOR_TRANSPORT", "mt")  # auto | mt | pd

    # Bundled seed catalog and collections
    seed_dir: str = os.getenv("SEED_DIR", str(_DATA_DIR))


settings = Settings()
