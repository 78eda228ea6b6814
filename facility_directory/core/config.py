# facility_directory/core/config.py
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Service account JSON used by the Firebase Admin SDK
    FIREBASE_CREDENTIALS: str = "firebase_key.json"

    # Firestore collections
    FACILITIES_COLLECTION: str = "unidades_saude"
    FEEDBACK_COLLECTION: str = "feedbacks"

    # Delay applied by the page before re-filtering on a keystroke (0 = off)
    SEARCH_DEBOUNCE_MS: int = 0

    # Structured debug output (see services/logger.py)
    DEBUG_MODE: bool = False

    # If you want to read from a .env file, keep this:
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
