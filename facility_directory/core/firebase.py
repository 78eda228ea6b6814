"""
Firebase admin initialization and helpers.

The directory reads its facility collection and writes feedback entries
through the Firebase Admin SDK. Credentials come from the
FIREBASE_CREDENTIALS setting (env var or .env).
"""

import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore

from facility_directory.core.config import settings

log = logging.getLogger(__name__)

# Global reference to avoid re-initialization
db = None


def init_firebase(cred_path: str | None = None):
    """
    Initialize Firebase Admin SDK if not already initialized.

    Raises RuntimeError when the credentials file cannot be found.
    """

    global db

    # Prevent re-initialization (important for Uvicorn reload)
    if firebase_admin._apps:
        if db is None:
            db = firestore.client()
        return db

    cred_path = cred_path or settings.FIREBASE_CREDENTIALS

    if not os.path.exists(cred_path):
        raise RuntimeError(
            f"Firebase credentials not found at: {cred_path}\n"
            "Set FIREBASE_CREDENTIALS env var or place firebase_key.json correctly."
        )

    cred = credentials.Certificate(cred_path)
    firebase_admin.initialize_app(cred)

    db = firestore.client()

    log.info("Firebase Admin initialized successfully.")
    return db


def get_db():
    """Return the Firestore client, initializing the SDK on first use."""
    if db is None:
        return init_firebase()
    return db
