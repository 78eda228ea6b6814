"""Stores feedback form entries in Firestore."""
from __future__ import annotations

import logging
from typing import Any

from firebase_admin import firestore

from facility_directory.core.config import settings
from facility_directory.core.exceptions import SubmitError
from facility_directory.models.feedback import FeedbackForm
from facility_directory.services.logger import log_debug

log = logging.getLogger(__name__)


def submit_feedback(form: FeedbackForm, db, collection: str | None = None) -> str:
    """
    Save a feedback entry under {collection}/{auto_id} and return the id.

    Names are never stored for anonymous entries (the form model already
    cleared them).
    """
    collection = collection or settings.FEEDBACK_COLLECTION

    payload: dict[str, Any] = {
        "anonimo": form.anonymous,
        "mensagem": form.message.strip(),
        "createdAt": firestore.SERVER_TIMESTAMP,
    }
    if not form.anonymous:
        if form.first_name:
            payload["nome"] = form.first_name
        if form.last_name:
            payload["sobrenome"] = form.last_name
    if form.email is not None:
        payload["email"] = str(form.email)
    if form.facility_id:
        payload["unidade_id"] = form.facility_id

    try:
        _, doc_ref = db.collection(collection).add(payload)
    except Exception as exc:
        log.error("Could not store feedback in '%s': %s", collection, exc)
        raise SubmitError("Não foi possível enviar o feedback.") from exc

    log_debug("feedback_saved", {"id": doc_ref.id, "anonymous": form.anonymous})
    return doc_ref.id
