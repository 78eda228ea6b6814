"""
API dependencies.

Handlers receive the application's FacilityState and the Firestore client
through these functions so tests can override them.
"""

from fastapi import HTTPException, Request

from facility_directory.core import firebase
from facility_directory.services.facility_state import FacilityState


def get_facility_state(request: Request) -> FacilityState:
    state = getattr(request.app.state, "facilities", None)
    if state is None:
        # Startup has not run yet; behave as "still loading"
        state = FacilityState()
        request.app.state.facilities = state
    return state


def get_db():
    try:
        return firebase.get_db()
    except (RuntimeError, ValueError, OSError) as exc:
        # Missing or malformed service account key
        raise HTTPException(
            status_code=503,
            detail="Feedback storage unavailable",
        ) from exc
