import asyncio
import logging

from fastapi import Depends, FastAPI

from facility_directory.api.deps import get_facility_state
from facility_directory.api.routes.router import api_router
from facility_directory.core import firebase
from facility_directory.services.facility_loader import FacilityLoader, load_into_state
from facility_directory.services.facility_state import FacilityState

logging.basicConfig(level=logging.INFO, format="%(asctime)s  %(levelname)s  %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Health Unit Directory")


@app.on_event("startup")
async def startup():
    """Create the dataset state and start the one-time facility load."""
    state = FacilityState()
    app.state.facilities = state

    # Firebase is initialized inside the load, so a missing key file shows
    # up as a load error on the page instead of crashing the app.
    loader = FacilityLoader(firebase.get_db)
    app.state.load_task = asyncio.create_task(load_into_state(loader, state))


@app.get("/health")
async def health_check(state: FacilityState = Depends(get_facility_state)):
    status, _ = state.snapshot()
    return {"status": "ok", "dataset": status}


app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("facility_directory.main:app", host="0.0.0.0", port=8000, reload=False)
