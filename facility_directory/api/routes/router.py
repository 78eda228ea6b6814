from fastapi import APIRouter

from facility_directory.api.routes.facilities import router as facilities_router
from facility_directory.api.routes.feedback import router as feedback_router

api_router = APIRouter()

api_router.include_router(facilities_router)
api_router.include_router(feedback_router)
