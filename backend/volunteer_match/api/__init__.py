from fastapi import APIRouter
from volunteer_match.api import auth, jobs, profiles, requesters, volunteers

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
api_router.include_router(volunteers.router, prefix="/volunteers", tags=["volunteers"])
api_router.include_router(requesters.router, prefix="/requesters", tags=["requesters"])
