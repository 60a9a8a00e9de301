from fastapi import APIRouter, Depends, HTTPException

from volunteer_match.schemas import ProfileResponse
from volunteer_match.services.store import MemoryStore, get_store

router = APIRouter()


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(user_id: str, store: MemoryStore = Depends(get_store)):
    """Full profile, private fields included, for either role."""
    with store.read():
        profile = store.users.get(user_id)
        if not profile:
            raise HTTPException(status_code=404, detail="profile not found")

        return ProfileResponse.model_validate(profile)
