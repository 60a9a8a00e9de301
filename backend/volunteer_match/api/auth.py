import logging

from fastapi import APIRouter, Depends, HTTPException, status

from volunteer_match.config import Settings, get_settings
from volunteer_match.middleware.metrics import LOGINS, USERS_REGISTERED
from volunteer_match.models import UserProfile, UserRole
from volunteer_match.schemas import LoginRequest, LoginResponse, ProfileResponse, RegisterRequest
from volunteer_match.services.store import MemoryStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    store: MemoryStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    # Mock auth: the password is never checked
    email = request.email.casefold()

    with store.read():
        for profile in store.users.values():
            if profile.email.casefold() == email:
                LOGINS.labels(outcome="success").inc()
                return LoginResponse(
                    token=settings.token_prefix + profile.id,
                    user=ProfileResponse.model_validate(profile),
                )

    LOGINS.labels(outcome="unknown_account").inc()
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="account not found",
    )


@router.post("/register", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    store: MemoryStore = Depends(get_store),
):
    if request.role not in (UserRole.VOLUNTEER.value, UserRole.REQUESTER.value):
        raise HTTPException(status_code=400, detail="role must be volunteer or requester")

    if not request.full_name.strip() or not request.email.strip():
        raise HTTPException(status_code=400, detail="full name and email are required")

    role = UserRole(request.role)

    with store.write():
        if any(u.email.casefold() == request.email.casefold() for u in store.users.values()):
            # Allowed; login resolves to the earliest account with this email
            logger.warning(f"Registering duplicate email {request.email!r}")

        profile = UserProfile(
            id=store.ids.user_id(role.value, request.full_name, store.users),
            role=role,
            full_name=request.full_name,
            phone=request.phone,
            email=request.email,
            address=request.address,
            skills=list(request.skills),
            interests=list(request.interests),
            biography=request.biography,
            rating=0.0,
            completed_jobs=0,
            created_at=store.clock.now(),
        )
        store.users[profile.id] = profile
        response = ProfileResponse.model_validate(profile)

    USERS_REGISTERED.labels(role=role.value).inc()
    logger.info(f"Registered {role.value} {profile.id}")
    return response
