from datetime import datetime

from volunteer_match.models import UserRole
from volunteer_match.schemas.base import CamelModel


class ProfileResponse(CamelModel):
    id: str
    role: UserRole
    full_name: str
    phone: str
    email: str
    address: str
    skills: list[str]
    interests: list[str]
    biography: str
    rating: float
    completed_jobs: int
    created_at: datetime
