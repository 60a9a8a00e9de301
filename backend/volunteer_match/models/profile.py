"""
UserProfile - volunteer or requester account

Profiles are keyed by ``id`` in the store's user table. The role is set at
registration and never changes afterwards.

Rating:
    ``rating`` is a running average over completed jobs that received a
    positive rating; ``completed_jobs`` counts every completion, rated or not.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class UserRole(str, Enum):
    VOLUNTEER = "volunteer"
    REQUESTER = "requester"


@dataclass
class UserProfile:
    """
    Account record owned by the in-memory store.

    Attributes:
        id: Unique, immutable user id
        role: volunteer or requester
        full_name/phone/email/address: Contact details (email not unique)
        skills: Skill tags
        interests: Interest tags
        biography: Free text
        rating: Running average rating, 0.0 for new accounts
        completed_jobs: Number of completed jobs, 0 for new accounts
        created_at: Registration time (UTC)
    """

    id: str
    role: UserRole
    full_name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    skills: list[str] = field(default_factory=list)
    interests: list[str] = field(default_factory=list)
    biography: str = ""
    rating: float = 0.0
    completed_jobs: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
