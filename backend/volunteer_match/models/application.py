from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass
class Application:
    """A volunteer's application to a job, keyed by ``<job_id>-<volunteer_id>``."""

    id: str
    job_id: str
    volunteer_id: str
    message: str
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime
