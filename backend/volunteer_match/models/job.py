"""
Job records - summary (list view) and detail (full view)

Status Flow:
    open -> in_review (any application) -> completed (feedback submitted)

Transitions are applied unconditionally by the handlers; a completed job
goes back to in_review if someone applies again.

Contact name/number are a snapshot of the requester at creation time and
are not kept in sync with later profile edits. ``distance_km`` is static.
"""

from dataclasses import dataclass, field
from enum import Enum


class JobStatus(str, Enum):
    OPEN = "open"
    IN_REVIEW = "in_review"
    COMPLETED = "completed"


@dataclass
class JobSummary:
    id: str
    title: str
    requester_id: str
    scheduled_on: str = ""
    location: str = ""
    distance_km: float = 0.0
    tags: list[str] = field(default_factory=list)
    status: JobStatus = JobStatus.OPEN


@dataclass
class JobDetail(JobSummary):
    description: str = ""
    meeting_point: str = ""
    requirements: list[str] = field(default_factory=list)
    latitude: float = 0.0
    longitude: float = 0.0
    contact_name: str = ""
    contact_number: str = ""

    def summary(self) -> JobSummary:
        """Project the detail record down to its list-view fields."""
        return JobSummary(
            id=self.id,
            title=self.title,
            requester_id=self.requester_id,
            scheduled_on=self.scheduled_on,
            location=self.location,
            distance_km=self.distance_km,
            tags=list(self.tags),
            status=self.status,
        )
