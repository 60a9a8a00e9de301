"""
Id generation for users, jobs and applications.

Id Formats:
    - users:        <role>-<first name><HHMMSS>   e.g. volunteer-Anya104512
    - jobs:         job-<job count + 1001>        e.g. job-1003
    - applications: <job id>-<volunteer id>       e.g. job-1001-volunteer-1

User and job ids step past values already present in the table
(``-2``, ``-3``, ... for users, the next number for jobs), so two
registrations with the same first name in the same second still get
distinct ids. Application ids are deliberately not unique per call: a second
application for the same pair replaces the first.
"""

from datetime import datetime, timezone
from typing import Container, Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class IdGenerator(Protocol):
    def user_id(self, role: str, full_name: str, taken: Container[str]) -> str: ...

    def job_id(self, job_count: int, taken: Container[str]) -> str: ...

    def application_id(self, job_id: str, volunteer_id: str) -> str: ...


JOB_ID_OFFSET = 1001


class TimestampIdGenerator:
    """Builds ids from the role, the caller's first name and the time of day."""

    def __init__(self, clock: Clock):
        self.clock = clock

    def user_id(self, role: str, full_name: str, taken: Container[str]) -> str:
        tokens = full_name.split()
        first_name = tokens[0] if tokens else ""
        base = f"{role.lower()}-{first_name}{self.clock.now().strftime('%H%M%S')}"

        candidate = base
        suffix = 2
        while candidate in taken:
            candidate = f"{base}-{suffix}"
            suffix += 1
        return candidate

    def job_id(self, job_count: int, taken: Container[str]) -> str:
        number = job_count + JOB_ID_OFFSET
        while f"job-{number}" in taken:
            number += 1
        return f"job-{number}"

    def application_id(self, job_id: str, volunteer_id: str) -> str:
        return f"{job_id}-{volunteer_id}"
