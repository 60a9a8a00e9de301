"""
In-Memory Store - users, jobs and applications behind one read/write lock

The store owns three plain dicts and a single ReadWriteLock. There is no
query API: handlers take the lock, touch the dicts directly, build their
response and release the lock.

Locking Discipline:
    - Any lookup or scan runs inside ``store.read()``
    - Any insert or field mutation runs inside ``store.write()``
    - One request holds the lock for all of its map work, never longer
    - The lock is not reentrant: never call ``write()`` while holding ``read()``

Usage:
    store = MemoryStore()
    store.seed()

    with store.read():
        profile = store.users.get(user_id)

Nothing is ever deleted; the tables only grow. State is lost on restart.
"""

import logging
import threading
from contextlib import contextmanager
from datetime import timedelta
from typing import Dict, Iterator, Optional

from fastapi import Request

from volunteer_match.models import (
    Application,
    JobDetail,
    JobStatus,
    UserProfile,
    UserRole,
)
from volunteer_match.services.ids import Clock, IdGenerator, SystemClock, TimestampIdGenerator

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    Many concurrent readers or one exclusive writer.

    Waiting writers block new readers, so a steady stream of reads cannot
    starve a write.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class MemoryStore:
    """
    Process-local tables for the API.

    Attributes:
        users: user id -> UserProfile
        jobs: job id -> JobDetail
        applications: "<job id>-<volunteer id>" -> Application
        clock: Source of timestamps
        ids: Id generation strategy
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        self.clock = clock or SystemClock()
        self.ids = id_generator or TimestampIdGenerator(self.clock)
        self.users: Dict[str, UserProfile] = {}
        self.jobs: Dict[str, JobDetail] = {}
        self.applications: Dict[str, Application] = {}
        self._lock = ReadWriteLock()

    def read(self):
        """Shared lock for lookups and scans."""
        return self._lock.read_locked()

    def write(self):
        """Exclusive lock for inserts and mutations."""
        return self._lock.write_locked()

    def seed(self) -> None:
        """Load the demo accounts and jobs."""
        now = self.clock.now()

        with self.write():
            self.users["volunteer-1"] = UserProfile(
                id="volunteer-1",
                role=UserRole.VOLUNTEER,
                full_name="Anya Volunteer",
                phone="081-111-1111",
                email="anya.volunteer@example.com",
                address="Bangkok, Thailand",
                skills=["Wheelchair assistance", "Thai/English"],
                interests=["Hospital visits", "Transportation"],
                biography="Former physical therapist now volunteering weekends.",
                rating=4.9,
                completed_jobs=42,
                created_at=now - timedelta(days=90),
            )
            self.users["requester-1"] = UserProfile(
                id="requester-1",
                role=UserRole.REQUESTER,
                full_name="Mali Nimman",
                phone="082-222-2222",
                email="mali.nimman@example.com",
                address="Chiang Mai, Thailand",
                biography="Coordinating support for my father while he recovers.",
                rating=4.7,
                completed_jobs=13,
                created_at=now - timedelta(days=40),
            )

            self.jobs["job-1001"] = JobDetail(
                id="job-1001",
                title="Wheelchair assistance at hospital",
                requester_id="requester-1",
                scheduled_on="2025-02-11",
                location="Siriraj Hospital, Bangkok",
                distance_km=3.2,
                tags=["Hospital", "Wheelchair"],
                status=JobStatus.OPEN,
                description="Meet at the lobby and assist with navigating to the cardiology department.",
                meeting_point="Entrance B, Siriraj Hospital",
                requirements=["Comfortable pushing a wheelchair", "Able to communicate with nurses"],
                latitude=13.7563,
                longitude=100.5018,
                contact_name="Mali Nimman",
                contact_number="082-222-2222",
            )
            self.jobs["job-1002"] = JobDetail(
                id="job-1002",
                title="Home wheelchair ramp inspection",
                requester_id="requester-1",
                scheduled_on="2025-02-13",
                location="Ratchathewi, Bangkok",
                distance_km=6.0,
                tags=["Home visit", "Accessibility"],
                status=JobStatus.OPEN,
                description="Check the ramp installed last month and provide recommendations.",
                meeting_point="House 72/4, Ratchathewi",
                requirements=["Experience with accessibility equipment"],
                latitude=13.7650,
                longitude=100.5370,
                contact_name="Mali Nimman",
                contact_number="082-222-2222",
            )

        logger.info(f"Seeded store with {len(self.users)} users and {len(self.jobs)} jobs")


def get_store(request: Request) -> MemoryStore:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.store
