from volunteer_match.services.ids import IdGenerator, SystemClock, TimestampIdGenerator
from volunteer_match.services.store import MemoryStore, ReadWriteLock, get_store

__all__ = [
    "IdGenerator",
    "SystemClock",
    "TimestampIdGenerator",
    "MemoryStore",
    "ReadWriteLock",
    "get_store",
]
