"""
Thread‑safe in‑memory keyed store.

``KeyedStore`` holds one collection of records keyed by a generated
string id and offers create/read/update/delete operations.  Records are
frozen pydantic models, so the values handed out by the store can be
shared freely; callers never get a live view of the collection.

Concurrency is handled by a readers‑writer lock: lookups and listings
may run in parallel, while creates, updates and deletes are exclusive.
Several stores can share one lock (the catalog keeps users and products
behind a single lock); a lock must never be acquired twice by the same
thread, so store methods never call each other while holding it.

"Not found" is not an error here.  ``get`` and ``update`` return
``None`` and ``delete`` returns ``False`` for a missing id; translating
that into an HTTP status is the job of the API layer.

Two id policies are available:

* ``SequentialIds`` – a counter advanced under the write lock.  Ids are
  never reused within the lifetime of the store.
* ``CountDerivedIds`` – ``<prefix>_<size + 1>`` where the size is read
  *before* the write lock is taken.  Concurrent creates can compute the
  same id, in which case the later insert replaces the earlier record.
  Only use it when ids must match the legacy numbering.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict


logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Record(BaseModel):
    """Base class for everything stored in a ``KeyedStore``.

    The ``id`` is owned by the store: whatever a caller puts there is
    replaced on create and update.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""


class TimestampedRecord(Record):
    """A record whose creation and modification times are kept by the store."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


RecordT = TypeVar("RecordT", bound=Record)


class ReadWriteLock:
    """Readers‑writer lock with writer preference.

    Any number of readers may hold the lock at once; a writer holds it
    alone.  Once a writer is waiting, new readers queue behind it so a
    steady stream of reads cannot starve writes.  Not reentrant.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class IdPolicy:
    """Strategy for minting ids of new records.

    ``under_lock`` tells the store whether ``next_id`` must be called
    inside the write critical section.
    """

    under_lock = True

    def next_id(self, size: int) -> str:
        """Return the id for a new record given the current collection size."""
        raise NotImplementedError


class SequentialIds(IdPolicy):
    """Monotonic counter ids: ``"1"``, ``"2"``, ... or ``"usr_1"``, ``"usr_2"``, ..."""

    def __init__(self, prefix: Optional[str] = None, start: int = 1) -> None:
        self.prefix = prefix
        self._next = start

    def next_id(self, size: int) -> str:
        number = self._next
        self._next += 1
        if self.prefix:
            return f"{self.prefix}_{number}"
        return str(number)


class CountDerivedIds(IdPolicy):
    """Legacy ids derived from the collection size (``<prefix>_<size + 1>``)."""

    under_lock = False

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def next_id(self, size: int) -> str:
        return f"{self.prefix}_{size + 1}"


ID_POLICIES = ("sequential", "count")


def make_id_policy(name: str, prefix: Optional[str] = None) -> IdPolicy:
    """Build an id policy from its configuration name.

    Raises ``ValueError`` for an unknown name or for ``count`` without a
    prefix.
    """
    key = name.strip().lower()
    if key == "sequential":
        return SequentialIds(prefix)
    if key == "count":
        if not prefix:
            raise ValueError("count-derived ids need a prefix")
        return CountDerivedIds(prefix)
    raise ValueError(f"unknown id policy {name!r}; expected one of {', '.join(ID_POLICIES)}")


class KeyedStore(Generic[RecordT]):
    """In‑memory collection of records keyed by store‑assigned ids."""

    def __init__(
        self,
        ids: Optional[IdPolicy] = None,
        lock: Optional[ReadWriteLock] = None,
        name: str = "record",
    ) -> None:
        self.name = name
        self._ids = ids or SequentialIds()
        self._lock = lock or ReadWriteLock()
        self._records: Dict[str, RecordT] = {}

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._records)

    def create(self, record: RecordT) -> RecordT:
        """Store a new record under a fresh id and return the stored copy."""
        if self._ids.under_lock:
            with self._lock.write():
                stored = self._insert(self._ids.next_id(len(self._records)), record)
        else:
            # The size is sampled outside the critical section on purpose:
            # this is what makes count-derived ids collide.
            record_id = self._ids.next_id(len(self._records))
            with self._lock.write():
                stored = self._insert(record_id, record)
        logger.info("Created %s %s", self.name, stored.id)
        return stored

    def get(self, record_id: str) -> Optional[RecordT]:
        """Return the record stored under ``record_id`` or ``None``."""
        with self._lock.read():
            return self._records.get(record_id)

    def list(self) -> List[RecordT]:
        """Return a snapshot of all records, in no particular order."""
        with self._lock.read():
            return list(self._records.values())

    def update(self, record_id: str, replacement: RecordT) -> Optional[RecordT]:
        """Replace the record stored under ``record_id``.

        The replacement is taken wholesale except for the id, which is
        forced to ``record_id``, and the timestamps: ``created_at`` is
        carried over from the stored record and ``updated_at`` is
        refreshed.  Returns ``None`` and changes nothing when the id is
        unknown.
        """
        with self._lock.write():
            current = self._records.get(record_id)
            if current is None:
                return None
            changes = {"id": record_id}
            if isinstance(replacement, TimestampedRecord):
                created_at = getattr(current, "created_at", None)
                now = utcnow()
                if created_at is None:
                    created_at = now
                elif created_at > now:
                    now = created_at
                changes.update(created_at=created_at, updated_at=now)
            stored = replacement.model_copy(update=changes)
            self._records[record_id] = stored
        logger.info("Updated %s %s", self.name, record_id)
        return stored

    def delete(self, record_id: str) -> bool:
        """Remove the record stored under ``record_id``; ``False`` if absent."""
        with self._lock.write():
            if record_id not in self._records:
                return False
            del self._records[record_id]
        logger.info("Deleted %s %s", self.name, record_id)
        return True

    def seed(self, records: Iterable[RecordT]) -> None:
        """Insert records under their own ids, bypassing id assignment.

        Used for fixed sample data.  Missing timestamps are stamped with
        the current time.
        """
        with self._lock.write():
            for record in records:
                if not record.id:
                    raise ValueError(f"seeded {self.name} needs an id")
                if isinstance(record, TimestampedRecord) and (
                    record.created_at is None or record.updated_at is None
                ):
                    now = utcnow()
                    record = record.model_copy(
                        update={
                            "created_at": record.created_at or now,
                            "updated_at": record.updated_at or record.created_at or now,
                        }
                    )
                self._records[record.id] = record
            count = len(self._records)
        logger.debug("Seeded %s store, %d records", self.name, count)

    def _insert(self, record_id: str, record: RecordT) -> RecordT:
        changes = {"id": record_id}
        if isinstance(record, TimestampedRecord):
            now = utcnow()
            changes.update(created_at=now, updated_at=now)
        stored = record.model_copy(update=changes)
        self._records[record_id] = stored
        return stored
