"""
Domain Events - records of significant changes inside the Job aggregate.

Events are immutable facts. The aggregate only records them; delivery is
handled by the unit of work after a successful commit.

Every event carries:
- event_id: unique identifier (UUID4)
- occurred_on: UTC timestamp of the change
- job_id: the aggregate the event belongs to
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import UUID, uuid4

from job_management.domain.value_objects import JobId, JobStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all job domain events"""

    job_id: JobId
    event_id: UUID = field(default_factory=uuid4)
    occurred_on: datetime = field(default_factory=_utcnow)

    @property
    def event_type(self) -> str:
        """Event name used for routing (e.g. 'JobPosted')"""
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{self.event_type}(job_id={self.job_id}, event_id={self.event_id})"


@dataclass(frozen=True, repr=False)
class JobCreated(DomainEvent):
    title: str = ""
    status: JobStatus = JobStatus.DRAFT


@dataclass(frozen=True, repr=False)
class JobDraftCreated(DomainEvent):
    pass


@dataclass(frozen=True, repr=False)
class JobPosted(DomainEvent):
    posted_at: Optional[datetime] = None


@dataclass(frozen=True, repr=False)
class JobClosed(DomainEvent):
    pass


@dataclass(frozen=True, repr=False)
class JobDeleted(DomainEvent):
    pass


@dataclass(frozen=True, repr=False)
class JobRestored(DomainEvent):
    status: JobStatus = JobStatus.DRAFT


@dataclass(frozen=True, repr=False)
class JobDetailsUpdated(DomainEvent):
    title: str = ""
    description: Optional[str] = None


class EventRecorder:
    """
    Append-only buffer of domain events owned by one aggregate.

    Events stay buffered until the owning application layer drains them
    with pull() (after persistence) or discards them with clear().
    """

    def __init__(self):
        self._events: List[DomainEvent] = []

    def record(self, event: DomainEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> Tuple[DomainEvent, ...]:
        """Read-only snapshot of buffered events, oldest first"""
        return tuple(self._events)

    def pull(self) -> List[DomainEvent]:
        """Return all buffered events in order and empty the buffer"""
        events = list(self._events)
        self._events.clear()
        return events

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return f"EventRecorder(pending={len(self._events)})"
