"""
Domain Entities - Rich business objects with identity and lifecycle.

The Job entity is the aggregate root of the job management domain - it owns
its JobDetails value object and records domain events for every change.

State machine:
    NEW --create_draft--> DRAFT --post--> ACTIVE --close--> CLOSED

is_deleted is an orthogonal soft-delete flag that blocks every transition
until restore() runs.
"""

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .events import (
    DomainEvent,
    EventRecorder,
    JobClosed,
    JobCreated,
    JobDeleted,
    JobDetailsUpdated,
    JobDraftCreated,
    JobPosted,
    JobRestored,
)
from .exceptions import InvalidArgumentError, InvalidStateError
from .result import Err, Ok, Result
from .value_objects import JobDetails, JobId, JobStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _rejected(message: str) -> Err:
    return Err(InvalidStateError(message))


class Job:
    """
    Job posting aggregate root.

    Invariants (business rules enforced by domain model):
    1. A job always holds a valid JobDetails
    2. id and created_at never change after creation
    3. A deleted job accepts no transition other than restore()
    4. Details can only change before the job is posted
    5. posted_at is set when the job becomes ACTIVE and kept after closing

    Every guard runs before any field is written, so a rejected operation
    leaves the aggregate unchanged and records no event.

    Lifecycle operations return a Result instead of raising:

        job = Job(JobDetails("Senior Engineer"))
        result = job.post()
        if result.is_err:
            print(result.message)
    """

    def __init__(self, details: JobDetails):
        """
        Create a draft job.

        Args:
            details: Validated title/description

        Raises:
            InvalidArgumentError: If details is missing or not a JobDetails
        """
        if not isinstance(details, JobDetails):
            raise InvalidArgumentError("details", "Job details are required")

        self._hydrate(
            job_id=JobId.generate(),
            details=details,
            status=JobStatus.DRAFT,
            is_deleted=False,
            created_at=_utcnow(),
            posted_at=None,
        )
        self._record(JobCreated(job_id=self._id, title=details.title, status=self._status))

    def _hydrate(
        self,
        job_id: JobId,
        details: JobDetails,
        status: JobStatus,
        is_deleted: bool,
        created_at: datetime,
        posted_at: Optional[datetime],
    ) -> None:
        self._id = job_id
        self._details = details
        self._status = status
        self._is_deleted = is_deleted
        self._created_at = created_at
        self._posted_at = posted_at
        self._events = EventRecorder()

    # Factories

    @classmethod
    def create(cls, details: JobDetails) -> Result["Job"]:
        """Create a draft job without raising"""
        try:
            return Ok(cls(details))
        except InvalidArgumentError as e:
            return Err(e)

    @classmethod
    def start_new(cls, details: JobDetails) -> Result["Job"]:
        """
        Create an unsaved (NEW) job.

        A NEW job must be saved as a draft with create_draft() before it
        can be posted.
        """
        if not isinstance(details, JobDetails):
            return Err(InvalidArgumentError("details", "Job details are required"))

        job = cls.__new__(cls)
        job._hydrate(
            job_id=JobId.generate(),
            details=details,
            status=JobStatus.NEW,
            is_deleted=False,
            created_at=_utcnow(),
            posted_at=None,
        )
        job._record(JobCreated(job_id=job._id, title=details.title, status=job._status))
        return Ok(job)

    @classmethod
    def rehydrate(
        cls,
        job_id: JobId,
        details: JobDetails,
        status: JobStatus,
        created_at: datetime,
        is_deleted: bool = False,
        posted_at: Optional[datetime] = None,
    ) -> "Job":
        """
        Rebuild a job from stored state (used by repositories).

        No events are recorded - nothing happened, the job was only loaded.

        Raises:
            InvalidArgumentError: If any stored field has the wrong type
        """
        if not isinstance(job_id, JobId):
            raise InvalidArgumentError("job_id", "job_id must be a JobId")
        if not isinstance(details, JobDetails):
            raise InvalidArgumentError("details", "Job details are required")
        if not isinstance(created_at, datetime):
            raise InvalidArgumentError("created_at", "created_at must be a datetime")
        if posted_at is not None and not isinstance(posted_at, datetime):
            raise InvalidArgumentError("posted_at", "posted_at must be a datetime")
        try:
            status = JobStatus(status)
        except ValueError:
            raise InvalidArgumentError("status", f"Invalid job status: {status}")

        job = cls.__new__(cls)
        job._hydrate(
            job_id=job_id,
            details=details,
            status=status,
            is_deleted=bool(is_deleted),
            created_at=created_at,
            posted_at=posted_at,
        )
        return job

    # Read accessors

    @property
    def id(self) -> JobId:
        return self._id

    @property
    def details(self) -> JobDetails:
        return self._details

    @property
    def status(self) -> JobStatus:
        return self._status

    @property
    def is_deleted(self) -> bool:
        return self._is_deleted

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def posted_at(self) -> Optional[datetime]:
        """When the job was last posted (None until first post)"""
        return self._posted_at

    @property
    def title(self) -> str:
        return self._details.title

    @property
    def description(self) -> Optional[str]:
        return self._details.description

    # Lifecycle operations

    def create_draft(self) -> Result[None]:
        """Save a NEW job as a draft"""
        if self._is_deleted:
            return _rejected("Cannot create draft from a deleted job")

        if self._status != JobStatus.NEW:
            return _rejected("Can only create draft from new job")

        self._status = JobStatus.DRAFT
        self._record(JobDraftCreated(job_id=self._id))
        return Ok()

    def post(self) -> Result[None]:
        """Publish a draft job (DRAFT -> ACTIVE)"""
        if self._is_deleted:
            return _rejected("Cannot post a deleted job")

        if self._status == JobStatus.NEW:
            return _rejected("Can only post saved draft jobs")

        if self._status == JobStatus.ACTIVE:
            return _rejected("Job is already posted")

        if self._status == JobStatus.CLOSED:
            return _rejected("Cannot post a closed job")

        self._status = JobStatus.ACTIVE
        self._posted_at = _utcnow()
        self._record(JobPosted(job_id=self._id, posted_at=self._posted_at))
        return Ok()

    def close(self) -> Result[None]:
        """Stop accepting applications (ACTIVE -> CLOSED)"""
        if self._is_deleted:
            return _rejected("Cannot close a deleted job")

        if self._status == JobStatus.NEW:
            return _rejected("Cannot close an unsaved job.")

        if self._status == JobStatus.DRAFT:
            return _rejected("Cannot close a draft job. Delete it instead.")

        if self._status == JobStatus.CLOSED:
            return _rejected("Job is already closed")

        self._status = JobStatus.CLOSED
        self._record(JobClosed(job_id=self._id))
        return Ok()

    def update_details(self, new_details: JobDetails) -> Result[None]:
        """
        Replace title/description wholesale.

        Allowed only while the job is NEW or DRAFT and not deleted.
        """
        if not isinstance(new_details, JobDetails):
            return Err(InvalidArgumentError("new_details", "New job details are required"))

        if self._is_deleted:
            return _rejected("Cannot update details of a deleted job")

        if not self._status.is_editable():
            article = "an" if self._status == JobStatus.ACTIVE else "a"
            return _rejected(f"Cannot update details of {article} {self._status.value} job")

        self._details = new_details
        self._record(JobDetailsUpdated(
            job_id=self._id,
            title=new_details.title,
            description=new_details.description,
        ))
        return Ok()

    def delete(self) -> Result[None]:
        """Soft-delete a draft job. Status is kept so restore() can return to it."""
        if self._is_deleted:
            return _rejected("Job is already deleted")

        if self._status == JobStatus.ACTIVE:
            return _rejected("Cannot delete an active job. Close it first.")

        if self._status == JobStatus.CLOSED:
            return _rejected("Cannot delete a closed job")

        if self._status == JobStatus.NEW:
            return _rejected("Cannot delete an unsaved job")

        self._is_deleted = True
        self._record(JobDeleted(job_id=self._id))
        return Ok()

    def restore(self) -> Result[None]:
        """Undo a soft delete. Status is left as it was."""
        if not self._is_deleted:
            return _rejected("Job is not deleted")

        self._is_deleted = False
        self._record(JobRestored(job_id=self._id, status=self._status))
        return Ok()

    # Domain events

    def _record(self, event: DomainEvent) -> None:
        self._events.record(event)

    @property
    def domain_events(self) -> Tuple[DomainEvent, ...]:
        """Events recorded since the last drain, oldest first"""
        return self._events.events

    def pull_domain_events(self) -> List[DomainEvent]:
        """Return recorded events and clear the buffer"""
        return self._events.pull()

    def clear_domain_events(self) -> None:
        self._events.clear()

    # Identity

    def __eq__(self, other) -> bool:
        if not isinstance(other, Job):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        deleted = ", deleted" if self._is_deleted else ""
        return (
            f"Job(id={self._id}, status={self._status.value}, "
            f"title='{self._details.title}'{deleted})"
        )
