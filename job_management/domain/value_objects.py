"""
Value Objects for the job posting domain.

Value objects are immutable, self-validating, and compared by value.
- JobId: opaque identity of a Job aggregate
- JobStatus: lifecycle state of a job posting
- JobDetails: validated title/description text
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from job_management.domain.exceptions import InvalidArgumentError
from job_management.domain.result import Err, Ok, Result


class JobStatus(str, Enum):
    """
    Job lifecycle status.

    NEW -> DRAFT -> ACTIVE -> CLOSED
    Soft deletion is tracked separately (Job.is_deleted), not as a status.
    """
    NEW = "new"
    DRAFT = "draft"
    ACTIVE = "active"
    CLOSED = "closed"

    def is_editable(self) -> bool:
        """Check if details may still be changed in this status"""
        return self in [JobStatus.NEW, JobStatus.DRAFT]


@dataclass(frozen=True)
class JobId:
    """
    Job aggregate identifier.

    Format: UUID4
    Example: 3f2b8c1e-5d4a-4e6f-9a1b-2c3d4e5f6a7b

    Assigned once when the job is created and never changed.
    """

    value: UUID

    def __post_init__(self):
        if not isinstance(self.value, UUID):
            raise InvalidArgumentError(
                "job_id",
                f"Invalid JobId value: {self.value!r}. Must be a UUID."
            )

    @classmethod
    def generate(cls) -> "JobId":
        """Create a new random JobId"""
        return cls(uuid4())

    @classmethod
    def from_string(cls, job_id: str) -> "JobId":
        """
        Parse JobId from its string form.

        Raises:
            InvalidArgumentError: If the string is not a valid UUID
        """
        try:
            return cls(UUID(str(job_id)))
        except ValueError:
            raise InvalidArgumentError(
                "job_id",
                f"Invalid JobId format: {job_id}. Expected a UUID string."
            )

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"JobId('{self.value}')"


@dataclass(frozen=True)
class JobDetails:
    """
    Title and description of a job posting.

    Rules:
    - title is required, trimmed, at most 200 characters after trimming
    - description is optional, trimmed, at most 2000 characters after trimming

    A job is updated by replacing its JobDetails wholesale. Use
    with_title()/with_description() to derive a changed copy.
    """

    MAX_TITLE_LENGTH = 200
    MAX_DESCRIPTION_LENGTH = 2000

    title: str
    description: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise InvalidArgumentError("title", "Title cannot be empty")

        title = self.title.strip()
        if len(title) > self.MAX_TITLE_LENGTH:
            raise InvalidArgumentError(
                "title",
                f"Title cannot exceed {self.MAX_TITLE_LENGTH} characters"
            )

        description = self.description
        if description is not None:
            if not isinstance(description, str):
                raise InvalidArgumentError(
                    "description",
                    "Description must be a string"
                )
            description = description.strip()
            if len(description) > self.MAX_DESCRIPTION_LENGTH:
                raise InvalidArgumentError(
                    "description",
                    f"Description cannot exceed {self.MAX_DESCRIPTION_LENGTH} characters"
                )

        # Frozen dataclass: store normalized values
        object.__setattr__(self, "title", title)
        object.__setattr__(self, "description", description)

    @classmethod
    def create(cls, title: str, description: Optional[str] = None) -> Result["JobDetails"]:
        """
        Validate and build JobDetails without raising.

        Returns:
            Ok(JobDetails) or Err(InvalidArgumentError)
        """
        try:
            return Ok(cls(title, description))
        except InvalidArgumentError as e:
            return Err(e)

    def with_title(self, title: str) -> "JobDetails":
        """Return a copy with a new title (validated)"""
        return replace(self, title=title)

    def with_description(self, description: Optional[str]) -> "JobDetails":
        """Return a copy with a new description (validated)"""
        return replace(self, description=description)

    @property
    def has_description(self) -> bool:
        return bool(self.description)

    def __repr__(self) -> str:
        return f"JobDetails(title='{self.title}', has_description={self.has_description})"

