"""
Domain layer - Business logic and domain models for job postings.

This layer contains:
- Value objects (immutable, self-validating)
- The Job aggregate root (lifecycle rules)
- Domain events and the event recorder
- Result type and domain exceptions

No dependencies on infrastructure or frameworks.
"""

from job_management.domain.entities import Job
from job_management.domain.events import (
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
from job_management.domain.exceptions import (
    DomainError,
    DuplicateJobError,
    InvalidArgumentError,
    InvalidStateError,
    JobNotFoundError,
)
from job_management.domain.result import Err, Ok, Result
from job_management.domain.value_objects import JobDetails, JobId, JobStatus

__all__ = [
    # Aggregate
    "Job",

    # Value objects
    "JobDetails",
    "JobId",
    "JobStatus",

    # Events
    "DomainEvent",
    "EventRecorder",
    "JobCreated",
    "JobDraftCreated",
    "JobPosted",
    "JobClosed",
    "JobDeleted",
    "JobRestored",
    "JobDetailsUpdated",

    # Results and errors
    "Result",
    "Ok",
    "Err",
    "DomainError",
    "InvalidArgumentError",
    "InvalidStateError",
    "JobNotFoundError",
    "DuplicateJobError",
]
