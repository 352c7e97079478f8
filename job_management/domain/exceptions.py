"""Domain exceptions for the job management domain."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from job_management.domain.value_objects import JobId


class DomainError(Exception):
    """Base exception for domain layer errors"""
    pass


class InvalidArgumentError(DomainError, ValueError):
    """
    Raised when a constructor or method receives malformed input.

    Always caller-correctable. `param` names the offending argument.
    """

    def __init__(self, param: str, message: str):
        self.param = param
        super().__init__(message)


class InvalidStateError(DomainError):
    """Raised when an operation is not allowed from the job's current state"""
    pass


class JobNotFoundError(DomainError):
    """Raised when job doesn't exist"""

    def __init__(self, job_id: 'JobId'):
        self.job_id = job_id
        super().__init__(f"Job {job_id} not found")


class DuplicateJobError(DomainError):
    """Raised when attempting to add a job whose ID is already stored"""

    def __init__(self, job_id: 'JobId'):
        self.job_id = job_id
        super().__init__(f"Job {job_id} already exists")
