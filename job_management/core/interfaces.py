"""
Core interfaces for job management.

Ports implemented by infrastructure:
- IJobRepository: Job aggregate storage and retrieval
- IEventPublisher: delivery of domain events after commit
"""
from abc import ABC, abstractmethod
from typing import Optional, List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from job_management.domain.entities import Job
    from job_management.domain.events import DomainEvent
    from job_management.domain.value_objects import JobId, JobStatus


class IJobRepository(ABC):
    """
    Interface for job storage and retrieval.

    Implementations must handle:
    - Soft-deleted jobs (stored, hidden from listings by default)
    - Identity map per transaction (same ID -> same instance)
    """

    @abstractmethod
    async def add(self, job: 'Job') -> 'Job':
        """
        Add a newly created job.

        Raises:
            DuplicateJobError: If job ID already exists
        """
        pass

    @abstractmethod
    async def save(self, job: 'Job') -> 'Job':
        """
        Persist changes to an existing job.

        Raises:
            JobNotFoundError: If job ID is unknown
        """
        pass

    @abstractmethod
    async def get_by_id(
        self,
        job_id: 'JobId',
        include_deleted: bool = True
    ) -> Optional['Job']:
        """
        Get job by ID.

        Args:
            job_id: Job identifier
            include_deleted: Return soft-deleted jobs too (needed for restore)

        Returns:
            Job if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_jobs(
        self,
        status: Optional['JobStatus'] = None,
        include_deleted: bool = False
    ) -> List['Job']:
        """
        List jobs ordered by creation time (oldest first).

        Args:
            status: Only return jobs in this status
            include_deleted: Include soft-deleted jobs
        """
        pass


class IEventPublisher(ABC):
    """Interface for publishing domain events to the rest of the system"""

    @abstractmethod
    async def publish(self, events: Sequence['DomainEvent']) -> None:
        """Deliver events in order"""
        pass
