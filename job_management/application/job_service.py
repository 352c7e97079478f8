"""
Job Service - Business logic orchestration for job posting operations.

This service provides a unified interface for:
- Creating jobs (as drafts or unsaved NEW jobs)
- Lifecycle transitions (draft, post, close, delete, restore)
- Editing job details
- Lookups and listings

The Job aggregate reports rule violations as Err results; this service
unwraps them at the application boundary so callers get the domain
exceptions (InvalidArgumentError, InvalidStateError, JobNotFoundError).
Domain events are published by the unit of work after commit.
"""

from typing import List, Optional, Union
import logging

from job_management.domain.entities import Job
from job_management.domain.exceptions import JobNotFoundError
from job_management.domain.result import Result
from job_management.domain.unit_of_work import AbstractUnitOfWork
from job_management.domain.value_objects import JobDetails, JobId, JobStatus

logger = logging.getLogger(__name__)


def to_job_id(job_id: Union[JobId, str]) -> JobId:
    """Accept JobId or its string form"""
    if isinstance(job_id, JobId):
        return job_id
    return JobId.from_string(job_id)


class JobService:
    """
    Application service for job operations.

    Orchestrates:
    - Domain logic (validation, lifecycle rules)
    - Persistence through the unit of work
    - Logging of accepted and rejected operations

    All operations take the Unit of Work for the current transaction.
    """

    async def create_job(
        self,
        uow: AbstractUnitOfWork,
        title: str,
        description: Optional[str] = None,
        as_draft: bool = True
    ) -> Job:
        """
        Create a job posting.

        Args:
            uow: Unit of Work for transaction
            title: Job title (trimmed, 1-200 chars)
            description: Optional description (trimmed, up to 2000 chars)
            as_draft: Save directly as DRAFT; False creates an unsaved NEW job

        Returns:
            Created job

        Raises:
            InvalidArgumentError: If title/description are invalid
        """
        details = JobDetails.create(title, description).unwrap()

        if as_draft:
            job = Job.create(details).unwrap()
        else:
            job = Job.start_new(details).unwrap()

        await uow.jobs.add(job)
        logger.info(
            f"Created job {job.id} ({job.status.value}): {job.title}",
            extra={"job_id": str(job.id)}
        )
        return job

    async def create_draft(self, uow: AbstractUnitOfWork, job_id: Union[JobId, str]) -> Job:
        """Save a NEW job as a draft"""
        return await self._transition(uow, job_id, "create_draft", lambda job: job.create_draft())

    async def post_job(self, uow: AbstractUnitOfWork, job_id: Union[JobId, str]) -> Job:
        """
        Publish a draft job.

        Raises:
            JobNotFoundError: If job doesn't exist
            InvalidStateError: If job is deleted, unsaved, active or closed
        """
        return await self._transition(uow, job_id, "post", lambda job: job.post())

    async def close_job(self, uow: AbstractUnitOfWork, job_id: Union[JobId, str]) -> Job:
        """Close an active job"""
        return await self._transition(uow, job_id, "close", lambda job: job.close())

    async def delete_job(self, uow: AbstractUnitOfWork, job_id: Union[JobId, str]) -> Job:
        """Soft-delete a draft job"""
        return await self._transition(uow, job_id, "delete", lambda job: job.delete())

    async def restore_job(self, uow: AbstractUnitOfWork, job_id: Union[JobId, str]) -> Job:
        """Undo a soft delete"""
        return await self._transition(uow, job_id, "restore", lambda job: job.restore())

    async def update_job_details(
        self,
        uow: AbstractUnitOfWork,
        job_id: Union[JobId, str],
        title: str,
        description: Optional[str] = None
    ) -> Job:
        """
        Replace a job's title and description.

        Raises:
            InvalidArgumentError: If title/description are invalid
            JobNotFoundError: If job doesn't exist
            InvalidStateError: If job is deleted, active or closed
        """
        details = JobDetails.create(title, description).unwrap()
        return await self._transition(
            uow, job_id, "update_details", lambda job: job.update_details(details)
        )

    async def get_job(self, uow: AbstractUnitOfWork, job_id: Union[JobId, str]) -> Job:
        """
        Get a job by ID (soft-deleted jobs included).

        Raises:
            JobNotFoundError: If job doesn't exist
        """
        job_id = to_job_id(job_id)
        job = await uow.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    async def list_jobs(
        self,
        uow: AbstractUnitOfWork,
        status: Optional[JobStatus] = None,
        include_deleted: bool = False
    ) -> List[Job]:
        """List jobs, oldest first, hiding soft-deleted ones by default"""
        return await uow.jobs.list_jobs(status=status, include_deleted=include_deleted)

    async def _transition(self, uow: AbstractUnitOfWork, job_id, operation: str, action) -> Job:
        job = await self.get_job(uow, job_id)

        result: Result[None] = action(job)
        if result.is_err:
            logger.warning(
                f"Rejected {operation} on job {job.id}: {result.message}",
                extra={"job_id": str(job.id)}
            )
            result.unwrap()

        await uow.jobs.save(job)
        logger.info(
            f"Job {job.id} {operation} ok (status={job.status.value}, deleted={job.is_deleted})",
            extra={"job_id": str(job.id)}
        )
        return job
