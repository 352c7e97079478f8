"""
Job Repository implementation backed by an in-process dictionary.

Handles:
- Staging writes until the unit of work commits
- Snapshot copies between storage and callers (no shared aliasing)
- Identity map per unit of work (same ID -> same instance)
"""

import copy
import logging
from typing import Dict, List, Optional

from job_management.core.interfaces import IJobRepository
from job_management.domain.entities import Job
from job_management.domain.exceptions import DuplicateJobError, JobNotFoundError
from job_management.domain.value_objects import JobId, JobStatus

logger = logging.getLogger(__name__)

JobStore = Dict[JobId, Job]


class InMemoryJobRepository(IJobRepository):
    """
    In-memory implementation of IJobRepository.

    The store dict is the "database": it only ever holds committed
    snapshots with an empty event buffer. Jobs handed to callers are
    copies, so uncommitted changes never leak into storage.
    """

    def __init__(self, store: JobStore):
        """
        Initialize repository with a shared store.

        Args:
            store: Committed jobs keyed by JobId (shared across units of work)
        """
        self._store = store
        self._pending: Dict[JobId, Job] = {}
        self._seen: Dict[JobId, Job] = {}

    async def add(self, job: Job) -> Job:
        if job.id in self._store or job.id in self._pending:
            raise DuplicateJobError(job.id)

        self._pending[job.id] = job
        self._seen[job.id] = job
        logger.debug(f"Staged new job {job.id}")
        return job

    async def save(self, job: Job) -> Job:
        if job.id not in self._store and job.id not in self._pending:
            raise JobNotFoundError(job.id)

        self._pending[job.id] = job
        self._seen[job.id] = job
        logger.debug(f"Staged update for job {job.id} (status={job.status.value})")
        return job

    async def get_by_id(
        self,
        job_id: JobId,
        include_deleted: bool = True
    ) -> Optional[Job]:
        job = self._seen.get(job_id)
        if job is None:
            stored = self._store.get(job_id)
            if stored is None:
                return None
            job = self._snapshot(stored)
            self._seen[job_id] = job

        if job.is_deleted and not include_deleted:
            return None
        return job

    async def list_jobs(
        self,
        status: Optional[JobStatus] = None,
        include_deleted: bool = False
    ) -> List[Job]:
        job_ids = list(self._store.keys()) + [
            job_id for job_id in self._seen if job_id not in self._store
        ]

        jobs = []
        for job_id in job_ids:
            job = await self.get_by_id(job_id, include_deleted=include_deleted)
            if job is None:
                continue
            if status is not None and job.status != status:
                continue
            jobs.append(job)

        return sorted(jobs, key=lambda j: j.created_at)

    def commit(self) -> List[Job]:
        """
        Write staged jobs to the store.

        Returns:
            The jobs that were written, in staging order. Jobs that were only
            loaded (never add()ed or save()d) are not included.
        """
        committed = list(self._pending.values())
        for job in committed:
            self._store[job.id] = self._snapshot(job)
        logger.debug(f"Committed {len(committed)} job(s)")
        self._pending.clear()
        return committed

    def rollback(self) -> None:
        """Discard staged jobs and forget loaded aggregates"""
        self._pending.clear()
        self._seen.clear()

    @staticmethod
    def _snapshot(job: Job) -> Job:
        snapshot = copy.deepcopy(job)
        snapshot.clear_domain_events()
        return snapshot
