"""
Unit of Work pattern for transaction management.

The Unit of Work pattern ensures:
1. All repository writes of one use case are applied together
2. Atomic commit (all or nothing)
3. Domain events are published AFTER a successful commit, never on rollback
4. Post-commit hooks run after events are published
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, TYPE_CHECKING
import inspect
import logging

from job_management.domain.events import DomainEvent

if TYPE_CHECKING:
    from job_management.core.interfaces import IEventPublisher, IJobRepository
    from job_management.domain.entities import Job
    from job_management.repositories.job_repository import JobStore

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """
    Abstract Unit of Work for transaction management.

    Provides:
    - Transaction boundaries (commit/rollback)
    - Repository access (jobs)
    - Domain event collection from every committed aggregate
    - Post-commit hooks for other side effects
    """

    jobs: 'IJobRepository'

    async def __aenter__(self):
        """Enter async context"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """
        Exit async context.

        On success: commits, publishes events, runs post-commit hooks
        On exception: rolls back (no events, no hooks)
        """
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self.close()

    def collect_new_events(self, committed_jobs: Sequence['Job']) -> List[DomainEvent]:
        """
        Drain recorded events from the jobs written by this commit.

        Loaded-but-unsaved jobs keep their events; their changes were never
        persisted. Events keep per-aggregate order, jobs in commit order.
        """
        events: List[DomainEvent] = []
        for job in committed_jobs:
            events.extend(job.pull_domain_events())
        return events

    @abstractmethod
    async def commit(self):
        """Commit transaction, publish events and execute post-commit hooks"""
        pass

    @abstractmethod
    async def rollback(self):
        """Rollback transaction"""
        pass

    @abstractmethod
    async def close(self):
        """Close resources"""
        pass

    @abstractmethod
    def add_post_commit_hook(self, hook: Callable):
        """
        Register a post-commit hook.

        Hook will be called AFTER successful commit.

        Args:
            hook: Sync or async callable to execute after commit
        """
        pass


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """
    In-memory implementation of Unit of Work.

    Features:
    - Staged writes applied to a shared JobStore on commit
    - Event publishing through an IEventPublisher after commit
    - Post-commit hooks for other side effects
    """

    def __init__(
        self,
        store: 'JobStore',
        publisher: Optional['IEventPublisher'] = None
    ):
        """
        Initialize Unit of Work.

        Args:
            store: Committed jobs shared across units of work
            publisher: Receives domain events after commit. When None,
                events are drained and discarded.
        """
        self._publisher = publisher
        self._post_commit_hooks: List[Callable] = []
        self._closed = False

        # Import here to avoid circular dependencies
        from job_management.repositories.job_repository import InMemoryJobRepository

        self.jobs = InMemoryJobRepository(store)

    @property
    def is_closed(self) -> bool:
        return self._closed

    async def commit(self):
        """
        Commit staged writes, publish events, then run post-commit hooks.

        Publisher errors propagate (the commit itself is already applied).
        Hook failures are logged but don't affect the transaction.
        """
        try:
            committed_jobs = self.jobs.commit()
            events = self.collect_new_events(committed_jobs)
            logger.debug(
                f"Transaction committed: {len(events)} event(s), "
                f"{len(self._post_commit_hooks)} post-commit hook(s)"
            )

            if events:
                if self._publisher is not None:
                    await self._publisher.publish(events)
                else:
                    logger.debug(f"No event publisher configured, discarding {len(events)} event(s)")

            for hook in self._post_commit_hooks:
                try:
                    if inspect.iscoroutinefunction(hook):
                        await hook()
                    else:
                        hook()
                except Exception as e:
                    # Log but don't fail - transaction already committed
                    logger.error(f"Post-commit hook failed: {e}", exc_info=True)

        finally:
            # Always clear hooks after commit
            self._post_commit_hooks.clear()

    async def rollback(self):
        """
        Rollback transaction.

        Discards staged writes and clears post-commit hooks. Events stay on
        the aggregates; nothing is published.
        """
        try:
            self.jobs.rollback()
            logger.debug("Transaction rolled back")
        finally:
            self._post_commit_hooks.clear()

    async def close(self):
        """Mark the unit of work as finished"""
        self._closed = True

    def add_post_commit_hook(self, hook: Callable):
        """
        Add a post-commit hook.

        Args:
            hook: Callable (sync or async) to execute after commit

        Example:
            async def notify_recruiter():
                await send_notification(job)

            uow.add_post_commit_hook(notify_recruiter)
        """
        self._post_commit_hooks.append(hook)


def get_unit_of_work(
    store: 'JobStore',
    publisher: Optional['IEventPublisher'] = None
) -> AbstractUnitOfWork:
    """
    Factory function for Unit of Work.

    Args:
        store: Committed jobs shared across units of work
        publisher: Event publisher for post-commit delivery

    Returns:
        Configured Unit of Work instance

    Usage:
        async with get_unit_of_work(store, publisher) as uow:
            job = await service.post_job(uow, job_id)
            # Commit and event publishing happen on context exit
    """
    return InMemoryUnitOfWork(store, publisher)
