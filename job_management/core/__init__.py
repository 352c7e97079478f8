"""Core module containing interfaces."""

from job_management.core.interfaces import IJobRepository, IEventPublisher

__all__ = ["IJobRepository", "IEventPublisher"]
