"""Repository implementations."""

from job_management.repositories.job_repository import InMemoryJobRepository, JobStore

__all__ = ["InMemoryJobRepository", "JobStore"]
