"""
Pytest configuration and shared fixtures.
"""
import pytest

from job_management.application.job_service import JobService
from job_management.domain.entities import Job
from job_management.domain.unit_of_work import InMemoryUnitOfWork
from job_management.domain.value_objects import JobDetails
from job_management.infrastructure.event_publisher import InMemoryEventPublisher


@pytest.fixture
def details():
    """Valid job details"""
    return JobDetails("Software Engineer", "Build amazing software")


@pytest.fixture
def job(details):
    """Fresh draft job with its creation event already drained"""
    job = Job(details)
    job.clear_domain_events()
    return job


@pytest.fixture
def store():
    """Shared committed-job storage (acts as the database)"""
    return {}


@pytest.fixture
def publisher():
    """Event publisher that logs handler failures instead of raising"""
    return InMemoryEventPublisher(fail_fast=False)


@pytest.fixture
def make_uow(store, publisher):
    """Factory for units of work sharing the same store and publisher"""
    def _make():
        return InMemoryUnitOfWork(store, publisher)
    return _make


@pytest.fixture
def service():
    return JobService()
