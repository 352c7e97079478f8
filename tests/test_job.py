"""
Unit tests for the Job aggregate root.

Covers the lifecycle state machine, soft deletion, detail updates and the
guarantee that rejected operations leave the job untouched.
"""
from datetime import datetime, timedelta, timezone

import pytest

from job_management.domain.entities import Job
from job_management.domain.exceptions import InvalidArgumentError, InvalidStateError
from job_management.domain.value_objects import JobDetails, JobId, JobStatus


def assert_rejected(result, message):
    assert result.is_err
    assert isinstance(result.error, InvalidStateError)
    assert result.message == message


def snapshot(job):
    return (job.id, job.details, job.status, job.is_deleted, job.created_at, job.posted_at)


# Construction

def test_new_job_starts_as_draft(details):
    before = datetime.now(timezone.utc)
    job = Job(details)
    after = datetime.now(timezone.utc)

    assert job.status == JobStatus.DRAFT
    assert job.is_deleted is False
    assert job.posted_at is None
    assert job.details is details
    assert isinstance(job.id, JobId)
    assert before <= job.created_at <= after
    assert job.created_at.tzinfo is not None


def test_each_job_gets_its_own_id(details):
    assert Job(details).id != Job(details).id


@pytest.mark.parametrize("bad_details", [None, "Software Engineer", {"title": "x"}])
def test_constructor_requires_job_details(bad_details):
    with pytest.raises(InvalidArgumentError) as exc_info:
        Job(bad_details)

    assert exc_info.value.param == "details"


def test_create_factory_returns_result(details):
    ok = Job.create(details)
    err = Job.create(None)

    assert ok.is_ok
    assert ok.unwrap().status == JobStatus.DRAFT
    assert err.is_err
    assert isinstance(err.error, InvalidArgumentError)


def test_end_to_end_trim_delete_restore_post():
    details = JobDetails("  Senior Engineer  ", "  Build things  ")
    job = Job(details)

    assert job.details.title == "Senior Engineer"
    assert job.details.description == "Build things"

    assert job.delete().is_ok
    assert_rejected(job.post(), "Cannot post a deleted job")

    assert job.restore().is_ok
    assert job.post().is_ok
    assert job.status == JobStatus.ACTIVE


# Post

def test_post_moves_draft_to_active(job):
    result = job.post()

    assert result.is_ok
    assert result.unwrap() is None
    assert job.status == JobStatus.ACTIVE


def test_post_sets_posted_at(job):
    before = datetime.now(timezone.utc)
    job.post()

    assert job.posted_at is not None
    assert before <= job.posted_at <= datetime.now(timezone.utc)


def test_post_twice_is_rejected(job):
    job.post()

    assert_rejected(job.post(), "Job is already posted")


def test_post_closed_job_is_rejected(job):
    job.post()
    job.close()

    assert_rejected(job.post(), "Cannot post a closed job")


def test_post_deleted_job_is_rejected(job):
    job.delete()

    assert_rejected(job.post(), "Cannot post a deleted job")


def test_post_succeeds_after_restore(job):
    job.delete()
    job.restore()

    assert job.post().is_ok
    assert job.status == JobStatus.ACTIVE


# Close

def test_close_active_job(job):
    job.post()

    assert job.close().is_ok
    assert job.status == JobStatus.CLOSED


def test_posted_at_kept_after_close(job):
    job.post()
    posted_at = job.posted_at

    job.close()

    assert job.posted_at == posted_at


def test_close_draft_job_is_rejected(job):
    assert_rejected(job.close(), "Cannot close a draft job. Delete it instead.")
    assert job.status == JobStatus.DRAFT


def test_close_twice_is_rejected(job):
    job.post()
    job.close()

    assert_rejected(job.close(), "Job is already closed")


def test_close_deleted_job_is_rejected(job):
    job.delete()

    assert_rejected(job.close(), "Cannot close a deleted job")


# Delete / restore

def test_delete_draft_marks_deleted_and_keeps_status(job):
    assert job.delete().is_ok

    assert job.is_deleted is True
    assert job.status == JobStatus.DRAFT


def test_delete_active_job_is_rejected(job):
    job.post()

    assert_rejected(job.delete(), "Cannot delete an active job. Close it first.")
    assert job.is_deleted is False


def test_delete_closed_job_is_rejected(job):
    job.post()
    job.close()

    assert_rejected(job.delete(), "Cannot delete a closed job")


def test_delete_twice_is_rejected(job):
    job.delete()

    assert_rejected(job.delete(), "Job is already deleted")


def test_restore_clears_deleted_flag_and_keeps_status(job):
    job.delete()

    assert job.restore().is_ok
    assert job.is_deleted is False
    assert job.status == JobStatus.DRAFT


def test_restore_without_delete_is_rejected(job):
    assert_rejected(job.restore(), "Job is not deleted")


# Update details

def test_update_details_replaces_value_wholesale(job):
    new_details = JobDetails("Senior Software Engineer", "Build amazing software with our team")

    assert job.update_details(new_details).is_ok

    assert job.details is new_details
    assert job.title == "Senior Software Engineer"
    assert job.description == "Build amazing software with our team"


def test_update_details_without_description_clears_it():
    job = Job(JobDetails("Software Engineer", "Old description"))

    job.update_details(JobDetails("Senior Software Engineer"))

    assert job.details.title == "Senior Software Engineer"
    assert job.details.description is None


def test_update_details_requires_job_details(job):
    result = job.update_details(None)

    assert result.is_err
    assert isinstance(result.error, InvalidArgumentError)
    assert result.error.param == "new_details"


def test_update_details_null_checked_before_state(job):
    """Test a missing argument is reported even on a deleted job"""
    job.delete()

    result = job.update_details(None)

    assert isinstance(result.error, InvalidArgumentError)


def test_update_details_active_job_is_rejected(job):
    job.post()

    assert_rejected(job.update_details(JobDetails("New Title")), "Cannot update details of an active job")


def test_update_details_closed_job_is_rejected(job):
    job.post()
    job.close()

    assert_rejected(job.update_details(JobDetails("New Title")), "Cannot update details of a closed job")


def test_update_details_deleted_job_is_rejected(job):
    job.delete()

    assert_rejected(job.update_details(JobDetails("New Title")), "Cannot update details of a deleted job")


def test_update_details_rejected_after_post_despite_earlier_updates(job):
    for i in range(3):
        assert job.update_details(JobDetails(f"Title v{i}")).is_ok

    job.post()
    assert job.update_details(JobDetails("Too late")).is_err

    job.close()
    assert job.update_details(JobDetails("Still too late")).is_err
    assert job.title == "Title v2"


# NEW (unsaved) jobs

@pytest.fixture
def new_job(details):
    job = Job.start_new(details).unwrap()
    job.clear_domain_events()
    return job


def test_start_new_creates_unsaved_job(new_job):
    assert new_job.status == JobStatus.NEW
    assert new_job.is_deleted is False


def test_start_new_requires_job_details():
    result = Job.start_new(None)

    assert result.is_err
    assert isinstance(result.error, InvalidArgumentError)


def test_create_draft_from_new(new_job):
    assert new_job.create_draft().is_ok
    assert new_job.status == JobStatus.DRAFT
    assert new_job.post().is_ok


def test_create_draft_only_from_new(job):
    assert_rejected(job.create_draft(), "Can only create draft from new job")


def test_create_draft_of_deleted_job_is_rejected(job):
    job.delete()

    assert_rejected(job.create_draft(), "Cannot create draft from a deleted job")


def test_new_job_cannot_be_posted_closed_or_deleted(new_job):
    assert_rejected(new_job.post(), "Can only post saved draft jobs")
    assert_rejected(new_job.close(), "Cannot close an unsaved job.")
    assert_rejected(new_job.delete(), "Cannot delete an unsaved job")
    assert new_job.status == JobStatus.NEW


def test_new_job_details_can_be_updated(new_job):
    assert new_job.update_details(JobDetails("Renamed")).is_ok
    assert new_job.title == "Renamed"


# Guard ordering and atomicity

def test_deletion_reported_before_status():
    """Test a deleted job that is also closed reports the deletion error"""
    job = Job.rehydrate(
        job_id=JobId.generate(),
        details=JobDetails("Legacy"),
        status=JobStatus.CLOSED,
        created_at=datetime.now(timezone.utc),
        is_deleted=True,
    )

    assert_rejected(job.post(), "Cannot post a deleted job")
    assert_rejected(job.close(), "Cannot close a deleted job")
    assert_rejected(job.update_details(JobDetails("x")), "Cannot update details of a deleted job")


def test_rejected_operations_leave_job_unchanged(job):
    job.post()
    before = snapshot(job)
    job.clear_domain_events()

    job.post()
    job.delete()
    job.restore()
    job.create_draft()
    job.update_details(JobDetails("Other"))

    assert snapshot(job) == before
    assert job.domain_events == ()


# Rehydration

def test_rehydrate_restores_stored_state():
    job_id = JobId.generate()
    created_at = datetime.now(timezone.utc) - timedelta(days=3)
    posted_at = created_at + timedelta(days=1)

    job = Job.rehydrate(
        job_id=job_id,
        details=JobDetails("Stored"),
        status="active",
        created_at=created_at,
        posted_at=posted_at,
    )

    assert job.id == job_id
    assert job.status == JobStatus.ACTIVE
    assert job.created_at == created_at
    assert job.posted_at == posted_at
    assert job.domain_events == ()


def test_rehydrate_rejects_unknown_status():
    with pytest.raises(InvalidArgumentError, match="Invalid job status"):
        Job.rehydrate(
            job_id=JobId.generate(),
            details=JobDetails("Stored"),
            status="archived",
            created_at=datetime.now(timezone.utc),
        )


def test_rehydrate_requires_job_id():
    with pytest.raises(InvalidArgumentError):
        Job.rehydrate(
            job_id="not-a-job-id",
            details=JobDetails("Stored"),
            status=JobStatus.DRAFT,
            created_at=datetime.now(timezone.utc),
        )


def test_rehydrate_requires_datetime_posted_at():
    with pytest.raises(InvalidArgumentError, match="posted_at must be a datetime") as exc_info:
        Job.rehydrate(
            job_id=JobId.generate(),
            details=JobDetails("Stored"),
            status=JobStatus.ACTIVE,
            created_at=datetime.now(timezone.utc),
            posted_at="2024-01-01T00:00:00Z",
        )

    assert exc_info.value.param == "posted_at"


# Identity

def test_jobs_compare_by_identity(details):
    job = Job(details)
    same = Job.rehydrate(job.id, JobDetails("Different"), JobStatus.CLOSED, job.created_at)

    assert job == same
    assert hash(job) == hash(same)
    assert job != Job(details)


def test_repr_mentions_status_and_deletion(job):
    job.delete()

    text = repr(job)

    assert "status=draft" in text
    assert "deleted" in text
