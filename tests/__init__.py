"""
Tests for the job management domain

Tests are organized by layer:
- test_job_details.py / test_job.py: value object and aggregate rules
- test_domain_events.py / test_result.py: event recording and result type
- test_job_repository.py / test_unit_of_work.py: persistence and transactions
- test_job_service.py: use cases end to end
- test_event_publisher.py / test_config.py: infrastructure and settings
"""
