"""Logging configuration for processes hosting the job domain."""
import logging
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from job_management.config import Settings


class JobContextFilter(logging.Filter):
    """Ensure every record has a job_id attribute so formats can use %(job_id)s"""

    def filter(self, record):
        if not hasattr(record, 'job_id'):
            record.job_id = '-'
        return True


def configure_logging(app_settings: Optional['Settings'] = None) -> None:
    """
    Configure root logging from settings.

    Args:
        app_settings: Settings to use (defaults to the global settings)
    """
    if app_settings is None:
        from job_management.config import settings as app_settings

    logging.basicConfig(
        level=getattr(logging, app_settings.log_level),
        format=app_settings.log_format,
        force=True,
    )

    for handler in logging.root.handlers:
        handler.addFilter(JobContextFilter())

    logging.getLogger(__name__).debug(
        f"Logging configured (level={app_settings.log_level}, "
        f"environment={app_settings.environment})"
    )
