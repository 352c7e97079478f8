"""Job posting lifecycle domain for the recruitment platform."""

from job_management.version import __version__

__all__ = ["__version__"]
