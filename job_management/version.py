"""
Package version information.

Version format: MAJOR.MINOR
- MAJOR: Breaking changes (0 while the domain model is still settling)
- MINOR: Incremented with each merged PR (0.1 → 0.2 → 0.3...)
"""

__version__ = "0.1"
