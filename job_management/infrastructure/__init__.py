"""
Infrastructure layer - External concerns and cross-cutting functionality.

This layer contains:
- Domain event publishing
- Logging utilities
"""
