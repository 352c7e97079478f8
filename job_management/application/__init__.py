"""
Application layer - Use cases and business logic orchestration.

This layer contains:
- Application services (orchestrate domain + infrastructure)
- Job lifecycle use cases

No direct dependencies on frameworks.
"""
