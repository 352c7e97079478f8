"""
Result type for aggregate operations.

Every lifecycle operation on the Job aggregate returns either:
- Ok(value): the operation succeeded (value is None for commands)
- Err(error): the operation was rejected, carrying a DomainError

Rule violations are part of the method contract instead of being raised.
Callers that prefer exceptions use unwrap() at their boundary:

    job.post().unwrap()  # raises InvalidStateError if rejected
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from job_management.domain.exceptions import DomainError

T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome"""
    value: T = None

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the carried value"""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Rejected outcome carrying the domain error"""
    error: DomainError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    @property
    def message(self) -> str:
        """Human-readable reason, suitable for surfacing to users"""
        return str(self.error)

    def unwrap(self):
        """
        Raise the carried error.

        Raises:
            DomainError: Always (InvalidArgumentError or InvalidStateError)
        """
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]
