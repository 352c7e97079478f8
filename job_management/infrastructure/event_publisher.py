"""
In-process domain event publisher.

Fans out committed domain events to subscribed handlers:
- Per event type (e.g. only JobPosted)
- Catch-all (every event)

Handlers may be sync or async. Published events are also kept in
`published` so callers can inspect what left the unit of work.
"""

import inspect
import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Sequence, Type

from job_management.core.interfaces import IEventPublisher
from job_management.domain.events import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], object]


class InMemoryEventPublisher(IEventPublisher):
    """Synchronous fan-out of domain events to registered handlers"""

    def __init__(self, fail_fast: Optional[bool] = None):
        """
        Initialize publisher.

        Args:
            fail_fast: Re-raise handler errors instead of logging them.
                Defaults to settings.event_handler_fail_fast.
        """
        if fail_fast is None:
            from job_management.config import settings
            fail_fast = settings.event_handler_fail_fast

        self._fail_fast = fail_fast
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = defaultdict(list)
        self._catch_all: List[EventHandler] = []
        self.published: List[DomainEvent] = []

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Register handler for one event type (subclasses included)"""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register handler for every event"""
        self._catch_all.append(handler)

    def handlers_for(self, event: DomainEvent) -> List[EventHandler]:
        handlers = []
        for event_type, registered in self._handlers.items():
            if isinstance(event, event_type):
                handlers.extend(registered)
        return handlers + self._catch_all

    async def publish(self, events: Sequence[DomainEvent]) -> None:
        """
        Deliver events in order to their handlers.

        Raises:
            Exception: Handler errors, only when fail_fast is enabled
        """
        for event in events:
            self.published.append(event)
            handlers = self.handlers_for(event)
            logger.debug(f"Publishing {event.event_type} for job {event.job_id} to {len(handlers)} handler(s)")

            for handler in handlers:
                try:
                    if inspect.iscoroutinefunction(handler):
                        await handler(event)
                    else:
                        handler(event)
                except Exception as e:
                    if self._fail_fast:
                        raise
                    logger.error(
                        f"Event handler failed for {event.event_type} (job {event.job_id}): {e}",
                        exc_info=True
                    )

    def clear(self) -> None:
        """Forget published events (handlers stay registered)"""
        self.published.clear()
