"""Change feed port.

The hosted backend notifies Inkwell of row changes; services subscribe to
a collection, optionally narrowed by a column equality filter.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any, Optional

from pydantic import BaseModel, Field

from inkwell.domain.value import ChangeType


class ChangeEvent(BaseModel):
    """A single insert, update or delete on a backend collection."""

    type: ChangeType
    table: str
    record: Optional[dict[str, Any]] = None
    old_record: Optional[dict[str, Any]] = None

    def matches(self, column: str, value: str) -> bool:
        """Whether the new or old row has ``column == value``."""
        for row in (self.record, self.old_record):
            if row is not None and str(row.get(column)) == value:
                return True
        return False


ChangeHandler = Callable[[ChangeEvent], Awaitable[None]]


class Subscription(ABC):
    """Handle returned by ``ChangeFeed.subscribe``."""

    @abstractmethod
    def close(self) -> None:
        """Stop delivering events to the handler. Idempotent."""
        pass

    @property
    @abstractmethod
    def closed(self) -> bool:
        pass


class ChangeFeed(ABC):
    """Push channel for backend row changes."""

    @abstractmethod
    def subscribe(
        self,
        table: str,
        handler: ChangeHandler,
        filters: dict[str, str] | None = None,
    ) -> Subscription:
        """Register a handler for changes on a collection.

        Args:
            table: Collection name
            handler: Coroutine called with each matching event
            filters: Column equality filters, e.g. ``{"post_id": "<uuid>"}``

        Returns:
            Subscription whose ``close()`` removes the handler
        """
        pass

    @abstractmethod
    async def publish(self, event: ChangeEvent) -> int:
        """Deliver an event to every matching subscriber.

        Returns:
            Number of handlers the event was delivered to
        """
        pass

    @property
    @abstractmethod
    def subscriber_count(self) -> int:
        pass
