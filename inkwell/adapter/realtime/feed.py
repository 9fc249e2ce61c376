"""In-process change feed.

Row changes reach the process through the backend's database webhook
(``POST /hooks/changes``) and are fanned out here to whoever subscribed:
comment thread controllers of open SSE streams, mostly.
"""

import logfire

from inkwell.domain.service.change_feed import (
    ChangeEvent,
    ChangeFeed,
    ChangeHandler,
    Subscription,
)


class _FeedSubscription(Subscription):
    def __init__(
        self,
        feed: "InProcessChangeFeed",
        table: str,
        handler: ChangeHandler,
        filters: dict[str, str],
    ) -> None:
        self.feed = feed
        self.table = table
        self.handler = handler
        self.filters = filters
        self._closed = False

    def matches(self, event: ChangeEvent) -> bool:
        if event.table != self.table:
            return False
        return all(event.matches(column, value) for column, value in self.filters.items())

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self.feed._remove(self)

    @property
    def closed(self) -> bool:
        return self._closed


class InProcessChangeFeed(ChangeFeed):
    """Fan-out hub keeping subscriptions in memory."""

    def __init__(self) -> None:
        self._subscriptions: list[_FeedSubscription] = []

    def subscribe(
        self,
        table: str,
        handler: ChangeHandler,
        filters: dict[str, str] | None = None,
    ) -> Subscription:
        subscription = _FeedSubscription(self, table, handler, dict(filters or {}))
        self._subscriptions.append(subscription)
        logfire.debug("Change feed subscription added", table=table, filters=filters)
        return subscription

    def _remove(self, subscription: _FeedSubscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    async def publish(self, event: ChangeEvent) -> int:
        """Deliver an event to each matching handler.

        A failing handler is logged and does not stop delivery to the rest.
        """
        delivered = 0
        for subscription in list(self._subscriptions):
            if subscription.closed or not subscription.matches(event):
                continue
            try:
                await subscription.handler(event)
                delivered += 1
            except Exception as e:
                logfire.error(
                    "Change handler failed",
                    table=event.table,
                    change=event.type.value,
                    error=str(e),
                )
        return delivered

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)
