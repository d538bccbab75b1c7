"""
In-process event bus used to notify callers about registrations and parking pass purchases.
"""

import logging
from typing import Any, Callable, Dict, List, Type

from parking_pass.common.utility import LoggerMixin
from parking_pass.core.application.events.base_event import BaseEvent


class EventBus(LoggerMixin):
    """
    EventBus manages event subscriptions and publishing.

    Handlers are called synchronously, in subscription order, on the caller's thread.

    Attributes:
        _subscribers (Dict[Type[BaseEvent], List[Callable[[BaseEvent], None]]]):
            Maps event types to lists of handler functions.
    """

    _subscribers: Dict[Type[BaseEvent], List[Callable[[BaseEvent], None]]]

    def __init__(self, *, logger: logging.Logger) -> None:
        self._subscribers = {}
        self._build_logger(logger=logger)

    def subscribe(
        self, event_type: Type[BaseEvent], handler: Callable[[Any], None]
    ) -> None:
        """
        Subscribe a handler to a specific event type.

        Args:
            event_type (Type[BaseEvent]): The event class to subscribe to.
            handler (Callable[[Any], None]): The function to call when the event is published.
        """
        self._subscribers.setdefault(event_type, []).append(handler)

    def publish(self, event: BaseEvent) -> None:
        """
        Publish an event to all handlers subscribed to its exact type.

        Args:
            event (BaseEvent): The event instance to publish.
        """
        handlers = self._subscribers.get(type(event))

        if not handlers:
            self._logger.warning(
                "No subscribers for event.\n\tEvent Type: %s\n\tEvent: %r",
                type(event).__name__,
                event,
            )
            return

        for handler in handlers:
            handler(event)
