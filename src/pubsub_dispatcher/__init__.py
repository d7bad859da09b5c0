from pubsub_dispatcher.adapters.binding.handler_binding import HandlerBinding
from pubsub_dispatcher.core.domain.entities.invalid_argument import InvalidArgument
from pubsub_dispatcher.core.domain.services.event_dispatcher import EventDispatcher

__all__ = [
    "EventDispatcher",
    "HandlerBinding",
    "InvalidArgument",
]
