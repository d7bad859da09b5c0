from __future__ import annotations

from collections.abc import Callable

from pubsub_dispatcher.core.domain.entities.invalid_argument import InvalidArgument
from pubsub_dispatcher.core.domain.services.event_dispatcher import EventDispatcher, Handler


class HandlerBinding:
    """
    Atalho "handler-first" sobre um único EventDispatcher.

    Substitui a ideia de pendurar subscribe/unsubscribe em toda função:
    o handler vira parâmetro explícito e o dispatcher compartilhado vem da
    composition root. Todas as chamadas delegam sem alterar o contrato.
    """

    def __init__(self, dispatcher: EventDispatcher) -> None:
        if not isinstance(dispatcher, EventDispatcher):
            raise TypeError(f"Esperado EventDispatcher, obteve {type(dispatcher).__name__}")
        self.dispatcher = dispatcher

    def subscribe(self, handler: Handler, event_name: str) -> Handler | InvalidArgument:
        return self.dispatcher.subscribe(event_name, handler)

    def unsubscribe(self, handler: Handler, event_name: str) -> Handler | InvalidArgument:
        return self.dispatcher.unsubscribe(event_name, handler)

    def on(self, event_name: str) -> Callable[[Handler], Handler]:
        """Decorator: inscreve a função e a devolve intacta."""
        def decorator(func: Handler) -> Handler:
            self.dispatcher.subscribe(event_name, func)
            return func
        return decorator
