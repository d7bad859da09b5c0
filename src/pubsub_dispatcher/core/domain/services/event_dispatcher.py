from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Any, Protocol

import structlog

from pubsub_dispatcher.core.domain.entities.invalid_argument import InvalidArgument
from pubsub_dispatcher.core.domain.services.validation import EVENT, HANDLER, validate

logger = structlog.get_logger(__name__)

Handler = Callable[[Any], Any]


class DispatchMetrics(Protocol):
    def published(self, event_name: str) -> None: ...

    def handler_failed(self, event_name: str) -> None: ...

    def handler_duration(self, event_name: str, seconds: float) -> None: ...

    def invalid_argument(self, operation: str, field: str) -> None: ...


def handler_name(handler: Any) -> str:
    return (
        getattr(handler, "__qualname__", None)
        or getattr(handler, "__name__", None)
        or handler.__class__.__name__
    )


class EventDispatcher:
    """
    Dispatcher síncrono de eventos nomeados.

    Cada nome de evento aponta para a lista ordenada dos handlers inscritos;
    o mesmo handler pode aparecer mais de uma vez. Entradas de validação
    inválidas não levantam exceção: a operação devolve `InvalidArgument`.
    """

    def __init__(self, metrics: DispatchMetrics | None = None) -> None:
        self._subs: dict[str, list[Handler]] = {}
        self._lock = threading.Lock()
        self._metrics = metrics

    # ------------------------------------------------------------------
    # Inscrição
    # ------------------------------------------------------------------
    def subscribe(self, event_name: str, handler: Handler) -> Handler | InvalidArgument:
        invalid = self._validate("subscribe", (EVENT, event_name), (HANDLER, handler))
        if invalid is not None:
            return invalid

        with self._lock:
            self._subs.setdefault(event_name, []).append(handler)
        logger.debug(
            "event.subscribed",
            event_name=event_name,
            handler_name=handler_name(handler),
        )
        return handler

    def unsubscribe(self, event_name: str, handler: Handler) -> Handler | InvalidArgument:
        """Remove a primeira ocorrência (por identidade) do handler."""
        invalid = self._validate("unsubscribe", (EVENT, event_name), (HANDLER, handler))
        if invalid is not None:
            return invalid

        removed = False
        with self._lock:
            handlers = self._subs.get(event_name)
            if handlers is not None:
                for pos, h in enumerate(handlers):
                    if h is handler:
                        del handlers[pos]
                        removed = True
                        break
                if not handlers:
                    del self._subs[event_name]
        logger.debug(
            "event.unsubscribed",
            event_name=event_name,
            handler_name=handler_name(handler),
            removed=removed,
        )
        return handler

    def off(self, event_name: str) -> bool | InvalidArgument:
        invalid = self._validate("off", (EVENT, event_name))
        if invalid is not None:
            return invalid

        with self._lock:
            handlers = self._subs.pop(event_name, [])
        logger.debug("event.cleared", event_name=event_name, removed=len(handlers))
        return True

    # ------------------------------------------------------------------
    # Publicação
    # ------------------------------------------------------------------
    def publish(self, event_name: str, data: Any = None) -> bool | InvalidArgument:
        """
        Entrega `data` a todos os handlers de `event_name`, em ordem de inscrição.

        A lista é copiada sob o lock e os handlers rodam fora dele, então um
        handler pode se inscrever, desinscrever ou publicar sem travar. Falha
        de um handler é registrada e não interrompe os seguintes.
        """
        invalid = self._validate("publish", (EVENT, event_name))
        if invalid is not None:
            return invalid

        with self._lock:
            handlers = tuple(self._subs.get(event_name, ()))
        logger.info("event.dispatch", event_name=event_name, listeners=len(handlers))
        if not handlers:
            return True

        # label só para eventos com ouvintes
        self._record("published", event_name)
        for h in handlers:
            start = time.perf_counter()
            try:
                h(data)
            except Exception as e:
                logger.error(
                    "event.handler_error",
                    event_name=event_name,
                    handler_name=handler_name(h),
                    error=str(e),
                    exc_info=True,
                )
                self._record("handler_failed", event_name)
            self._record("handler_duration", event_name, time.perf_counter() - start)
        return True

    # ------------------------------------------------------------------
    # Consulta
    # ------------------------------------------------------------------
    def handlers(self, event_name: str) -> tuple[Handler, ...]:
        with self._lock:
            return tuple(self._subs.get(event_name, ()))

    def event_names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._subs)

    # ------------------------------------------------------------------
    def _validate(self, operation: str, *checks) -> InvalidArgument | None:
        invalid = validate(operation, *checks)
        if invalid is not None:
            for field in invalid.fields:
                self._record("invalid_argument", operation, field)
        return invalid

    def _record(self, metric: str, *args) -> None:
        """Repassa ao recorder de métricas; uma falha dele nunca interrompe a entrega."""
        if self._metrics is None:
            return
        try:
            getattr(self._metrics, metric)(*args)
        except Exception as e:
            logger.error("event.metrics_error", metric=metric, error=str(e), exc_info=True)
