from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

registry = CollectorRegistry()

PUBLISH_COUNT = Counter(
    "pubsub_publish_total",
    "Eventos publicados",
    ["event"],
    registry=registry,
)

HANDLER_FAILURES = Counter(
    "pubsub_handler_failures_total",
    "Handlers que levantaram excecao durante a publicacao",
    ["event"],
    registry=registry,
)

HANDLER_DURATION = Histogram(
    "pubsub_handler_seconds",
    "Duracao de cada handler",
    ["event"],
    registry=registry,
)

INVALID_ARGUMENTS = Counter(
    "pubsub_invalid_argument_total",
    "Operacoes rejeitadas pela validacao, por campo",
    ["operation", "field"],
    registry=registry,
)


class PrometheusDispatchMetrics:
    """Registra as métricas do EventDispatcher no `registry` do módulo."""

    def published(self, event_name: str) -> None:
        PUBLISH_COUNT.labels(event_name).inc()

    def handler_failed(self, event_name: str) -> None:
        HANDLER_FAILURES.labels(event_name).inc()

    def handler_duration(self, event_name: str, seconds: float) -> None:
        HANDLER_DURATION.labels(event_name).observe(seconds)

    def invalid_argument(self, operation: str, field: str) -> None:
        INVALID_ARGUMENTS.labels(operation, field).inc()


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(registry), CONTENT_TYPE_LATEST
