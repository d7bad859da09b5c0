from dependency_injector import containers, providers

container = None

def setup_di_container_from_settings(settings):
    """Inicializa (uma única vez) o container com o dispatcher compartilhado."""
    global container  # noqa: PLW0603
    if container is not None:
        import structlog
        structlog.get_logger().debug("DI container já inicializado.")
        return container

    from pubsub_dispatcher.adapters.binding.handler_binding import HandlerBinding
    from pubsub_dispatcher.adapters.observability.metrics import PrometheusDispatchMetrics
    from pubsub_dispatcher.core.domain.services.event_dispatcher import EventDispatcher

    class Container(containers.DeclarativeContainer):
        config = providers.Configuration()

        dispatch_metrics = providers.Selector(
            config.metrics,
            enabled=providers.Singleton(PrometheusDispatchMetrics),
            disabled=providers.Object(None),
        )

        # Dispatcher único do processo; bindings sempre apontam para ele
        event_dispatcher = providers.Singleton(EventDispatcher, metrics=dispatch_metrics)
        handler_binding = providers.Factory(HandlerBinding, dispatcher=event_dispatcher)

    # ------- INSTANCIAÇÃO E CONFIG -------
    container = Container()
    container.config.metrics.from_value(
        "enabled" if getattr(settings, "METRICS_ENABLED", True) else "disabled"
    )
    return container


def bootstrap(settings=None):
    """Configura o logging a partir das settings e devolve o container."""
    from pubsub_dispatcher.adapters.config.structlog_config import configure_logging

    if settings is None:
        from pubsub_dispatcher.adapters.config import settings as project_settings
        settings = project_settings

    configure_logging(settings)
    return setup_di_container_from_settings(settings)
