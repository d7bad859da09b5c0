import logging
import sys

import structlog

PACKAGE_LOGGER = "pubsub_dispatcher"

_handler: logging.Handler | None = None


def configure_logging(settings) -> logging.Logger:
    """
    Liga os loggers structlog do pacote ao logging stdlib.

    Nível e formato vêm de `settings.LOG_LEVEL` e `settings.JSON_LOGS`. O
    handler vai só no logger `pubsub_dispatcher`; os handlers do root da
    aplicação hospedeira ficam intactos. Chamar de novo troca o handler
    anterior em vez de empilhar outro.
    """
    global _handler  # noqa: PLW0603
    level = settings.LOG_LEVEL.upper()

    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.JSON_LOGS
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    structlog.configure(
        processors=[
            *shared,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # evita linha duplicada quando o root também tem handler
    package_logger.propagate = False
    _handler = handler
    return package_logger
