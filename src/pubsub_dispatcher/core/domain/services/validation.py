from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

from pubsub_dispatcher.core.domain.entities.invalid_argument import InvalidArgument

logger = structlog.get_logger(__name__)


# ───────────────────────────────────────────────
# Regras por campo
# ───────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class FieldRule:
    field: str
    check: Callable[[Any], bool]
    reason: str


def _is_event_name(value: Any) -> bool:
    return isinstance(value, str) and value != ""


EVENT = FieldRule("event", _is_event_name, "event name must be a non-empty string")
HANDLER = FieldRule("handler", callable, "handler must be callable")


# ───────────────────────────────────────────────
# Validação
# ───────────────────────────────────────────────
def validate(operation: str, *checks: tuple[FieldRule, Any]) -> InvalidArgument | None:
    """
    Confere exatamente os campos declarados pela operação.

    Emite um warning por campo inválido e devolve `InvalidArgument` com todos
    eles; devolve `None` quando nada falhou. Nunca levanta exceção.
    """
    failed: list[str] = []
    for rule, value in checks:
        if rule.check(value):
            continue
        logger.warning(
            "event.invalid_argument",
            operation=operation,
            field=rule.field,
            reason=rule.reason,
            value=repr(value),
        )
        failed.append(rule.field)

    if not failed:
        return None
    return InvalidArgument(operation=operation, fields=tuple(failed))
