"""Structured logging configuration using structlog.

Stdlib loggers (``logging.getLogger(__name__)``) are routed through one
structlog processor chain. Output is JSON lines unless stderr is a TTY or
``AUDIT_OBSERVABILITY_JSON_LOGS`` says otherwise. Letter text passed as
log context is replaced by its length before rendering.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from decision_audit.core.config import ObservabilityConfig

DOCUMENT_TEXT_KEYS = frozenset({"text", "raw_text", "letter_text"})


def redact_document_text(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Swap document text fields for ``<N chars>`` markers."""
    for key in DOCUMENT_TEXT_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = f"<{len(value)} chars>"
    return event_dict


def _renderer(config: ObservabilityConfig) -> Any:
    use_json = config.json_logs if config.json_logs is not None else not sys.stderr.isatty()
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(config: ObservabilityConfig) -> None:
    """Route stdlib logging through structlog and bind the service name."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        redact_document_text,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(config),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("decision_audit").setLevel(level)
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=config.service_name)
