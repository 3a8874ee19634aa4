"""structlog setup for the permgraph CLI.

Library modules log through ``logging.getLogger(__name__)`` and stay
silent until :func:`configure_logging` installs a single stderr handler.
That handler runs stdlib records and structlog events through one
processor chain, ending in either a console or a JSON renderer.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "permgraph"

_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _select_renderer(*, log_json: bool, color: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    # Colour only reaches a terminal; piped stderr stays plain.
    return structlog.dev.ConsoleRenderer(colors=color and sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    color: bool = True,
) -> None:
    """Route log output to stderr. Calling it again replaces the handler.

    Args:
        verbose: DEBUG for the ``permgraph`` logger (edge insertions,
            reversals, service failures). Otherwise WARNING and above.
        log_json: One JSON object per line instead of console text.
        color: The ``[output] color`` setting; ignored in JSON mode.
    """
    shared = list(_SHARED_PROCESSORS)
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _select_renderer(log_json=log_json, color=color),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
