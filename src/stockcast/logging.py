"""structlog setup for the dashboard server.

Every module logs through ``get_logger(__name__)``; ``setup_logging`` is
called once from ``stockcast.main`` before the app is built.
"""

import logging

import structlog

#: Library loggers that flood DEBUG output with per-query or per-frame lines.
NOISY_LOGGERS = ("aiosqlite", "websockets", "uvicorn.access")


def setup_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """Route structlog events through stdlib logging on stderr.

    Args:
        log_level: Root level name; unknown names fall back to INFO.
        log_format: "json" for one JSON object per line, anything else for
            the coloured console renderer.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Keep DEBUG usable for prediction and tick events.
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
