"""structlog wiring for the demo CLI.

Library modules (``src.graph``, ``src.linked_list``, ``src.config``) only
call ``structlog.get_logger(__name__)`` and emit snake_case events, most of
them at debug level. They never configure anything themselves. ``main.py``
calls :func:`configure_logging` once before loading configuration and again
once the configured level and renderer are known.

Example:
    >>> from src.log_config import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_logs=False)
    >>> get_logger(__name__).debug("reachability_computed", reachable_count=11)
"""

import logging
import sys
from typing import Any

import structlog


def configure_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """Route structlog events through stdlib logging on stderr.

    stdout is reserved for the demo's reachable-vertex line and list
    rendering, so every log event goes to stderr. Calling this again
    replaces the previous setup.

    Args:
        level: Minimum level name, case-insensitive (e.g. "debug" shows the
            per-operation list and traversal events)
        json_logs: One JSON object per event if True, otherwise plain
            key=value console lines

    Raises:
        ValueError: If the level name is not a stdlib logging level
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.contextvars.merge_contextvars,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for ``name``, honouring whatever configure_logging set up."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach keys to every event logged for the rest of a CLI run.

    ``main.run`` binds ``command="demo"`` so graph and list events from a
    single invocation can be grouped.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Drop all bound keys; called when a CLI run finishes."""
    structlog.contextvars.clear_contextvars()
