"""Library-scoped structured logging.

liftkit never touches the root logger or structlog's global configuration.
Its loggers are structlog wrappers around stdlib loggers under the
``liftkit`` namespace, and ``configure_logging`` only installs a
ProcessorFormatter handler on that namespace. Nothing is configured at
import time; the library stays silent until ``liftkit.init(log_level=...)``
or ``configure_logging`` is called.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
    'reset_logging',
]

LOGGER_NAME = 'liftkit'

_handler: logging.Handler | None = None
_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S110
            pass  # A failing hook must not break logging
    return event_dict


def _event_processors() -> list[Any]:
    """Processors that enrich an event, shared by both ends of the formatter."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _logger_processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        *_event_processors(),
        _run_hooks,
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Send liftkit's events to stderr at the given level.

    Only the ``liftkit`` logger is touched: a handler installed by an earlier
    call is replaced, handlers elsewhere (the root logger's included) are
    left alone, and liftkit records no longer propagate to the root logger.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_event_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False
    _handler = handler


def reset_logging() -> None:
    """Undo configure_logging(), returning the liftkit logger to stdlib defaults."""
    global _handler  # noqa: PLW0603

    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
        _handler = None
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Get a structlog logger bound to the stdlib logger ``name``.

    Names outside the ``liftkit`` namespace work too, but only liftkit
    loggers pick up the level and handler set by configure_logging().
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_logger_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


# --- Logging Hooks ---


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook called with a copy of each enabled liftkit log entry."""
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
