"""Structured logging for the ``xoshiro256`` logger hierarchy.

Library modules log through stdlib ``logging.getLogger(__name__)``, so every
record lands under the ``xoshiro256`` logger and stays silent until
:func:`configure_logging` attaches a handler there. The handler renders those
records, and anything logged through :func:`get_logger`, with structlog's
ProcessorFormatter as JSON or console text. The root logger and any handlers
the host application installed are left alone.

Log hooks see every entry that reaches the handler, e.g. to count reseeds or
to capture ``generator jumped`` events in tests.
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

LOGGER_NAME = 'xoshiro256'

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []

# Handler installed by configure_logging(), replaced on reconfiguration.
_handler: logging.Handler | None = None


def _run_log_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S112
            continue  # a failing hook must not drop the entry
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to both structlog events and stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_log_hooks,
    ]


def _formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    propagate: bool = False,
) -> None:
    """Render the ``xoshiro256`` hierarchy through structlog.

    Calling it again swaps the previously installed handler for a new one;
    handlers on the root logger or on other loggers are never touched.

    Args:
        level: Level for the ``xoshiro256`` logger ("DEBUG", "INFO", ...).
            Seeding, jumps and state restores are logged at DEBUG.
        json_output: If True, emit JSON logs. If False, use console output.
        propagate: Also pass records on to the application's root handlers.
    """
    global _handler  # noqa: PLW0603

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_formatter(json_output))
    package_logger.addHandler(_handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = propagate


def reset_logging() -> None:
    """Undo :func:`configure_logging`: detach its handler and restore defaults."""
    global _handler  # noqa: PLW0603

    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
        _handler = None
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    structlog.reset_defaults()


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger inside the ``xoshiro256`` hierarchy.

    Args:
        name: Child name, e.g. ``"sim"`` for ``xoshiro256.sim``. The package
            logger itself if None.

    Returns:
        A structlog BoundLogger.
    """
    if name is None or name == LOGGER_NAME or name.startswith(f'{LOGGER_NAME}.'):
        return structlog.get_logger(name or LOGGER_NAME)
    return structlog.get_logger(f'{LOGGER_NAME}.{name}')


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of each entry's event dict."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered log hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()
