"""Library configuration: LiftConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from liftkit._logging import configure_logging

__all__ = [
    'LiftConfig',
    'get_config',
    'init',
    'reset_config',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class LiftConfig:
    """Configuration consulted by lift().

    Attributes:
        catch: Exception types lift() converts into Err(LiftedException).
        capture_traceback: Whether LiftedException.trace is filled in.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    catch: tuple[type[BaseException], ...] = (Exception,)
    capture_traceback: bool = True
    log_level: str | None = None


_config: LiftConfig = LiftConfig()


def _detect_log_level() -> str | None:
    """Read LIFTKIT_LOG_LEVEL; empty or unset means silent."""
    level = os.environ.get('LIFTKIT_LOG_LEVEL', '').strip().upper()
    return level or None


def _detect_capture_traceback() -> bool:
    """Read LIFTKIT_CAPTURE_TRACEBACK, defaulting to True."""
    raw = os.environ.get('LIFTKIT_CAPTURE_TRACEBACK', '').strip().lower()
    if not raw or raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logging.warning("Unknown LIFTKIT_CAPTURE_TRACEBACK value '%s', defaulting to true", raw)
    return True


def init(
    catch: tuple[type[BaseException], ...] | None = None,
    capture_traceback: bool | None = None,
    log_level: str | None = None,
) -> LiftConfig:
    """Install the liftkit configuration.

    Unspecified arguments are resolved from the environment
    (LIFTKIT_CAPTURE_TRACEBACK, LIFTKIT_LOG_LEVEL) and then from defaults.

    Args:
        catch: Exception types lift() captures. Defaults to (Exception,).
        capture_traceback: Whether captured exceptions keep a formatted traceback.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The LiftConfig that was set.

    Example:
        ```python
        import liftkit

        liftkit.init(log_level='DEBUG')
        liftkit.init(catch=(ValueError, KeyError), capture_traceback=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_catch = catch if catch is not None else (Exception,)
    if not resolved_catch or not all(
        isinstance(exc, type) and issubclass(exc, BaseException) for exc in resolved_catch
    ):
        msg = f'catch must be a non-empty tuple of exception types, got {resolved_catch!r}'
        raise ValueError(msg)

    _config = LiftConfig(
        catch=tuple(resolved_catch),
        capture_traceback=(
            capture_traceback if capture_traceback is not None else _detect_capture_traceback()
        ),
        log_level=log_level if log_level is not None else _detect_log_level(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level)

    return _config


def get_config() -> LiftConfig:
    """Get the current configuration (defaults if init() was never called)."""
    return _config


def reset_config() -> LiftConfig:
    """Restore the default configuration."""
    global _config  # noqa: PLW0603

    _config = LiftConfig()
    return _config
