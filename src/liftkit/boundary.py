"""lift() and unlift(): the boundary between raising code and Results.

``lift`` evaluates a call and normalizes whatever happens into a Result:

    >>> lift(lambda: 1)
    Ok(value=1)
    >>> lift(lambda: Err('no'))
    Err(error='no')
    >>> lift(int, 'x')
    Err(error=LiftedException(kind='builtins.ValueError', ...))

``unlift`` goes the other way: it returns the success value, or raises
Propagate so that the nearest enclosing ``lift`` returns the failure.
Together they let deeply nested code short-circuit without threading
Results through every frame.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from liftkit._config import get_config
from liftkit._internal.arity import accepts
from liftkit._logging import get_logger
from liftkit.errors import LiftedException
from liftkit.propagate import Propagate
from liftkit.result import Err, Failure, FailureType, Ok, Result

__all__ = ['is_thunk', 'lift', 'normalize', 'thunk', 'unlift']


def normalize(value: Any) -> Result[Any, Any]:
    """Normalize a plain return value into a Result.

    Ok and Err pass through, the Failure sentinel becomes Err(Failure) and
    anything else is a bare success.
    """
    if isinstance(value, Ok):
        return value
    if isinstance(value, FailureType):
        return Err(Failure)
    if isinstance(value, Err):
        return value
    return Ok(value)


def _from_propagate(p: Propagate) -> Err[Any]:
    value = p.value
    if isinstance(value, Err):
        return value
    if isinstance(value, FailureType):
        return Err(Failure)
    return Err(value)


def lift(f: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Result[Any, Any]:
    """Evaluate f(*args, **kwargs) once and return its outcome as a Result.

    Args:
        f: The computation. Called with no arguments when none are given.
        *args: Positional arguments for f.
        **kwargs: Keyword arguments for f.

    Returns:
        - the Result f returned, unchanged;
        - Err(Failure) if f returned the Failure sentinel;
        - Ok(value) for any other return value;
        - the carried Err if f raised Propagate;
        - Err(LiftedException) if f raised an exception in the configured
          catch set (Exception by default).
    """
    config = get_config()
    try:
        value = f(*args, **kwargs)
    except Propagate as p:
        return _from_propagate(p)
    except config.catch as exc:
        lifted = LiftedException.capture(exc, with_trace=config.capture_traceback)
        if config.log_level is not None:
            get_logger(__name__).debug('lifted_exception', kind=lifted.kind)
        return Err(lifted)
    return normalize(value)


def unlift(f: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Any:
    """Evaluate f(*args, **kwargs) and extract its success value.

    Ok(value) gives value and a bare value is returned as-is. Err and the
    Failure sentinel raise Propagate, which the nearest enclosing lift()
    turns back into the same Err. Exceptions raised by f are not caught.

    Raises:
        Propagate: If f produced Err or Failure.
    """
    value = f(*args, **kwargs)
    if isinstance(value, Ok):
        return value.value
    if isinstance(value, FailureType):
        raise Propagate(Err(Failure))
    if isinstance(value, Err):
        raise Propagate(value)
    return value


def is_thunk(x: object) -> bool:
    """Return True if x is a callable that can be invoked with no arguments."""
    if isinstance(x, Ok | Err | FailureType) or not callable(x):
        return False
    return accepts(x, 0)


def thunk(f: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Callable[[], Any]:
    """Defer f(*args, **kwargs) as a zero-argument thunk."""
    return functools.partial(f, *args, **kwargs)
