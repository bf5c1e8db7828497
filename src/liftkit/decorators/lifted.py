"""@lifted and @unlifted decorators wrapping lift() and unlift()."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from liftkit.boundary import lift, unlift
from liftkit.result import Result

__all__ = ['lifted', 'unlifted']


def lifted[**P](func: Callable[P, Any]) -> Callable[P, Result[Any, Any]]:
    """Decorator that routes every call through lift().

    The decorated function always returns a Result: bare values become Ok,
    Ok and Err pass through, Propagate and other exceptions become Err.

    Example:
        ```python
        @lifted
        def parse(text: str) -> int:
            return int(text)
        parse('42')
        # Ok(value=42)
        parse('x')
        # Err(error=LiftedException(kind='builtins.ValueError', ...))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Any]:
        return lift(wrapped, *args, **kwargs)

    return wrapper(func)  # type: ignore[return-value]


def unlifted[**P](func: Callable[P, Any]) -> Callable[P, Any]:
    """Decorator that routes every call through unlift().

    The wrapped function returns the success value directly and raises
    Propagate on failure, for use inside a lift()-delimited region.

    Example:
        ```python
        @unlifted
        def lookup(key: str) -> Result[int, str]:
            return Ok(table[key]) if key in table else Err(key)

        lift(lambda: lookup('a') + lookup('b'))
        # Err(error='b') if 'b' is missing
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return unlift(wrapped, *args, **kwargs)

    return wrapper(func)  # type: ignore[return-value]
