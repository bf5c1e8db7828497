"""Result type: Ok[T] | Err[E], the Failure sentinel, fmap and to_bool."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeIs

import msgspec

from liftkit.propagate import Propagate

__all__ = [
    'Err',
    'Failure',
    'FailureType',
    'Ok',
    'Result',
    'fmap',
    'is_err',
    'is_ok',
    'to_bool',
]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> fmap(lambda x: x * 2, ok)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok carries no error.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def bail(self) -> T:
        """Return the contained value (no-op for Ok)."""
        return self.value


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing a failure reason of type E.

    The reason is opaque application data and is propagated verbatim by
    every combinator in this package.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            RuntimeError: Always, since Err has no Ok value to unwrap.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_err(self) -> E:
        """Return the contained failure reason."""
        return self.error

    def bail(self) -> NoReturn:
        """Raise Propagate so the nearest enclosing lift() returns this Err.

        Raises:
            Propagate: Always, containing this Err.
        """
        raise Propagate(self)


class FailureType(msgspec.Struct, frozen=True, gc=False):
    """No-payload failure marker.

    This is a singleton - use the `Failure` constant instead of
    instantiating directly. lift() turns it into ``Err(Failure)``, so the
    sentinel doubles as the reserved reason value of that Err.
    """

    def __repr__(self) -> str:
        return 'Failure'


Failure = FailureType()

type Result[T, E = Any] = Ok[T] | Err[E]


def is_ok(r: object) -> TypeIs[Ok[Any]]:
    """Return True if r is an Ok."""
    return isinstance(r, Ok)


def is_err(r: object) -> TypeIs[Err[Any]]:
    """Return True if r is an Err."""
    return isinstance(r, Err)


def fmap[T, U, E](f: Callable[[T], U], r: Result[T, E]) -> Result[U, E]:
    """Map f over the success value of r.

    The return value of f is wrapped as-is: if f itself returns a Result
    the caller gets a nested Result.

    Args:
        f: One-argument function applied to the Ok value.
        r: The Result to map over.

    Returns:
        Ok(f(value)) for Ok, r unchanged for Err (f is not called).

    Examples:
        >>> fmap(lambda x: x + 1, Ok(1))
        Ok(value=2)
        >>> fmap(lambda x: x + 1, Err('reason'))
        Err(error='reason')
    """
    match r:
        case Ok(value):
            return Ok(f(value))
        case Err():
            return r
    raise TypeError(f'fmap expects Ok or Err, got {type(r).__name__}')


def to_bool(r: Result[Any, Any]) -> bool:
    """Return True for Ok and False for Err.

    Raises:
        TypeError: If r is not a Result.
    """
    if isinstance(r, Ok):
        return True
    if isinstance(r, Err):
        return False
    raise TypeError(f'to_bool expects Ok or Err, got {type(r).__name__}')
