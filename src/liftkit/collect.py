"""Aggregation: combine many Results (or many fallible calls) into one.

Every traversal here stops at the first failure: later elements, thunks and
folding steps are never evaluated.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, overload

from liftkit._internal.arity import accepts
from liftkit.boundary import is_thunk, lift, unlift
from liftkit.errors import ArityError, PreconditionError
from liftkit.result import Err, Failure, FailureType, Ok, Result, fmap

__all__ = ['liftm', 'liftn', 'map', 'reduce', 'sequence']

_NO_SEED = object()


def _evaluate(element: Any) -> Result[Any, Any]:
    if isinstance(element, Ok | Err):
        return element
    if isinstance(element, FailureType):
        return Err(Failure)
    if is_thunk(element):
        return lift(element)
    raise TypeError(f'sequence expects Results or thunks, got {type(element).__name__}')


def _sequence_values(elements: Iterable[Any]) -> Result[list[Any], Any]:
    values: list[Any] = []
    for element in elements:
        match _evaluate(element):
            case Ok(value):
                values.append(value)
            case err:
                return err
    return Ok(values)


@overload
def sequence[K](maybes: Mapping[K, Any]) -> Result[dict[K, Any], Any]: ...


@overload
def sequence(maybes: Iterable[Any]) -> Result[list[Any], Any]: ...


def sequence(maybes: Mapping[Any, Any] | Iterable[Any]) -> Result[Any, Any]:
    """Turn a collection of Results into a Result of the collection.

    Elements are Results or thunks producing them. They are evaluated in
    order; a thunk is evaluated through lift(), so it may also return a
    bare value or raise. The first Err is returned as-is and nothing after
    it is evaluated.

    For a mapping, the values are sequenced in iteration order and zipped
    back onto their keys.

    Args:
        maybes: An iterable or a mapping of Results / thunks.

    Returns:
        Ok(list) or Ok(dict) of the success values, or the first Err.

    Raises:
        TypeError: If an element is neither a Result nor a thunk.

    Examples:
        >>> sequence([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> sequence([Ok(1), Err('foo'), Err('bar')])
        Err(error='foo')
        >>> sequence({'a': Ok(1), 'b': Ok(2)})
        Ok(value={'a': 1, 'b': 2})
    """
    if isinstance(maybes, Mapping):
        keys = list(maybes.keys())
        return fmap(
            lambda values: dict(zip(keys, values, strict=True)),
            _sequence_values(maybes.values()),
        )
    return _sequence_values(maybes)


def map[T](f: Callable[[T], Any], xs: Iterable[T]) -> Result[list[Any], Any]:  # noqa: A001
    """Map f over xs inside the Result context.

    f may return bare values or Results, or raise. Elements are processed
    left to right and the first failure aborts the traversal, so f is never
    called on the elements after it.

    Examples:
        >>> map(lambda x: x + 1, [0, 1])
        Ok(value=[1, 2])
        >>> map(lambda x: Ok(x + 1), [0, 1])
        Ok(value=[1, 2])
    """
    return lift(lambda: [unlift(f, x) for x in xs])


@overload
def reduce[T, A](f: Callable[[T, A], Any], xs: Sequence[T], /) -> Result[Any, Any]: ...


@overload
def reduce[T, A](f: Callable[[T, A], Any], acc0: A, xs: Iterable[T], /) -> Result[Any, Any]: ...


def reduce(f: Callable[[Any, Any], Any], *args: Any) -> Result[Any, Any]:  # noqa: A001
    """Left-fold xs with f inside the Result context.

    ``reduce(f, xs)`` seeds the fold with the first element of xs;
    ``reduce(f, acc0, xs)`` seeds it with acc0. Each step calls
    ``f(element, accumulator)``; the first failing step aborts the fold.

    Raises:
        PreconditionError: If xs is empty in the two-argument form.
        TypeError: If called with anything but one or two trailing arguments.

    Examples:
        >>> reduce(lambda x, acc: x + acc, [0, 1])
        Ok(value=1)
        >>> reduce(lambda x, acc: x + acc, 10, [1, 2])
        Ok(value=13)
    """
    match args:
        case (xs,):
            result = lift(_fold_seedless, f, xs)
            if isinstance(result, Ok) and result.value is _NO_SEED:
                msg = 'reduce() of empty sequence with no initial value'
                raise PreconditionError(msg)
            return result
        case (acc0, xs):
            return lift(_fold, f, acc0, xs)
        case _:
            msg = f'reduce() takes 2 or 3 arguments ({len(args) + 1} given)'
            raise TypeError(msg)


def _fold(f: Callable[[Any, Any], Any], acc0: Any, xs: Iterable[Any]) -> Any:
    return functools.reduce(lambda acc, x: unlift(f, x, acc), xs, acc0)


def _fold_seedless(f: Callable[[Any, Any], Any], xs: Iterable[Any]) -> Any:
    # Seeding happens inside lift() so a failing iterable becomes an Err.
    items = iter(xs)
    acc0 = next(items, _NO_SEED)
    if acc0 is _NO_SEED:
        return _NO_SEED
    return _fold(f, acc0, items)


def liftm(f: Callable[..., Any], maybes: Sequence[Any]) -> Result[Any, Any]:
    """Apply f to the success values of maybes.

    Equivalent to ``fmap(lambda values: f(*values), sequence(maybes))``:
    the first Err among maybes is returned untouched and f is not called.

    Args:
        f: Function taking exactly len(maybes) positional arguments.
        maybes: Results or thunks producing them.

    Raises:
        ArityError: If f cannot take len(maybes) positional arguments.

    Examples:
        >>> liftm(lambda a, b, c: a + b + c, [Ok(1), Ok(2), Ok(3)])
        Ok(value=6)
    """
    maybes = list(maybes)
    if not accepts(f, len(maybes)):
        raise ArityError(f, f'{len(maybes)} positional arguments')
    return fmap(lambda values: f(*values), sequence(maybes))


def liftn(f: Callable[..., Any], /, *maybes: Any) -> Result[Any, Any]:
    """Variadic liftm: ``liftn(f, a, b)`` is ``liftm(f, [a, b])``."""
    return liftm(f, maybes)
