"""Error types: the captured-exception struct and caller contract violations."""

from __future__ import annotations

import traceback

import msgspec

__all__ = [
    'ArityError',
    'LiftedException',
    'PreconditionError',
]


class LiftedException(msgspec.Struct, frozen=True):
    """An unexpected exception captured by lift() - struct variant for Err.

    Attributes:
        kind: Qualified class name of the exception, e.g. 'builtins.KeyError'.
        exception: The raised exception object.
        trace: Formatted traceback, empty when traceback capture is disabled.
    """

    kind: str
    exception: BaseException
    trace: str = ''

    @classmethod
    def capture(cls, exc: BaseException, *, with_trace: bool = True) -> LiftedException:
        """Build a LiftedException from a caught exception."""
        exc_type = type(exc)
        kind = f'{exc_type.__module__}.{exc_type.__qualname__}'
        trace = ''.join(traceback.format_exception(exc)) if with_trace else ''
        return cls(kind=kind, exception=exc, trace=trace)

    def to_exception(self) -> BaseException:
        """Return the original exception for raise-based code."""
        return self.exception


class PreconditionError(ValueError):
    """Input a combinator requires was not provided (e.g. an empty chain)."""


class ArityError(TypeError):
    """A function's arity does not match how a combinator must call it."""

    def __init__(self, func: object, expected: str) -> None:
        self.func = func
        self.expected = expected
        name = getattr(func, '__qualname__', None) or repr(func)
        super().__init__(f'{name} must accept {expected}')
