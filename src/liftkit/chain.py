"""do(): sequential chaining of lifted steps."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import msgspec

from liftkit._internal.arity import accepts, required_positional
from liftkit.boundary import lift
from liftkit.errors import ArityError, PreconditionError
from liftkit.result import Err, Result

__all__ = ['Step', 'do', 'ignore_prev', 'use_prev']


class Step(msgspec.Struct, frozen=True):
    """A chain step tagged with whether it receives the previous value."""

    fn: Callable[..., Any]
    consumes: bool


def ignore_prev(f: Callable[[], Any]) -> Step:
    """Tag f as a step that is called with no arguments."""
    return Step(fn=f, consumes=False)


def use_prev(f: Callable[[Any], Any]) -> Step:
    """Tag f as a step that is called with the previous success value."""
    return Step(fn=f, consumes=True)


def _as_step(f: Step | Callable[..., Any]) -> Step:
    if isinstance(f, Step):
        return f
    required = required_positional(f)
    if required == 0:
        return Step(fn=f, consumes=False)
    if required is None or (required == 1 and accepts(f, 1)):
        return Step(fn=f, consumes=True)
    raise ArityError(f, 'zero or one positional argument')


def do(fs: Sequence[Step | Callable[..., Any]]) -> Result[Any, Any]:
    """Chain fs inside the Result context.

    The first step is called with no arguments. Each later step runs only
    while the chain is Ok: a step taking no arguments is called with none,
    a step taking one argument receives the current success value. Every
    outcome is normalized by lift(), so steps may return bare values or
    Results, or raise. The first Err stops the chain and is returned.

    Use ignore_prev() / use_prev() to pin the calling convention of a step
    instead of relying on its signature.

    Args:
        fs: Non-empty sequence of steps.

    Returns:
        The last accumulated Result.

    Raises:
        PreconditionError: If fs is empty.
        ArityError: If a reached step takes neither zero nor one argument.

    Examples:
        >>> do([lambda: 1, lambda x: x + 1, lambda: 0, lambda x: Ok(x + 41)])
        Ok(value=41)
        >>> do([lambda: Err('no'), lambda x: x + 1])
        Err(error='no')
    """
    if not fs:
        msg = 'do() requires at least one step'
        raise PreconditionError(msg)

    first, *rest = fs
    acc = lift(first.fn if isinstance(first, Step) else first)
    for f in rest:
        if isinstance(acc, Err):
            return acc
        step = _as_step(f)
        acc = lift(step.fn, acc.value) if step.consumes else lift(step.fn)
    return acc
