"""Signature probing for arity-dispatched combinators."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

__all__ = ['accepts', 'required_positional']


def _signature(f: Callable[..., Any]) -> inspect.Signature | None:
    try:
        return inspect.signature(f)
    except (TypeError, ValueError):
        # Some builtins and C extensions expose no signature.
        return None


def accepts(f: Callable[..., Any], n: int) -> bool:
    """Return True if f can be called with exactly n positional arguments.

    Callables without an introspectable signature are assumed to accept.
    """
    sig = _signature(f)
    if sig is None:
        return True
    try:
        sig.bind(*([None] * n))
    except TypeError:
        return False
    return True


def required_positional(f: Callable[..., Any]) -> int | None:
    """Count the positional parameters of f that have no default.

    Returns None when f has no introspectable signature.
    """
    sig = _signature(f)
    if sig is None:
        return None
    return sum(
        1
        for p in sig.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    )
