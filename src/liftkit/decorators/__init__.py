"""Decorators: @lifted and @unlifted."""

from liftkit.decorators.lifted import lifted, unlifted

__all__ = [
    'lifted',
    'unlifted',
]
