"""Propagate exception: the throw-as-error escape caught by lift()."""

from typing import Any


class Propagate(BaseException):  # noqa: N818
    """Exception raised to short-circuit an Err up to the nearest lift().

    Raised by ``unlift`` and ``Err.bail()``. The enclosing ``lift`` catches it
    and returns the carried Err instead of wrapping the exception itself.
    The name intentionally doesn't end with "Error": it is control flow,
    not an error. Like ``GeneratorExit`` it derives from BaseException, so
    ``except Exception`` blocks between an unlift and its lift let it pass.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        """Initialize Propagate with the failure to carry.

        Args:
            value: The Err (or bare failure reason) being propagated.
        """
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The failure being propagated."""
        return self._value
