"""Tests for decorators: @lifted, @unlifted."""

import pytest

from liftkit import (
    Err,
    Failure,
    LiftedException,
    Ok,
    Propagate,
    lift,
    lifted,
    map,  # noqa: A004
    unlifted,
)


class TestLiftedDecorator:
    """Tests for @lifted decorator."""

    def test_lifted_wraps_bare_value(self):
        """@lifted wraps a plain return value in Ok."""

        @lifted
        def add(a: int, b: int) -> int:
            return a + b

        assert add(2, 3) == Ok(5)

    def test_lifted_passes_results_through(self):
        @lifted
        def check(x: int):
            return Ok(x) if x > 0 else Err('non-positive')

        assert check(1) == Ok(1)
        assert check(0) == Err('non-positive')

    def test_lifted_captures_exceptions(self):
        """@lifted catches exceptions and returns Err(LiftedException)."""

        @lifted
        def divide(a: int, b: int) -> float:
            return a / b

        result = divide(10, 0)
        assert isinstance(result.error, LiftedException)
        assert isinstance(result.error.exception, ZeroDivisionError)

    def test_lifted_normalizes_failure(self):
        @lifted
        def nothing():
            return Failure

        assert nothing() == Err(Failure)

    def test_lifted_with_kwargs(self):
        @lifted
        def greet(name: str, greeting: str = 'Hello') -> str:
            return f'{greeting}, {name}!'

        assert greet('World') == Ok('Hello, World!')
        assert greet(name='Python', greeting='Hi') == Ok('Hi, Python!')

    def test_lifted_preserves_function_name(self):
        @lifted
        def my_function():
            pass

        assert my_function.__name__ == 'my_function'

    def test_lifted_method(self):
        class Parser:
            base = 10

            @lifted
            def parse(self, text: str) -> int:
                return int(text, self.base)

        assert Parser().parse('12') == Ok(12)
        assert Parser().parse('xx').is_err()


class TestUnliftedDecorator:
    """Tests for @unlifted decorator."""

    def test_unlifted_unwraps_ok(self):
        @unlifted
        def get() -> Ok[int]:
            return Ok(3)

        assert get() == 3

    def test_unlifted_raises_on_err(self):
        @unlifted
        def get():
            return Err('missing')

        with pytest.raises(Propagate):
            get()

    def test_unlifted_inside_lift(self):
        """@unlifted functions compose inside a lift region."""
        table = {'a': 1}

        @unlifted
        def lookup(key: str):
            return Ok(table[key]) if key in table else Err(key)

        assert lift(lambda: lookup('a') + lookup('a')) == Ok(2)
        assert lift(lambda: lookup('a') + lookup('b')) == Err('b')

    def test_unlifted_with_map(self, calls):
        @unlifted
        def positive(x: int):
            calls.append(x)
            return Ok(x) if x > 0 else Err(x)

        assert map(positive, [1, -1, 2]) == Err(-1)
        assert calls == [1, -1]

    def test_unlifted_preserves_function_name(self):
        @unlifted
        def my_function():
            pass

        assert my_function.__name__ == 'my_function'
