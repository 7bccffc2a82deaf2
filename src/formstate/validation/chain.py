"""Ordered validation chains.

A ``Validation`` is an append-only list of validators. ``validate()``
runs them in attachment order and returns the first error; validators
after a failing one are never called::

    chain = Validation[int]().push(rules.not_null()).push(rules.min_number(0))
    chain.validate(None)   # -> IS_NOT_NULL, min rule not evaluated
"""

from collections.abc import Callable, Iterator
from typing import Self

from formstate.validation.errors import ValidationError

# A validator receives the (already cast) value and returns an error or None
type Validator[T] = Callable[[T | None], ValidationError | None]


class Validation[T]:
    """Append-only, short-circuiting sequence of validators."""

    __slots__ = ("_chain",)

    def __init__(self) -> None:
        self._chain: list[Validator[T]] = []

    def push(self, validator: Validator[T]) -> Self:
        """Append *validator* and return the chain for fluent use."""
        self._chain.append(validator)
        return self

    def validate(self, value: T | None) -> ValidationError | None:
        for validator in self._chain:
            error = validator(value)
            if error is not None:
                return error
        return None

    def __iter__(self) -> Iterator[Validator[T]]:
        return iter(tuple(self._chain))

    def __len__(self) -> int:
        return len(self._chain)

    def __repr__(self) -> str:
        return f"Validation({len(self._chain)} validators)"
