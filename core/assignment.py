# core/assignment.py
# This file is part of Veritas - A Propositional Truth Table Generator
#
# Immutable variable assignments for truth table rows

from __future__ import annotations
from collections.abc import Mapping
from typing import Iterable, Iterator, Sequence, Tuple

from logic.node import format_bool


class Assignment(Mapping):
    """Ordered, read-only mapping from variable name to truth value.

    One assignment is built for every truth table row and handed to the
    evaluator as its context. Iteration follows the variable order the
    assignment was built with, which is also the order used when rendering it.
    """

    __slots__ = ("_items", "_values")

    def __init__(self, items: Iterable[Tuple[str, bool]] = ()):
        self._items = tuple((name, bool(value)) for name, value in items)
        self._values = dict(self._items)
        if len(self._values) != len(self._items):
            raise ValueError(f"Duplicate variable in assignment: {self._items}")

    @classmethod
    def from_counter(cls, variables: Sequence[str], counter: int) -> Assignment:
        """Build the assignment encoded by a row counter.

        Bit ``k`` of ``counter`` (least significant first) gives the value of
        ``variables[k]``.

        Args:
            variables: Ordered variable names
            counter: Row number in ``0 .. 2**len(variables) - 1``

        Returns:
            Assignment for that row
        """
        return cls(
            (name, (counter >> bit) & 1 == 1) for bit, name in enumerate(variables)
        )

    def __getitem__(self, name: str) -> bool:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(frozenset(self._items))

    def __repr__(self) -> str:
        return f"Assignment({dict(self._items)!r})"

    def __str__(self) -> str:
        return " ".join(f"{name}={format_bool(value)}" for name, value in self._items)
