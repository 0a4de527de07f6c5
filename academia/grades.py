"""A single term grade."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Grade:
    """The score obtained in one term (bimestre)."""

    term: int = 0
    value: float = 0.0

    def __add__(self, other: Grade) -> Grade:
        """Sum the values, keeping the term of the left operand."""
        if not isinstance(other, Grade):
            return NotImplemented
        return Grade(self.term, self.value + other.value)

    def __lt__(self, other: Grade) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.value < other.value

    def __gt__(self, other: Grade) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.value > other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return self.term == other.term and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"B{self.term}:{self.value:.1f}"