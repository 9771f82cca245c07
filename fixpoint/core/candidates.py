"""Small-set abstraction over the digits 1-9 of a Sudoku cell."""

from __future__ import annotations
import operator
from typing import Iterable, Iterator

DIGITS = range(1, 10)
FULL_MASK = 0b111111111


def _bit(value: int) -> int:
    value = operator.index(value)
    if value < 1 or value > 9:
        raise ValueError(f"Digit must be 1-9, got {value}")
    return 1 << (value - 1)


class CandidateSet:
    """
    The digits still possible for an unresolved cell.

    Backed by a 9-bit mask where bit ``d - 1`` stands for digit ``d``.
    Iteration yields members in ascending numeric order.
    """

    __slots__ = ("mask",)

    def __init__(self, mask: int = 0):
        if mask < 0 or mask > FULL_MASK:
            raise ValueError(f"Mask must fit in 9 bits, got {mask}")
        self.mask = int(mask)

    @classmethod
    def full(cls) -> CandidateSet:
        """Set containing all of 1-9, used for every blank input cell."""
        return cls(FULL_MASK)

    @classmethod
    def empty(cls) -> CandidateSet:
        return cls(0)

    @classmethod
    def of(cls, values: Iterable[int]) -> CandidateSet:
        s = cls.empty()
        for v in values:
            s.add(v)
        return s

    def contains(self, value: int) -> bool:
        return bool(self.mask & _bit(value))

    def add(self, value: int) -> None:
        self.mask |= _bit(value)

    def remove(self, value: int) -> None:
        """Remove a digit. Removing an absent digit is a no-op."""
        self.mask &= ~_bit(value)

    def difference_update(self, other: CandidateSet) -> None:
        """Remove every digit held by ``other``."""
        self.mask &= ~other.mask

    def count(self) -> int:
        return bin(self.mask).count("1")

    def is_empty(self) -> bool:
        return self.mask == 0

    def sole_member(self) -> int:
        """
        Return the single remaining digit.

        Raises:
            ValueError: If the set does not hold exactly one digit.
        """
        if self.count() != 1:
            raise ValueError(f"sole_member() needs exactly one candidate, have {list(self)}")
        return self.mask.bit_length()

    def issubset(self, other: CandidateSet) -> bool:
        return self.mask & ~other.mask == 0

    def copy(self) -> CandidateSet:
        return CandidateSet(self.mask)

    def __contains__(self, value: object) -> bool:
        try:
            value = operator.index(value)
        except TypeError:
            return False
        return 1 <= value <= 9 and self.contains(value)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[int]:
        for v in DIGITS:
            if self.mask & (1 << (v - 1)):
                yield v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self.mask == other.mask

    def __hash__(self) -> int:
        return hash(self.mask)

    def __repr__(self) -> str:
        return f"CandidateSet({list(self)})"
