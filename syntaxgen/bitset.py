"""A compact set of handles backed by a bit mask."""

from __future__ import annotations

from typing import Iterable, Iterator

from .handles import Handle


class HandleBitSet:
    """A set of handles stored as the bits of an integer.

    Bit ``i`` is set when ``Handle(i)`` is in the set. Equality and hashing
    depend only on which handles are present.
    """

    __slots__ = ("_bits",)

    def __init__(self, handles: Iterable[Handle] = ()) -> None:
        self._bits = 0
        self.extend(handles)

    def insert(self, handle: Handle) -> bool:
        """Add ``handle``; return True if it was not already in the set."""
        mask = 1 << int(handle)
        if self._bits & mask:
            return False
        self._bits |= mask
        return True

    def extend(self, handles: Iterable[Handle]) -> None:
        """Add every handle in ``handles``."""
        for handle in handles:
            self.insert(handle)

    def union(self, other: HandleBitSet) -> HandleBitSet:
        """Return a new set holding the handles of both sets."""
        result = HandleBitSet()
        result._bits = self._bits | other._bits
        return result

    def is_empty(self) -> bool:
        """Return True if the set holds no handles."""
        return self._bits == 0

    def copy(self) -> HandleBitSet:
        """Return an independent copy of the set."""
        result = HandleBitSet()
        result._bits = self._bits
        return result

    def __contains__(self, handle: object) -> bool:
        if not isinstance(handle, Handle):
            return False
        return bool(self._bits >> int(handle) & 1)

    def __iter__(self) -> Iterator[Handle]:
        bits = self._bits
        index = 0
        while bits:
            if bits & 1:
                yield Handle(index)
            bits >>= 1
            index += 1

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandleBitSet):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"HandleBitSet({list(self)!r})"