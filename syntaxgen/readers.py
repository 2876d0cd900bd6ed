"""Streams of input items with head, cursor and tail pointers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Reader(ABC, Generic[T]):
    """Access to a sequence of items through three pointers: head, cursor, tail.

    All three start at the beginning of the sequence.
    """

    @abstractmethod
    def read_next(self) -> Optional[T]:
        """Return the item at the cursor and advance it, or None when exhausted."""

    @abstractmethod
    def set_head(self) -> None:
        """Move the head to the cursor."""

    @abstractmethod
    def set_tail(self) -> None:
        """Move the tail to the cursor."""

    @abstractmethod
    def move_cursor_to_tail(self) -> None:
        """Move the cursor to the tail."""

    @abstractmethod
    def get_sequence(self) -> Iterator[T]:
        """Yield the items from the head (inclusive) to the tail (exclusive)."""

    def restart_from_tail(self) -> None:
        """Move the cursor and the head to the tail."""
        self.move_cursor_to_tail()
        self.set_head()
        self.set_tail()


class AddressSpace(ABC, Generic[T]):
    """A sequence of items addressed from 0."""

    @abstractmethod
    def read_at(self, address: int) -> Optional[T]:
        """Return the item at ``address``, or None if there is none."""


class AddressBasedReader(Reader[T]):
    """A reader over the items of an address space."""

    def __init__(self, address_space: AddressSpace[T]) -> None:
        self._address_space = address_space
        self._head = 0
        self._tail = 0
        self._cursor = 0

    def read_next(self) -> Optional[T]:
        item = self._address_space.read_at(self._cursor)
        if item is None:
            return None
        self._cursor += 1
        return item

    def set_head(self) -> None:
        self._head = self._cursor

    def set_tail(self) -> None:
        self._tail = self._cursor

    def move_cursor_to_tail(self) -> None:
        self._cursor = self._tail

    def get_sequence(self) -> Iterator[T]:
        for address in range(self._head, self._tail):
            item = self._address_space.read_at(address)
            if item is None:
                raise LookupError(
                    f"no item at address {address} between head and tail"
                )
            yield item


class ByteArrayAddressSpace(AddressSpace[int]):
    """The bytes of an in-memory buffer, addressed by offset."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    def read_at(self, address: int) -> Optional[int]:
        if 0 <= address < len(self._data):
            return self._data[address]
        return None


class ByteArrayReader(AddressBasedReader[int]):
    """A reader over an in-memory sequence of bytes."""

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(ByteArrayAddressSpace(data))

    @classmethod
    def from_string(cls, data: str) -> ByteArrayReader:
        """Create a reader over the UTF-8 bytes of ``data``."""
        return cls(data.encode("utf-8"))

    @classmethod
    def from_bytes(cls, data: bytes) -> ByteArrayReader:
        """Create a reader over ``data``."""
        return cls(data)