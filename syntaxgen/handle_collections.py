"""Collections built around handles."""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterable, Iterator, TypeVar

from .handles import Handle

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)


class HandledVec(Generic[T]):
    """Items stored in insertion order, each identified by a generated handle."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._contents: list[T] = []
        for item in items:
            self.insert(item)

    def insert(self, item: T) -> Handle:
        """Append ``item`` and return its new handle."""
        self._contents.append(item)
        return Handle(len(self._contents) - 1)

    def list_handles(self) -> Iterator[Handle]:
        """Yield the handles of all stored items, in insertion order."""
        return (Handle(index) for index in range(len(self._contents)))

    def __getitem__(self, handle: Handle) -> T:
        return self._contents[int(handle)]

    def __setitem__(self, handle: Handle, item: T) -> None:
        self._contents[int(handle)] = item

    def __iter__(self) -> Iterator[T]:
        return iter(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandledVec):
            return NotImplemented
        return self._contents == other._contents

    def __repr__(self) -> str:
        return f"HandledVec({self._contents!r})"


class HandleMap(Generic[U]):
    """A mapping keyed by handles, iterated in handle order."""

    def __init__(self, items: Iterable[tuple[Handle, U]] = ()) -> None:
        self._contents: dict[int, U] = {}
        for key, item in items:
            self.insert(key, item)

    def insert(self, key: Handle, item: U) -> bool:
        """Map ``key`` to ``item``; return True if the key was not present before."""
        index = int(key)
        is_new = index not in self._contents
        self._contents[index] = item
        return is_new

    def get(self, key: Handle, default: Any = None) -> Any:
        """Return the value mapped to ``key``, or ``default`` if absent."""
        return self._contents.get(int(key), default)

    def __getitem__(self, key: Handle) -> U:
        try:
            return self._contents[int(key)]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, Handle) and int(key) in self._contents

    def __iter__(self) -> Iterator[Handle]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._contents)

    def keys(self) -> Iterator[Handle]:
        """Yield the present keys in ascending handle order."""
        return (Handle(index) for index in sorted(self._contents))

    def items(self) -> Iterator[tuple[Handle, U]]:
        """Yield ``(key, value)`` pairs in ascending handle order."""
        return (
            (Handle(index), self._contents[index]) for index in sorted(self._contents)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandleMap):
            return NotImplemented
        return self._contents == other._contents

    def __repr__(self) -> str:
        return f"HandleMap({list(self.items())!r})"


class HandledHashMap(Generic[K]):
    """Distinct hashable items, each given a handle in order of first insertion."""

    def __init__(self, items: Iterable[K] = ()) -> None:
        self._contents: dict[K, Handle] = {}
        for item in items:
            self.insert(item)

    def insert(self, item: K) -> Handle:
        """Add ``item`` if new, and return its handle."""
        handle = self._contents.get(item)
        if handle is None:
            handle = Handle(len(self._contents))
            self._contents[item] = handle
        return handle

    def get_handle(self, item: K) -> Handle | None:
        """Return the handle of ``item``, or None if it is not present."""
        return self._contents.get(item)

    def __contains__(self, item: object) -> bool:
        return item in self._contents

    def __getitem__(self, item: K) -> Handle:
        try:
            return self._contents[item]
        except KeyError:
            raise KeyError(f"no handle is associated with {item!r}") from None

    def __len__(self) -> int:
        return len(self._contents)

    def __repr__(self) -> str:
        return f"HandledHashMap({self._contents!r})"