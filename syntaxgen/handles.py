"""Lightweight handles that identify objects by serial number."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


@dataclass(frozen=True, order=True)
class Handle:
    """An identifier for an object, defined by its non-negative serial number."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"handle index must be non-negative, got {self.index}")

    @classmethod
    def mock(cls, existing_handles: Iterable[Handle]) -> Handle:
        """Return the lowest-numbered handle not among ``existing_handles``."""
        taken = {int(handle) for handle in existing_handles}
        index = 0
        while index in taken:
            index += 1
        return cls(index)

    def __int__(self) -> int:
        return self.index

    def __index__(self) -> int:
        return self.index

    def __repr__(self) -> str:
        return f"Handle({self.index})"


class AutomaticallyHandled:
    """Mixin for types whose instances carry their own serial number.

    Enum members get their declaration position as serial by default; other
    types must override :meth:`serial`.
    """

    __slots__ = ()

    def serial(self) -> int:
        """Return the serial number identifying this instance."""
        if isinstance(self, Enum):
            return list(type(self)).index(self)
        raise TypeError(
            f"{type(self).__name__} is not an enum and must define serial()"
        )

    def handle(self) -> Handle:
        """Return the handle identifying this instance."""
        return Handle(self.serial())