"""Regular-expression patterns over raw bytes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .handles import Handle
from .nfa import Nfa

_WHITE_SPACE_CHARACTERS = (" ", "\t", "\n", "\r", "\x0b", "\x0c")


class Regex:
    """A regular-expression pattern over bytes, built with the factory methods."""

    __slots__ = ()

    @classmethod
    def single_char(cls, value: str) -> Regex:
        """Match only ``value``, a character that fits in a single byte.

        Raises ValueError if ``value`` is not one character in that range.
        """
        if not isinstance(value, str) or len(value) != 1 or ord(value) > 0xFF:
            raise ValueError(
                f"Cannot create a single-character regex from {value!r}, "
                "as it's not 1-byte long"
            )
        return SingleCharacter(ord(value))

    @classmethod
    def union(cls, options: Iterable[Regex]) -> Regex:
        """Match any one of ``options``."""
        return Union(tuple(options))

    @classmethod
    def concat(cls, parts: Iterable[Regex]) -> Regex:
        """Match ``parts`` one after the other."""
        return Concat(tuple(parts))

    @classmethod
    def star_from(cls, repeated_pattern: Regex) -> Regex:
        """Match zero or more repetitions of ``repeated_pattern``."""
        return Star(repeated_pattern)

    @classmethod
    def plus_from(cls, repeated_pattern: Regex) -> Regex:
        """Match one or more repetitions of ``repeated_pattern``."""
        return cls.concat([repeated_pattern, cls.star_from(repeated_pattern)])

    @classmethod
    def white_space(cls) -> Regex:
        """Match a single white-space character."""
        return cls.union(cls.single_char(char) for char in _WHITE_SPACE_CHARACTERS)

    @classmethod
    def constant_string(cls, string: str) -> Regex:
        """Match exactly ``string``."""
        return cls.concat(cls.single_char(char) for char in string)

    @classmethod
    def character_range(cls, start: str, end: str) -> Regex:
        """Match any single character from ``start`` to ``end``, inclusive."""
        return cls.union(
            cls.single_char(chr(code)) for code in range(ord(start), ord(end) + 1)
        )

    @classmethod
    def optional(cls, option: Regex) -> Regex:
        """Match ``option`` or the empty sequence."""
        return cls.union([option, cls.epsilon()])

    @classmethod
    def epsilon(cls) -> Regex:
        """Match only the empty sequence."""
        return cls.concat([])

    def build_into_nfa(self, nfa: Nfa) -> tuple[Handle, Handle]:
        """Add states recognizing this pattern to ``nfa``; return (start, end)."""
        raise NotImplementedError


@dataclass(frozen=True)
class SingleCharacter(Regex):
    """Matches a single fixed byte."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"byte value out of range: {self.value}")

    def build_into_nfa(self, nfa: Nfa) -> tuple[Handle, Handle]:
        start, end = nfa.new_state(), nfa.new_state()
        nfa.link(start, end, Handle(self.value))
        return start, end


@dataclass(frozen=True)
class Union(Regex):
    """Matches any one of its options."""

    options: tuple[Regex, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", tuple(self.options))

    def build_into_nfa(self, nfa: Nfa) -> tuple[Handle, Handle]:
        start, end = nfa.new_state(), nfa.new_state()
        for option in self.options:
            option_start, option_end = option.build_into_nfa(nfa)
            nfa.link(start, option_start, None)
            nfa.link(option_end, end, None)
        return start, end


@dataclass(frozen=True)
class Concat(Regex):
    """Matches its parts in sequence."""

    parts: tuple[Regex, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))

    def build_into_nfa(self, nfa: Nfa) -> tuple[Handle, Handle]:
        start, end = nfa.new_state(), nfa.new_state()
        current = start
        for part in self.parts:
            part_start, part_end = part.build_into_nfa(nfa)
            nfa.link(current, part_start, None)
            current = part_end
        nfa.link(current, end, None)
        return start, end


@dataclass(frozen=True)
class Star(Regex):
    """Matches zero or more repetitions of a pattern."""

    repeated_pattern: Regex

    def build_into_nfa(self, nfa: Nfa) -> tuple[Handle, Handle]:
        start, end = nfa.new_state(), nfa.new_state()
        inner_start, inner_end = self.repeated_pattern.build_into_nfa(nfa)
        nfa.link(start, inner_start, None)
        nfa.link(start, end, None)
        nfa.link(inner_end, end, None)
        nfa.link(inner_end, inner_start, None)
        return start, end