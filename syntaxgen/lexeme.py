"""Lexemes and the descriptors of lexeme types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .regex import Regex

T = TypeVar("T")


@dataclass(frozen=True)
class LexemeDescriptor(Generic[T]):
    """A category of lexemes, with the pattern its lexemes match."""

    lexeme_type: T
    pattern: Regex

    @classmethod
    def keyword(cls, lexeme_type: T, name: str) -> LexemeDescriptor[T]:
        """Describe a lexeme type that matches exactly the string ``name``."""
        return cls(lexeme_type, Regex.constant_string(name))

    @classmethod
    def special_char(cls, lexeme_type: T, value: str) -> LexemeDescriptor[T]:
        """Describe a lexeme type that matches exactly the character ``value``."""
        return cls(lexeme_type, Regex.single_char(value))


@dataclass(frozen=True)
class Lexeme(Generic[T]):
    """A piece of input text, classified by its lexeme type."""

    lexeme_type: T
    contents: str