"""Lexical analyzers compiled from lexeme descriptors."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, Optional, TypeVar

from .dfa import Dfa
from .handles import Handle
from .lexeme import Lexeme, LexemeDescriptor
from .minimize import minimize
from .nfa import Nfa
from .readers import Reader

T = TypeVar("T", bound=Hashable)


class LexicalError(ValueError):
    """Raised when no lexeme type matches a prefix of the remaining input."""


class LexicalAnalyzer(Generic[T]):
    """Splits a stream of bytes into lexemes.

    Longer lexemes win; among lexeme types matching a lexeme of the same
    length, the one whose descriptor came first wins. Lexeme types must be
    hashable and must not be None.
    """

    def __init__(self, lexeme_descriptors: Iterable[LexemeDescriptor[T]]) -> None:
        nfa: Nfa[T] = Nfa()
        global_start = nfa.new_state()
        nfa.set_initial_state(global_start)

        priorities: dict[T, int] = {}
        for priority, descriptor in enumerate(lexeme_descriptors):
            if descriptor.lexeme_type is None:
                raise ValueError("a lexeme type cannot be None")
            start, end = descriptor.pattern.build_into_nfa(nfa)
            nfa.link(global_start, start, None)
            nfa.label(end, descriptor.lexeme_type)
            priorities[descriptor.lexeme_type] = priority

        dfa = minimize(
            nfa.compile_to_dfa(
                lambda labels: min(labels, key=priorities.__getitem__, default=None)
            )
        )

        initial = dfa.initial_state
        if initial is None:
            raise ValueError("minimized DFA has no initial state")
        if dfa.get_label(initial) is not None:
            raise ValueError(
                "some lexeme type is associated with a pattern accepting the empty "
                "string, which would make the analyzer stall on exhausted input"
            )
        self._dfa: Dfa[T] = dfa

    def analyze(self, reader: Reader[int]) -> Iterator[Lexeme[T]]:
        """Yield the lexemes read from ``reader``.

        Raises LexicalError, while iterating, when the remaining input has no
        prefix matching any known lexeme type.
        """
        while True:
            lexeme = self._collect_next_lexeme(reader)
            if lexeme is None:
                return
            yield lexeme

    def _identify_next_lexeme(self, reader: Reader[int]) -> Optional[T]:
        """Return the type of the longest next lexeme, or None on exhausted input."""
        recent_type: Optional[T] = None
        state = self._dfa.initial_state
        read_anything = False

        while state is not None:
            label = self._dfa.get_label(state)
            if label is not None:
                recent_type = label
                reader.set_tail()
            byte = reader.read_next()
            if byte is None:
                break
            state = self._dfa.step(state, Handle(byte))
            read_anything = True

        if not read_anything:
            return None
        if recent_type is None:
            raise LexicalError(
                "input has no prefix matching any known lexeme type"
            )
        return recent_type

    def _collect_next_lexeme(self, reader: Reader[int]) -> Optional[Lexeme[T]]:
        lexeme_type = self._identify_next_lexeme(reader)
        if lexeme_type is None:
            return None
        contents = bytes(reader.get_sequence()).decode("utf-8")
        reader.restart_from_tail()
        return Lexeme(lexeme_type, contents)