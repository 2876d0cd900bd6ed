"""Syntax-directed translation driven by an LR parser."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Mapping, Optional, Sequence, TypeVar

from .handle_collections import HandleMap
from .handles import AutomaticallyHandled, Handle
from .lexeme import Lexeme
from .lr_parser import LrParser, LrParserExecution, ReduceDecision

C = TypeVar("C")
S = TypeVar("S")

LeafSatelliteBuilder = Callable[[Any, str], Any]
SatelliteReducer = Callable[[Any, list], Any]


class TranslationError(ValueError):
    """Raised when the lexeme stream is not a sentence of the grammar."""


class SyntaxDirectedTranslator(Generic[C, S]):
    """Translates a stream of lexemes into a value, bottom-up.

    Every shifted lexeme gets a *satellite* value from its leaf builder;
    every reduction by the rule tagged ``Handle(i)`` replaces the satellites
    of the rule's right-hand side with the result of ``satellite_reducers[i]``.
    Both kinds of callback receive the translation context first.
    """

    def __init__(
        self,
        lr_parser: LrParser,
        satellite_reducers: Sequence[Callable[[C, list[S]], S]],
        leaf_satellite_builders: Optional[
            Mapping[AutomaticallyHandled, Callable[[C, str], S]]
        ] = None,
        default_leaf_satellite_builder: Optional[Callable[[C, str], S]] = None,
    ) -> None:
        self._lr_parser = lr_parser
        self._satellite_reducers = list(satellite_reducers)
        self._leaf_builders: HandleMap[Callable[[C, str], S]] = HandleMap(
            (lexeme_type.handle(), builder)
            for lexeme_type, builder in (leaf_satellite_builders or {}).items()
        )
        self._default_leaf_builder = default_leaf_satellite_builder

    def translate(self, context: C, stream: Iterable[Lexeme]) -> S:
        """Translate ``stream`` and return the satellite of the whole input.

        Raises TranslationError on a syntax error, and LookupError when a
        lexeme's type has no leaf builder and no default is set.
        """
        execution = _TranslatorExecution(self, context)
        for lexeme in stream:
            execution.feed(lexeme)
        return execution.finalize()

    def _build_leaf(self, context: C, lexeme: Lexeme) -> tuple[Handle, S]:
        terminal = lexeme.lexeme_type.handle()
        builder = self._leaf_builders.get(terminal, self._default_leaf_builder)
        if builder is None:
            raise LookupError(
                f"no leaf satellite builder for lexeme type {lexeme.lexeme_type!r}, "
                "and no default builder was set"
            )
        return terminal, builder(context, lexeme.contents)

    def _reduce_satellites(self, tag: Handle, context: C, satellites: list[S]) -> S:
        return self._satellite_reducers[int(tag)](context, satellites)


class _TranslatorExecution(Generic[C, S]):
    def __init__(self, translator: SyntaxDirectedTranslator[C, S], context: C) -> None:
        self._translator = translator
        self._context = context
        self._satellites: list[S] = []
        self._execution: LrParserExecution = translator._lr_parser.new_execution()

    def feed(self, lexeme: Lexeme) -> None:
        terminal, satellite = self._translator._build_leaf(self._context, lexeme)
        while True:
            decision = self._execution.decide(terminal)
            if decision is None:
                raise TranslationError(f"unexpected lexeme {lexeme!r}")
            if isinstance(decision, ReduceDecision):
                self._handle_reduce(decision)
            else:
                self._satellites.append(satellite)
                return

    def finalize(self) -> S:
        while True:
            decision = self._execution.decide_final()
            if decision is None:
                raise TranslationError("unexpected end of input")
            if not isinstance(decision, ReduceDecision):
                break
            self._handle_reduce(decision)
        if not self._satellites:
            raise TranslationError("translation produced no satellite")
        return self._satellites.pop()

    def _handle_reduce(self, decision: ReduceDecision) -> None:
        if len(self._satellites) < decision.size:
            raise TranslationError("satellite stack is too short for the rule")
        start = len(self._satellites) - decision.size
        rhs = self._satellites[start:]
        del self._satellites[start:]
        self._satellites.append(
            self._translator._reduce_satellites(decision.tag, self._context, rhs)
        )