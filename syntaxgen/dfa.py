"""Deterministic finite automata over handled symbols."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from .handle_collections import HandledVec, HandleMap
from .handles import Handle

L = TypeVar("L")


@dataclass
class _DfaState(Generic[L]):
    transitions: HandleMap[Handle] = field(default_factory=HandleMap)
    label: Optional[L] = None


class Dfa(Generic[L]):
    """A deterministic automaton whose states may carry labels.

    States and symbols are identified by handles. A state with no label is
    non-accepting; a state may lack a transition for some symbol, in which
    case that route is dead.
    """

    def __init__(self) -> None:
        self._states: HandledVec[_DfaState[L]] = HandledVec()
        self.initial_state: Optional[Handle] = None

    def new_state(self) -> Handle:
        """Add a fresh unlabeled state with no transitions and return its handle."""
        return self._states.insert(_DfaState())

    def list_states(self) -> Iterator[Handle]:
        """Yield the handles of all states, in creation order."""
        return self._states.list_handles()

    def list_symbols(self) -> list[Handle]:
        """Return every symbol used by some transition, in ascending order."""
        symbols: set[Handle] = set()
        for state in self._states:
            symbols.update(state.transitions.keys())
        return sorted(symbols)

    def set_initial_state(self, state: Handle) -> None:
        """Make ``state`` the state scanning starts from."""
        self.initial_state = state

    def link(self, src: Handle, dst: Handle, symbol: Handle) -> None:
        """Add (or replace) the transition from ``src`` to ``dst`` on ``symbol``."""
        self._states[src].transitions.insert(symbol, dst)

    def label(self, state: Handle, label: Optional[L]) -> None:
        """Set the label of ``state``; None removes it."""
        self._states[state].label = label

    def get_label(self, state: Handle) -> Optional[L]:
        """Return the label of ``state``, or None if it has none."""
        return self._states[state].label

    def transitions(self, state: Handle) -> dict[Handle, Handle]:
        """Return the transitions leaving ``state`` as a symbol-to-target mapping."""
        return dict(self._states[state].transitions.items())

    def step(self, src: Handle, symbol: Handle) -> Optional[Handle]:
        """Return the state reached from ``src`` on ``symbol``, or None."""
        return self._states[src].transitions.get(symbol)

    def scan(self, stream: Iterable[Handle]) -> Optional[Handle]:
        """Run the automaton over ``stream`` from the initial state.

        Returns the state reached, or None if no initial state is set or the
        input falls off a missing transition.
        """
        state = self.initial_state
        for symbol in stream:
            if state is None:
                return None
            state = self.step(state, symbol)
        return state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dfa):
            return NotImplemented
        return (
            self.initial_state == other.initial_state
            and self._states == other._states
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        states: list[Any] = [
            (int(handle), self.get_label(handle), self.transitions(handle))
            for handle in self.list_states()
        ]
        return f"Dfa(initial_state={self.initial_state!r}, states={states!r})"