"""Nondeterministic finite automata and their compilation into DFAs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

from .bitset import HandleBitSet
from .dfa import Dfa
from .handle_collections import HandledVec
from .handles import Handle

L = TypeVar("L")
D = TypeVar("D")


@dataclass
class _NfaState(Generic[L]):
    epsilon_transitions: set[Handle] = field(default_factory=set)
    symbol_transitions: dict[Handle, set[Handle]] = field(default_factory=dict)
    label: Optional[L] = None


class Nfa(Generic[L]):
    """A nondeterministic automaton with epsilon moves and labeled states."""

    def __init__(self) -> None:
        self._states: HandledVec[_NfaState[L]] = HandledVec()
        self.initial_state: Optional[Handle] = None

    def new_state(self) -> Handle:
        """Add a fresh unlabeled state and return its handle."""
        return self._states.insert(_NfaState())

    def set_initial_state(self, state: Handle) -> None:
        """Make ``state`` the state the automaton starts from."""
        self.initial_state = state

    def link(self, src: Handle, dst: Handle, symbol: Optional[Handle]) -> None:
        """Add a transition from ``src`` to ``dst``; a None symbol means epsilon."""
        state = self._states[src]
        if symbol is None:
            state.epsilon_transitions.add(dst)
        else:
            state.symbol_transitions.setdefault(symbol, set()).add(dst)

    def label(self, state: Handle, label: Optional[L]) -> None:
        """Set the label of ``state``; None removes it."""
        self._states[state].label = label

    def get_label(self, state: Handle) -> Optional[L]:
        """Return the label of ``state``, or None if it has none."""
        return self._states[state].label

    def epsilon_closure(self, states: HandleBitSet) -> HandleBitSet:
        """Return all states reachable from ``states`` by epsilon moves alone."""
        pending = list(states)
        closure = HandleBitSet()
        while pending:
            state = pending.pop()
            if closure.insert(state):
                pending.extend(self._states[state].epsilon_transitions)
        return closure

    def move_by_symbol(self, states: HandleBitSet, symbol: Handle) -> HandleBitSet:
        """Return the states reached from ``states`` by one ``symbol`` move."""
        result = HandleBitSet()
        for state in states:
            destinations = self._states[state].symbol_transitions.get(symbol)
            if destinations:
                result.extend(destinations)
        return result

    def list_symbols(self) -> list[Handle]:
        """Return every symbol used by some transition, in ascending order."""
        symbols: set[Handle] = set()
        for state in self._states:
            symbols.update(state.symbol_transitions)
        return sorted(symbols)

    def compile_to_dfa(
        self, label_reduction: Callable[[list[L]], Optional[D]]
    ) -> Dfa[D]:
        """Build an equivalent DFA by the subset construction.

        Each DFA state stands for a set of NFA states; its label is
        ``label_reduction`` applied to the labels present in that set, in
        ascending state order.

        Raises ValueError if no initial state is set.
        """
        if self.initial_state is None:
            raise ValueError("cannot compile an NFA with no initial state into a DFA")

        dfa: Dfa[D] = Dfa()
        subsets: dict[HandleBitSet, Handle] = {}
        pending: list[tuple[HandleBitSet, Handle]] = []
        symbols = self.list_symbols()

        def install(nfa_states: HandleBitSet) -> Handle:
            dfa_state = dfa.new_state()
            subsets[nfa_states] = dfa_state
            pending.append((nfa_states, dfa_state))
            return dfa_state

        initial = self.epsilon_closure(HandleBitSet([self.initial_state]))
        dfa.set_initial_state(install(initial))

        while pending:
            nfa_states, dfa_state = pending.pop()
            for symbol in symbols:
                target = self.epsilon_closure(self.move_by_symbol(nfa_states, symbol))
                if target.is_empty():
                    continue
                target_state = subsets.get(target)
                if target_state is None:
                    target_state = install(target)
                dfa.link(dfa_state, target_state, symbol)

        for nfa_states, dfa_state in subsets.items():
            labels = [
                label
                for label in (self.get_label(state) for state in nfa_states)
                if label is not None
            ]
            dfa.label(dfa_state, label_reduction(labels))

        return dfa