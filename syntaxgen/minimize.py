"""Minimization of deterministic finite automata."""

from __future__ import annotations

from typing import Hashable, Optional, TypeVar

from .dfa import Dfa
from .handles import Handle

L = TypeVar("L", bound=Hashable)


def _completed_copy(dfa: Dfa[L]) -> Dfa[L]:
    """Copy ``dfa`` and route every missing transition to a new dead state."""
    copy: Dfa[L] = Dfa()
    states = list(dfa.list_states())
    for state in states:
        copy.label(copy.new_state(), dfa.get_label(state))
    for state in states:
        for symbol, target in dfa.transitions(state).items():
            copy.link(state, target, symbol)
    if dfa.initial_state is not None:
        copy.set_initial_state(dfa.initial_state)

    symbols = copy.list_symbols()
    dead_state = copy.new_state()
    for symbol in symbols:
        copy.link(dead_state, dead_state, symbol)
        for state in copy.list_states():
            if copy.step(state, symbol) is None:
                copy.link(state, dead_state, symbol)
    return copy


def _locate_dead_state(dfa: Dfa[L]) -> Optional[Handle]:
    """Return the first unlabeled state whose transitions all loop back to itself."""
    return next(
        (
            state
            for state in dfa.list_states()
            if dfa.get_label(state) is None
            and all(target == state for target in dfa.transitions(state).values())
        ),
        None,
    )


def _reduce_by_dead_state(dfa: Dfa[L]) -> Dfa[L]:
    """Return a copy of ``dfa`` without its dead state and the transitions into it."""
    dead_state = _locate_dead_state(dfa)
    reduced: Dfa[L] = Dfa()
    states_map: dict[Handle, Handle] = {}

    for state in dfa.list_states():
        if state != dead_state:
            new_state = reduced.new_state()
            states_map[state] = new_state
            reduced.label(new_state, dfa.get_label(state))

    if dfa.initial_state is not None:
        if dfa.initial_state not in states_map:
            raise ValueError(
                "DFA cannot be reduced from its dead state if it's the initial state"
            )
        reduced.set_initial_state(states_map[dfa.initial_state])

    symbols = dfa.list_symbols()
    for origin_src, src in states_map.items():
        for symbol in symbols:
            origin_target = dfa.step(origin_src, symbol)
            if origin_target is not None and origin_target != dead_state:
                reduced.link(src, states_map[origin_target], symbol)
    return reduced


class _Minimizer:
    """Partition refinement over the states of a completed DFA."""

    def __init__(self, dfa: Dfa[L]) -> None:
        self.dfa = _completed_copy(dfa)
        self.symbols = self.dfa.list_symbols()
        self.sets: list[list[Handle]] = []
        self.membership: dict[Handle, int] = {}

        by_label: dict[object, int] = {}
        for state in self.dfa.list_states():
            label = self.dfa.get_label(state)
            index = by_label.get(label)
            if index is None:
                index = len(self.sets)
                self.sets.append([])
                by_label[label] = index
            self.sets[index].append(state)
            self.membership[state] = index

    def run(self) -> Dfa[L]:
        while True:
            round_size = len(self.sets)
            splits = [self._split(index) for index in range(round_size)]
            if not any(splits):
                break
        return self._finalize()

    def _split(self, index: int) -> bool:
        first, *rest = self.sets[index]
        self.sets[index] = [first]
        subsets = [index]

        for state in rest:
            for subset in subsets:
                if self._equivalent(state, self.sets[subset][0]):
                    break
            else:
                subset = len(self.sets)
                self.sets.append([])
                subsets.append(subset)
            self.sets[subset].append(state)

        for subset in subsets:
            for state in self.sets[subset]:
                self.membership[state] = subset
        return len(subsets) > 1

    def _equivalent(self, state_1: Handle, state_2: Handle) -> bool:
        return all(
            self._step_class(state_1, symbol) == self._step_class(state_2, symbol)
            for symbol in self.symbols
        )

    def _step_class(self, state: Handle, symbol: Handle) -> int:
        target = self.dfa.step(state, symbol)
        if target is None:
            raise RuntimeError("DFA should have been completed before minimization")
        return self.membership[target]

    def _finalize(self) -> Dfa[L]:
        finalized: Dfa[L] = Dfa()
        new_states: list[Handle] = []
        initial = self.dfa.initial_state

        for members in self.sets:
            new_state = finalized.new_state()
            new_states.append(new_state)
            finalized.label(new_state, self.dfa.get_label(members[0]))
            if initial is not None and initial in members:
                finalized.set_initial_state(new_state)

        for members, src in zip(self.sets, new_states):
            for symbol in self.symbols:
                target = self.dfa.step(members[0], symbol)
                if target is None:
                    raise RuntimeError(
                        "DFA should have been completed before minimization"
                    )
                finalized.link(src, new_states[self.membership[target]], symbol)

        return _reduce_by_dead_state(finalized)


def minimize(dfa: Dfa[L]) -> Dfa[L]:
    """Return the minimal DFA equivalent to ``dfa``, leaving ``dfa`` unchanged.

    States are merged when they carry equal labels and behave alike on every
    symbol; labels must therefore be hashable. Raises ValueError when the
    initial state turns out to be dead (the automaton accepts nothing).
    """
    return _Minimizer(dfa).run()