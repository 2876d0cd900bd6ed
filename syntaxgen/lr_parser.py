"""Table-driven LR parsers and their step-by-step execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .handle_collections import HandledVec, HandleMap
from .handles import Handle


@dataclass(frozen=True)
class Shift:
    """Push the given state and consume the terminal."""

    state: Handle


@dataclass(frozen=True)
class Reduce:
    """Pop ``size`` states, then go to the state reached by ``nonterminal``."""

    size: int
    nonterminal: Handle
    tag: Handle

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"reduction size must be non-negative, got {self.size}")


@dataclass(frozen=True)
class Accept:
    """Accept the input."""


Action = Union[Shift, Reduce, Accept]


@dataclass(frozen=True)
class ShiftDecision:
    """The parser consumed the terminal."""


@dataclass(frozen=True)
class ReduceDecision:
    """The parser reduced ``size`` symbols by the rule identified by ``tag``."""

    size: int
    tag: Handle


@dataclass(frozen=True)
class AcceptDecision:
    """The parser accepted the input."""


Decision = Union[ShiftDecision, ReduceDecision, AcceptDecision]


@dataclass
class _LrParserState:
    action_map: HandleMap[Action] = field(default_factory=HandleMap)
    goto_map: HandleMap[Handle] = field(default_factory=HandleMap)


class LrParser:
    """An LR parser defined by its action and goto tables.

    Terminals, nonterminals and tags are identified by handles.
    """

    def __init__(self) -> None:
        self._states: HandledVec[_LrParserState] = HandledVec()
        self.initial_state: Optional[Handle] = None
        self.end_of_input_marker: Optional[Handle] = None

    def new_state(self) -> Handle:
        """Add a state with empty tables and return its handle."""
        return self._states.insert(_LrParserState())

    def set_action(self, state: Handle, terminal: Handle, action: Action) -> None:
        """Set what ``state`` does on ``terminal``."""
        self._states[state].action_map.insert(terminal, action)

    def set_goto(self, state: Handle, nonterminal: Handle, target: Handle) -> None:
        """Set the state reached from ``state`` after reducing to ``nonterminal``."""
        self._states[state].goto_map.insert(nonterminal, target)

    def set_initial_state(self, state: Handle) -> None:
        """Make ``state`` the state parsing starts from."""
        self.initial_state = state

    def set_end_of_input_marker(self, terminal: Handle) -> None:
        """Make ``terminal`` the marker fed to the parser at the end of input."""
        self.end_of_input_marker = terminal

    def new_execution(self) -> LrParserExecution:
        """Start a fresh run of the parser.

        Raises ValueError if the initial state or the end-of-input marker is unset.
        """
        return LrParserExecution(self)


class LrParserExecution:
    """One run of an :class:`LrParser`, fed one terminal at a time."""

    def __init__(self, parser: LrParser) -> None:
        if parser.initial_state is None:
            raise ValueError(
                "cannot run an LR parser with no dedicated initial state"
            )
        if parser.end_of_input_marker is None:
            raise ValueError(
                "cannot run an LR parser with no dedicated end-of-input terminal"
            )
        self._parser = parser
        self._stack: list[Handle] = [parser.initial_state]
        self._end_of_input_marker: Handle = parser.end_of_input_marker

    def decide(self, terminal: Handle) -> Optional[Union[ShiftDecision, ReduceDecision]]:
        """Take one step on ``terminal``; return None on a syntax error.

        A reduction does not consume the terminal, so the caller feeds it
        again until the parser shifts it. Raises ValueError if the parser
        accepts on a terminal other than the end-of-input marker.
        """
        decision = self._decide_internal(terminal)
        if isinstance(decision, AcceptDecision):
            raise ValueError(
                "LR parser accepted on a client terminal; it should only accept "
                "on the end-of-input marker"
            )
        return decision

    def decide_final(self) -> Optional[Union[ReduceDecision, AcceptDecision]]:
        """Take one step on the end-of-input marker; return None on a syntax error.

        Raises ValueError if the parser tries to shift the marker.
        """
        decision = self._decide_internal(self._end_of_input_marker)
        if isinstance(decision, ShiftDecision):
            raise ValueError("the end-of-input marker shouldn't be shifted")
        return decision

    def finalize(self) -> bool:
        """Feed the end-of-input marker until the parser accepts or fails."""
        while True:
            decision = self._decide_internal(self._end_of_input_marker)
            if decision is None:
                return False
            if isinstance(decision, AcceptDecision):
                return True

    def _decide_internal(self, terminal: Handle) -> Optional[Decision]:
        if not self._stack:
            return None
        action = self._parser._states[self._stack[-1]].action_map.get(terminal)
        if action is None:
            return None

        if isinstance(action, Shift):
            self._stack.append(action.state)
            return ShiftDecision()

        if isinstance(action, Reduce):
            del self._stack[max(len(self._stack) - action.size, 0):]
            if not self._stack:
                return None
            target = self._parser._states[self._stack[-1]].goto_map.get(
                action.nonterminal
            )
            if target is None:
                return None
            self._stack.append(target)
            return ReduceDecision(action.size, action.tag)

        return AcceptDecision()