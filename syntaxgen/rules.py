"""Grammar symbols, production rules and operator bindings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .handles import Handle


class Associativity(Enum):
    """How operators of equal precedence group."""

    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


@dataclass(frozen=True)
class Terminal:
    """A terminal grammar symbol."""

    handle: Handle

    def __post_init__(self) -> None:
        if not isinstance(self.handle, Handle):
            raise TypeError(f"expected a Handle, got {self.handle!r}")


@dataclass(frozen=True)
class Nonterminal:
    """A nonterminal grammar symbol."""

    handle: Handle

    def __post_init__(self) -> None:
        if not isinstance(self.handle, Handle):
            raise TypeError(f"expected a Handle, got {self.handle!r}")


GrammarSymbol = Union[Terminal, Nonterminal]


@dataclass(frozen=True)
class Binding:
    """Terminals sharing a precedence level, and how they associate."""

    terminals: tuple[Handle, ...]
    associativity: Associativity

    def __post_init__(self) -> None:
        terminals = tuple(self.terminals)
        for terminal in terminals:
            if not isinstance(terminal, Handle):
                raise TypeError(f"expected a Handle, got {terminal!r}")
        if not isinstance(self.associativity, Associativity):
            raise TypeError(f"expected an Associativity, got {self.associativity!r}")
        object.__setattr__(self, "terminals", terminals)


@dataclass(frozen=True)
class ProductionRule:
    """A rule ``lhs -> rhs``, tagged, and optionally bound to a binding."""

    lhs: Handle
    rhs: tuple[GrammarSymbol, ...]
    tag: Handle
    binding: Optional[Handle] = None

    def __post_init__(self) -> None:
        if not isinstance(self.lhs, Handle):
            raise TypeError(f"expected a Handle as the left-hand side, got {self.lhs!r}")
        rhs = tuple(self.rhs)
        for symbol in rhs:
            if not isinstance(symbol, (Terminal, Nonterminal)):
                raise TypeError(f"expected a grammar symbol, got {symbol!r}")
        object.__setattr__(self, "rhs", rhs)