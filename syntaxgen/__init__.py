"""Lexical analyzers from regular expressions, finite automata, and LR-driven syntax-directed translation."""

__version__ = "0.1.0"