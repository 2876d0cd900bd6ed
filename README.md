# syntaxgen

Pieces for the front end of a compiler: build a lexical analyzer from
regular-expression descriptions of lexemes, and run the resulting lexemes
through an LR parser that computes a value bottom-up, one reduction at a time.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Lexical analysis

Each kind of lexeme is described by a `LexemeDescriptor` (in
`syntaxgen.lexeme`) that pairs a lexeme type with a `Regex` pattern. A
`LexicalAnalyzer` (in `syntaxgen.lexer`) is built from a list of descriptors
and reads bytes from a `Reader`:

```python
from syntaxgen.regex import Regex
from syntaxgen.lexeme import Lexeme, LexemeDescriptor
from syntaxgen.lexer import LexicalAnalyzer
from syntaxgen.readers import ByteArrayReader

analyzer = LexicalAnalyzer([
    LexemeDescriptor(
        "integer",
        Regex.concat([
            Regex.optional(Regex.union([Regex.single_char("+"), Regex.single_char("-")])),
            Regex.plus_from(Regex.character_range("0", "9")),
        ]),
    ),
    LexemeDescriptor.special_char("addition", "+"),
    LexemeDescriptor.keyword("not_a_number", "NaN"),
])

lexemes = list(analyzer.analyze(ByteArrayReader.from_string("-2+NaN+-45")))
assert lexemes == [
    Lexeme("integer", "-2"),
    Lexeme("addition", "+"),
    Lexeme("not_a_number", "NaN"),
    Lexeme("addition", "+"),
    Lexeme("integer", "-45"),
]
```

How conflicts are settled:

- the longest match wins;
- among lexeme types that match text of the same length, the one whose
  descriptor came first wins.

Lexeme types must be hashable and must not be `None`. `analyze` is a
generator; it raises `LexicalError` (a `ValueError`) when the remaining input
has no prefix that any descriptor matches. Building an analyzer raises
`ValueError` if some descriptor's pattern accepts the empty string.

### Patterns

`Regex` is built with its class methods: `single_char`, `constant_string`,
`character_range`, `white_space`, `union`, `concat`, `star_from`, `plus_from`,
`optional` and `epsilon`. The resulting values are the frozen dataclasses
`SingleCharacter`, `Union`, `Concat` and `Star`. Patterns match single bytes,
so every character used must have a code point of at most 255;
`single_char` raises `ValueError` otherwise.

### Readers

`syntaxgen.readers` defines the `Reader` interface, with its head, cursor and
tail pointers, and the `AddressSpace` interface. `AddressBasedReader` reads
from any address space; `ByteArrayReader` reads from memory and is made with
`ByteArrayReader.from_string` (UTF-8) or `ByteArrayReader.from_bytes`.

## Automata

The automata are usable on their own:

- `syntaxgen.nfa.Nfa` has epsilon and symbol transitions and labeled states.
  `Nfa.compile_to_dfa(label_reduction)` performs the subset construction;
  `label_reduction` receives the labels of the merged NFA states and returns
  the DFA state's label (or `None`).
- `syntaxgen.dfa.Dfa` runs a stream of symbol handles with `scan`, returning
  the state reached or `None` when the input falls off a missing transition.
- `syntaxgen.minimize.minimize(dfa)` returns the minimal equivalent `Dfa`,
  leaving its argument unchanged. Labels must be hashable. It raises
  `ValueError` when the automaton accepts nothing.

## LR parsing and translation

`syntaxgen.lr_parser.LrParser` holds ACTION and GOTO tables. Actions are
`Shift(state)`, `Reduce(size, nonterminal, tag)` and `Accept()`. A run is an
`LrParserExecution`: `decide(terminal)` returns a `ShiftDecision`, a
`ReduceDecision` or `None` on a syntax error; `decide_final()` and
`finalize()` feed the end-of-input marker.

`syntaxgen.translator.SyntaxDirectedTranslator` drives such a parser over a
stream of lexemes. Lexeme types must produce handles, for instance an enum
that mixes in `AutomaticallyHandled`. Each shifted lexeme gets a value from
its leaf builder; each reduction tagged `Handle(i)` replaces the values of
the rule's right-hand side with the result of `satellite_reducers[i]`. Both
kinds of callback get the translation context first.

```python
from enum import Enum

from syntaxgen.handles import AutomaticallyHandled, Handle
from syntaxgen.lexeme import Lexeme
from syntaxgen.lr_parser import Accept, LrParser, Reduce, Shift
from syntaxgen.translator import SyntaxDirectedTranslator


class Token(AutomaticallyHandled, Enum):
    INTEGER = 1
    END = 2


expression = Handle(0)
parser = LrParser()
start, after_integer, after_expression = (parser.new_state() for _ in range(3))
parser.set_action(start, Token.INTEGER.handle(), Shift(after_integer))
parser.set_action(after_integer, Token.END.handle(), Reduce(1, expression, Handle(0)))
parser.set_goto(start, expression, after_expression)
parser.set_action(after_expression, Token.END.handle(), Accept())
parser.set_initial_state(start)
parser.set_end_of_input_marker(Token.END.handle())

translator = SyntaxDirectedTranslator(
    parser,
    satellite_reducers=[lambda context, values: values[0]],
    leaf_satellite_builders={Token.INTEGER: lambda context, text: int(text)},
)
assert translator.translate(None, [Lexeme(Token.INTEGER, "7")]) == 7
```

`translate` raises `TranslationError` (a `ValueError`) when the lexemes do not
fit the tables, and `LookupError` when a lexeme type has neither its own leaf
builder nor a default one.

## What the package does not do

The package does not compute LR tables from a grammar. `syntaxgen.rules`
defines `Terminal`, `Nonterminal`, `ProductionRule`, `Binding` and
`Associativity` as plain data, but nothing in the package turns them into
ACTION and GOTO tables; the tables of an `LrParser` are filled in by hand with
`set_action` and `set_goto`. There is no command-line program.

## Handles

States, symbols and parser tables are keyed by `Handle` values
(`syntaxgen.handles`), which wrap a non-negative serial number.
`syntaxgen.handle_collections` provides `HandledVec`, `HandleMap` and
`HandledHashMap`, and `syntaxgen.bitset` provides `HandleBitSet`, a set of
handles stored as the bits of an integer. `AutomaticallyHandled` lets a type
produce its own handles; enum members use their declaration position.