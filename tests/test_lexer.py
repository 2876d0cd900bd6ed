from enum import Enum, auto

import pytest

from syntaxgen.lexeme import Lexeme, LexemeDescriptor
from syntaxgen.lexer import LexicalAnalyzer, LexicalError
from syntaxgen.readers import ByteArrayReader
from syntaxgen.regex import Regex


class TestLexemeType(Enum):
    IF = auto()
    WHILE = auto()
    IDENTIFIER = auto()
    INTEGER = auto()
    WHITE_SPACE = auto()
    SEMI_COLON = auto()


def _identifier():
    return Regex.concat([
        Regex.union([
            Regex.character_range("a", "z"),
            Regex.character_range("A", "Z"),
            Regex.single_char("_"),
        ]),
        Regex.star_from(
            Regex.union([
                Regex.character_range("a", "z"),
                Regex.character_range("A", "Z"),
                Regex.character_range("0", "9"),
                Regex.single_char("_"),
            ])
        ),
    ])


def _integer():
    return Regex.concat([
        Regex.optional(Regex.union([Regex.single_char("+"), Regex.single_char("-")])),
        Regex.plus_from(Regex.character_range("0", "9")),
    ])


def lexeme_descriptors():
    return [
        LexemeDescriptor.keyword(TestLexemeType.IF, "if"),
        LexemeDescriptor.keyword(TestLexemeType.WHILE, "while"),
        LexemeDescriptor(TestLexemeType.IDENTIFIER, _identifier()),
        LexemeDescriptor(TestLexemeType.INTEGER, _integer()),
        LexemeDescriptor(TestLexemeType.WHITE_SPACE, Regex.plus_from(Regex.white_space())),
        LexemeDescriptor(TestLexemeType.SEMI_COLON, Regex.single_char(";")),
    ]


def test_lexical_analyzer_on_string():
    analyzer = LexicalAnalyzer(lexeme_descriptors())
    source = "if\twhil \n \t\nwhile \t whiley 34\n-1;4 +12"
    lexemes = list(analyzer.analyze(ByteArrayReader.from_string(source)))
    t = TestLexemeType
    assert lexemes == [
        Lexeme(t.IF, "if"),
        Lexeme(t.WHITE_SPACE, "\t"),
        Lexeme(t.IDENTIFIER, "whil"),
        Lexeme(t.WHITE_SPACE, " \n \t\n"),
        Lexeme(t.WHILE, "while"),
        Lexeme(t.WHITE_SPACE, " \t "),
        Lexeme(t.IDENTIFIER, "whiley"),
        Lexeme(t.WHITE_SPACE, " "),
        Lexeme(t.INTEGER, "34"),
        Lexeme(t.WHITE_SPACE, "\n"),
        Lexeme(t.INTEGER, "-1"),
        Lexeme(t.SEMI_COLON, ";"),
        Lexeme(t.INTEGER, "4"),
        Lexeme(t.WHITE_SPACE, " "),
        Lexeme(t.INTEGER, "+12"),
    ]


def test_lexical_error():
    analyzer = LexicalAnalyzer([LexemeDescriptor("plus", Regex.single_char("+"))])
    with pytest.raises(LexicalError):
        list(analyzer.analyze(ByteArrayReader.from_string("++-+")))


def test_lexemes_before_error_are_yielded():
    analyzer = LexicalAnalyzer([LexemeDescriptor("plus", Regex.single_char("+"))])
    lexemes = analyzer.analyze(ByteArrayReader.from_string("++-+"))
    assert next(lexemes) == Lexeme("plus", "+")
    assert next(lexemes) == Lexeme("plus", "+")
    with pytest.raises(LexicalError):
        next(lexemes)


class MyLexemeType(Enum):
    INTEGER = auto()
    ADDITION = auto()
    NOT_A_NUMBER = auto()


def test_documented_example():
    analyzer = LexicalAnalyzer([
        LexemeDescriptor(MyLexemeType.INTEGER, _integer()),
        LexemeDescriptor.special_char(MyLexemeType.ADDITION, "+"),
        LexemeDescriptor.keyword(MyLexemeType.NOT_A_NUMBER, "NaN"),
    ])
    lexemes = list(analyzer.analyze(ByteArrayReader.from_string("-2+NaN+-45")))
    assert lexemes == [
        Lexeme(MyLexemeType.INTEGER, "-2"),
        Lexeme(MyLexemeType.ADDITION, "+"),
        Lexeme(MyLexemeType.NOT_A_NUMBER, "NaN"),
        Lexeme(MyLexemeType.ADDITION, "+"),
        Lexeme(MyLexemeType.INTEGER, "-45"),
    ]


def test_empty_input_yields_nothing():
    analyzer = LexicalAnalyzer(lexeme_descriptors())
    assert list(analyzer.analyze(ByteArrayReader.from_string(""))) == []


def test_earlier_descriptor_wins_tie():
    analyzer = LexicalAnalyzer([
        LexemeDescriptor("ident", _identifier()),
        LexemeDescriptor.keyword("if", "if"),
    ])
    lexemes = list(analyzer.analyze(ByteArrayReader.from_string("if")))
    assert lexemes == [Lexeme("ident", "if")]


def test_pattern_accepting_empty_string_is_rejected():
    with pytest.raises(ValueError):
        LexicalAnalyzer([
            LexemeDescriptor("a_star", Regex.star_from(Regex.single_char("a")))
        ])


def test_none_lexeme_type_is_rejected():
    with pytest.raises(ValueError):
        LexicalAnalyzer([LexemeDescriptor(None, Regex.single_char("a"))])


def test_contents_concatenate_to_input():
    source = "while x;if 12 -3"
    analyzer = LexicalAnalyzer(lexeme_descriptors())
    lexemes = list(analyzer.analyze(ByteArrayReader.from_string(source)))
    assert "".join(lexeme.contents for lexeme in lexemes) == source


def test_analyze_from_bytes():
    analyzer = LexicalAnalyzer(lexeme_descriptors())
    lexemes = list(analyzer.analyze(ByteArrayReader.from_bytes(b"if;")))
    assert lexemes == [
        Lexeme(TestLexemeType.IF, "if"),
        Lexeme(TestLexemeType.SEMI_COLON, ";"),
    ]