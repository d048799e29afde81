"""Tests for the CallChain lexer."""
import pytest
from callchain.lexer import Lexer, LexerError, UnterminatedString, tokenize
from callchain.tokens import Token, TokenType


def lex(source: str) -> list:
    return Lexer(source).tokenize()


def token_types(source: str) -> list[TokenType]:
    return [t.type for t in lex(source)]


def token_values(source: str) -> list[str]:
    return [t.value for t in lex(source)]


class TestStrings:
    def test_single_string(self):
        toks = lex('"a"')
        assert toks == [Token(TokenType.STRING, "a")]

    def test_empty_string(self):
        toks = lex('""')
        assert toks == [Token(TokenType.STRING, "")]

    def test_string_is_verbatim(self):
        toks = lex('"hello (world). \\n"')
        assert len(toks) == 1
        assert toks[0].value == "hello (world). \\n"

    def test_single_quotes_are_not_strings(self):
        assert token_values("'a'") == ["a"]
        assert token_types("'a'") == [TokenType.IDENTIFIER]

    def test_unterminated_string(self):
        with pytest.raises(UnterminatedString) as exc:
            lex('f("abc')
        assert exc.value.offset == 2

    def test_unterminated_string_is_lexer_error(self):
        with pytest.raises(LexerError):
            lex('"')


class TestIdentifiers:
    def test_letters_only(self):
        assert token_values("abc") == ["abc"]

    def test_digits_split_identifiers(self):
        assert token_values("ab12cd") == ["ab", "cd"]

    def test_underscore_splits_identifiers(self):
        assert token_values("my_name") == ["my", "name"]

    def test_non_ascii_letters_are_skipped(self):
        assert token_values("aéb") == ["a", "b"]

    def test_mixed_case(self):
        assert token_values("myConsole") == ["myConsole"]


class TestDelimiters:
    def test_call(self):
        assert lex("f(x)") == [
            Token(TokenType.IDENTIFIER, "f"),
            Token(TokenType.CALL, "("),
            Token(TokenType.IDENTIFIER, "x"),
            Token(TokenType.CALL, ")"),
        ]

    def test_property_delimiters(self):
        toks = lex(".[]")
        assert [t.type for t in toks] == [TokenType.PROPERTY] * 3
        assert [t.value for t in toks] == [".", "[", "]"]

    def test_is_call(self):
        tok = lex("(")[0]
        assert tok.is_call("(")
        assert not tok.is_call(")")
        assert not lex(".")[0].is_call(".")


class TestSkipping:
    def test_whitespace_and_separators(self):
        assert token_values(' a ;\n\tb ; ') == ["a", "b"]

    def test_digits_are_dropped(self):
        assert lex("123") == []

    def test_empty_source(self):
        assert lex("") == []

    def test_other_punctuation(self):
        assert token_types("a + b, c") == [TokenType.IDENTIFIER] * 3


class TestProgram:
    def test_chained_call(self):
        source = 'myConsole.log("hello world")()();testLog(globalValue)'
        assert token_values(source) == [
            "myConsole", ".", "log", "(", "hello world", ")", "(", ")", "(", ")",
            "testLog", "(", "globalValue", ")",
        ]

    def test_module_function(self):
        assert tokenize('x["y"]') == lex('x["y"]')

    def test_repr(self):
        assert repr(Token(TokenType.IDENTIFIER, "f")) == "Token(IDENTIFIER, 'f')"
