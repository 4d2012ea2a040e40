# =============================================================================
# test_lexer.py - Scanner Unit Tests
# =============================================================================
# Tests for the C- scanner (tokenizer).
#
# Test coverage includes:
#   - Keywords, identifiers and numbers
#   - Symbols and single/double character operators
#   - Block comments, including unterminated ones
#   - Error tokens for invalid characters and lone operators
#   - Lexeme length limit
#   - Token locations
#   - End-of-input behaviour and the stop-on-error policy
# =============================================================================

import pytest
from cminus.scanner import (
    UNTERMINATED_COMMENT,
    CharacterSource,
    Scanner,
    ScannerOptions,
    TokenCategory,
    TokenKind,
    scan_source,
)


# =============================================================================
# Helper Functions
# =============================================================================

def tokenize(source: str, **options) -> list:
    """
    Helper to tokenize and drop the trailing EOF token.
    Tests are focused on meaningful tokens, not the terminator.
    """
    tokens = scan_source(source, "<test>", ScannerOptions(**options))
    return [t for t in tokens if t.kind is not TokenKind.EOF]


def kinds(source: str) -> list:
    """Helper returning the token kinds of a source, EOF included."""
    return [t.kind for t in scan_source(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source should produce only the EOF token."""
        tokens = scan_source("")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.EOF
        assert tokens[0].lexeme == ""

    def test_whitespace_only(self):
        """Spaces, tabs and newlines produce only the EOF token."""
        tokens = scan_source("  \t \n\n\t  \n")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.EOF

    @pytest.mark.parametrize("keyword,kind", [
        ("if", TokenKind.IF),
        ("else", TokenKind.ELSE),
        ("int", TokenKind.INT),
        ("return", TokenKind.RETURN),
        ("void", TokenKind.VOID),
        ("while", TokenKind.WHILE),
    ])
    def test_keywords(self, keyword, kind):
        tokens = tokenize(keyword)
        assert len(tokens) == 1
        assert tokens[0].kind == kind
        assert tokens[0].lexeme == keyword
        assert tokens[0].category == TokenCategory.KEYWORD

    def test_keywords_are_case_sensitive(self):
        """Only exact lowercase spellings are keywords."""
        tokens = tokenize("If WHILE Int")
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER] * 3

    def test_keyword_prefix_is_identifier(self):
        tokens = tokenize("integer whiles")
        assert [t.lexeme for t in tokens] == ["integer", "whiles"]
        assert all(t.kind == TokenKind.IDENTIFIER for t in tokens)

    def test_identifier_with_digits(self):
        """Identifiers may contain digits after the first letter."""
        tokens = tokenize("x1 abc123")
        assert [t.lexeme for t in tokens] == ["x1", "abc123"]
        assert all(t.category == TokenCategory.IDENTIFIER for t in tokens)

    def test_number(self):
        tokens = tokenize("12345")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].lexeme == "12345"
        assert tokens[0].category == TokenCategory.NUMBER

    def test_number_then_identifier(self):
        """Digits followed by letters split into a number and an identifier."""
        tokens = tokenize("123abc")
        assert [(t.kind, t.lexeme) for t in tokens] == [
            (TokenKind.NUMBER, "123"),
            (TokenKind.IDENTIFIER, "abc"),
        ]

    def test_single_digit_then_identifier(self):
        tokens = tokenize("9abc")
        assert [(t.kind, t.lexeme) for t in tokens] == [
            (TokenKind.NUMBER, "9"),
            (TokenKind.IDENTIFIER, "abc"),
        ]


# =============================================================================
# Symbol and Operator Tests
# =============================================================================

class TestSymbolsAndOperators:
    """Test symbols and single/double character operators."""

    @pytest.mark.parametrize("char,kind", [
        ("(", TokenKind.LPAREN),
        (")", TokenKind.RPAREN),
        ("[", TokenKind.LBRACKET),
        ("]", TokenKind.RBRACKET),
        ("{", TokenKind.LBRACE),
        ("}", TokenKind.RBRACE),
        (",", TokenKind.COMMA),
        (";", TokenKind.SEMICOLON),
    ])
    def test_symbols(self, char, kind):
        tokens = tokenize(char)
        assert len(tokens) == 1
        assert tokens[0].kind == kind
        assert tokens[0].lexeme == char
        assert tokens[0].category == TokenCategory.SYMBOL

    @pytest.mark.parametrize("text,kind", [
        ("+", TokenKind.PLUS),
        ("-", TokenKind.MINUS),
        ("*", TokenKind.STAR),
        ("/", TokenKind.SLASH),
        ("<", TokenKind.LT),
        ("<=", TokenKind.LE),
        (">", TokenKind.GT),
        (">=", TokenKind.GE),
        ("==", TokenKind.EQ),
        ("!=", TokenKind.NE),
        ("=", TokenKind.ASSIGN),
        ("&&", TokenKind.AND),
        ("||", TokenKind.OR),
    ])
    def test_operators(self, text, kind):
        tokens = tokenize(text)
        assert len(tokens) == 1
        assert tokens[0].kind == kind
        assert tokens[0].lexeme == text
        assert tokens[0].category == TokenCategory.OPERATOR

    def test_assign_then_identifier(self):
        """The lookahead after '=' is pushed back when it does not pair."""
        tokens = tokenize("=x")
        assert [(t.kind, t.lexeme) for t in tokens] == [
            (TokenKind.ASSIGN, "="),
            (TokenKind.IDENTIFIER, "x"),
        ]

    def test_less_than_then_number(self):
        tokens = tokenize("<5")
        assert [(t.kind, t.lexeme) for t in tokens] == [
            (TokenKind.LT, "<"),
            (TokenKind.NUMBER, "5"),
        ]

    def test_three_equals(self):
        """'===' is '==' followed by '='."""
        assert kinds("===") == [TokenKind.EQ, TokenKind.ASSIGN, TokenKind.EOF]

    def test_operator_at_end_of_input(self):
        """An operator on the last character does not disturb EOF."""
        assert kinds("x=") == [TokenKind.IDENTIFIER, TokenKind.ASSIGN, TokenKind.EOF]
        assert kinds("a>") == [TokenKind.IDENTIFIER, TokenKind.GT, TokenKind.EOF]

    def test_division(self):
        tokens = tokenize("a / b")
        assert [t.kind for t in tokens] == [
            TokenKind.IDENTIFIER,
            TokenKind.SLASH,
            TokenKind.IDENTIFIER,
        ]

    def test_adjacent_tokens(self):
        tokens = tokenize("a[i]=b*2;")
        assert [t.lexeme for t in tokens] == ["a", "[", "i", "]", "=", "b", "*", "2", ";"]


# =============================================================================
# Error Token Tests
# =============================================================================

class TestErrorTokens:
    """Test lexical errors reported as ERROR tokens."""

    @pytest.mark.parametrize("char", ["!", "&", "|"])
    def test_lone_operator(self, char):
        tokens = tokenize(char)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.ERROR
        assert tokens[0].lexeme == char
        assert tokens[0].category == TokenCategory.ERROR
        assert tokens[0].message

    def test_lone_operator_keeps_following_token(self):
        """The character after a lone '&' is scanned normally."""
        tokens = tokenize("&x")
        assert [(t.kind, t.lexeme) for t in tokens] == [
            (TokenKind.ERROR, "&"),
            (TokenKind.IDENTIFIER, "x"),
        ]

    @pytest.mark.parametrize("char", ["@", "#", "$", "_", "%", "\"", "."])
    def test_invalid_character(self, char):
        tokens = tokenize(char)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.ERROR
        assert tokens[0].lexeme == char
        assert "invalid character" in tokens[0].message

    def test_scan_continues_after_error(self):
        tokens = tokenize("x @ y")
        assert [t.kind for t in tokens] == [
            TokenKind.IDENTIFIER,
            TokenKind.ERROR,
            TokenKind.IDENTIFIER,
        ]

    def test_non_ascii_letter_is_error(self):
        """Only ASCII letters start identifiers."""
        tokens = tokenize("é")
        assert tokens[0].kind == TokenKind.ERROR

    def test_error_count(self):
        with CharacterSource.from_string("! @ & ok") as source:
            scanner = Scanner(source)
            list(scanner.tokenize())
        assert scanner.error_count == 3

    def test_valid_tokens_have_no_message(self):
        tokens = tokenize("int x;")
        assert all(t.message is None for t in tokens)


# =============================================================================
# Comment Tests
# =============================================================================

class TestComments:
    """Test block comment handling."""

    def test_comment_produces_no_token(self):
        tokens = tokenize("/* comment */int")
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.INT

    def test_multi_line_comment(self):
        tokens = tokenize("int /* line one\nline two\n */ x")
        assert [t.lexeme for t in tokens] == ["int", "x"]

    def test_comment_with_stars(self):
        tokens = tokenize("/*** stars ***/ y")
        assert [t.lexeme for t in tokens] == ["y"]

    def test_empty_comment(self):
        assert kinds("/**/") == [TokenKind.EOF]

    def test_slash_star_slash_does_not_close(self):
        """'/*/' opens a comment; the '/' is not a closing delimiter."""
        assert kinds("/*/ x */ y") == [TokenKind.IDENTIFIER, TokenKind.EOF]

    def test_comments_do_not_nest(self):
        """The first '*/' closes, whatever '/*' came in between."""
        tokens = tokenize("/* a /* b */ c */")
        assert [(t.kind, t.lexeme) for t in tokens] == [
            (TokenKind.IDENTIFIER, "c"),
            (TokenKind.STAR, "*"),
            (TokenKind.SLASH, "/"),
        ]

    def test_many_consecutive_comments(self):
        """Long runs of comments are skipped without recursion."""
        source = "/* c */" * 5000 + "int"
        tokens = tokenize(source)
        assert [t.kind for t in tokens] == [TokenKind.INT]

    def test_unterminated_comment(self):
        tokens = scan_source("/* unterminated")
        assert len(tokens) == 2
        assert tokens[0].kind == TokenKind.ERROR
        assert tokens[0].lexeme == UNTERMINATED_COMMENT
        assert tokens[0].lexeme == "Comentario nao fechado"
        assert tokens[1].kind == TokenKind.EOF

    def test_unterminated_comment_after_tokens(self):
        tokens = scan_source("int x; /* open\n more *")
        assert [t.kind for t in tokens] == [
            TokenKind.INT,
            TokenKind.IDENTIFIER,
            TokenKind.SEMICOLON,
            TokenKind.ERROR,
            TokenKind.EOF,
        ]
        assert tokens[3].line == 1
        assert tokens[3].column == 8


# =============================================================================
# Lexeme Length Tests
# =============================================================================

class TestLexemeLength:
    """Test the lexeme length limit."""

    def test_default_limit(self):
        assert ScannerOptions().max_lexeme_length == 255

    def test_identifier_at_limit(self):
        name = "a" * 255
        tokens = tokenize(name)
        assert tokens[0].kind == TokenKind.IDENTIFIER
        assert tokens[0].lexeme == name

    def test_identifier_over_limit(self):
        """One character too many makes a truncated ERROR token."""
        tokens = tokenize("a" * 256 + " x")
        assert tokens[0].kind == TokenKind.ERROR
        assert tokens[0].lexeme == "a" * 255
        assert "exceeds 255" in tokens[0].message
        assert tokens[1].kind == TokenKind.IDENTIFIER
        assert tokens[1].lexeme == "x"

    def test_number_over_limit(self):
        tokens = tokenize("1" * 1000 + ";")
        assert tokens[0].kind == TokenKind.ERROR
        assert len(tokens[0].lexeme) == 255
        assert tokens[1].kind == TokenKind.SEMICOLON

    def test_custom_limit(self):
        tokens = tokenize("abcd abcde", max_lexeme_length=4)
        assert [(t.kind, t.lexeme) for t in tokens] == [
            (TokenKind.IDENTIFIER, "abcd"),
            (TokenKind.ERROR, "abcd"),
        ]

    def test_comment_error_respects_limit(self):
        tokens = tokenize("/* open", max_lexeme_length=8)
        assert tokens[0].lexeme == UNTERMINATED_COMMENT[:8]

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            ScannerOptions(max_lexeme_length=0)


# =============================================================================
# Location Tests
# =============================================================================

class TestLocations:
    """Test token line and column tracking."""

    def test_token_location(self):
        tokens = scan_source("int x;\n  return x;\n", "prog.c-")
        positions = [(t.lexeme, t.line, t.column) for t in tokens[:-1]]
        assert positions == [
            ("int", 1, 1),
            ("x", 1, 5),
            (";", 1, 6),
            ("return", 2, 3),
            ("x", 2, 10),
            (";", 2, 11),
        ]

    def test_location_property(self):
        token = scan_source("\n\n  @", "prog.c-")[0]
        assert str(token.location) == "prog.c-:3:3"

    def test_filename_recorded(self):
        token = scan_source("x", "prog.c-")[0]
        assert token.filename == "prog.c-"


# =============================================================================
# End of Input and Policy Tests
# =============================================================================

class TestEndOfInput:
    """Test EOF idempotence and the stop-on-error policy."""

    def test_next_token_after_eof(self):
        """Calling next_token() after EOF keeps returning EOF."""
        with CharacterSource.from_string("x") as source:
            scanner = Scanner(source)
            assert scanner.next_token().kind == TokenKind.IDENTIFIER
            for _ in range(3):
                assert scanner.next_token().kind == TokenKind.EOF

    def test_tokenize_ends_with_single_eof(self):
        tokens = scan_source("a b")
        assert [t.kind for t in tokens].count(TokenKind.EOF) == 1
        assert tokens[-1].is_eof()

    def test_stop_on_error(self):
        """With stop_on_error the scan ends at the first ERROR token."""
        tokens = scan_source("x ! y", options=ScannerOptions(stop_on_error=True))
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.ERROR]

    def test_continue_after_error_by_default(self):
        tokens = scan_source("x ! y")
        assert [t.kind for t in tokens] == [
            TokenKind.IDENTIFIER,
            TokenKind.ERROR,
            TokenKind.IDENTIFIER,
            TokenKind.EOF,
        ]

    def test_unterminated_comment_ends_scan(self):
        """After an unterminated comment the next token is EOF, with no crash."""
        with CharacterSource.from_string("a /* b\nc d") as source:
            scanner = Scanner(source)
            assert scanner.next_token().kind == TokenKind.IDENTIFIER
            assert scanner.next_token().lexeme == UNTERMINATED_COMMENT
            assert scanner.next_token().kind == TokenKind.EOF
            assert scanner.next_token().kind == TokenKind.EOF


# =============================================================================
# Complete Program Tests
# =============================================================================

class TestPrograms:
    """Test tokenizing complete C- fragments."""

    def test_while_loop(self):
        assert kinds("while (x <= 10) { return; }") == [
            TokenKind.WHILE,
            TokenKind.LPAREN,
            TokenKind.IDENTIFIER,
            TokenKind.LE,
            TokenKind.NUMBER,
            TokenKind.RPAREN,
            TokenKind.LBRACE,
            TokenKind.RETURN,
            TokenKind.SEMICOLON,
            TokenKind.RBRACE,
            TokenKind.EOF,
        ]

    def test_function(self):
        source = (
            "/* greatest common divisor */\n"
            "int gcd(int u, int v)\n"
            "{\tif (v == 0) return u;\n"
            "\telse return gcd(v, u - u/v*v);\n"
            "}\n"
        )
        tokens = tokenize(source)
        assert tokens[0].kind == TokenKind.INT
        assert tokens[0].line == 2
        assert [t.lexeme for t in tokens[:9]] == [
            "int", "gcd", "(", "int", "u", ",", "int", "v", ")",
        ]
        assert not any(t.is_error() for t in tokens)
        assert tokens[-1].kind == TokenKind.RBRACE
        assert tokens[-1].line == 5

    def test_logical_operators(self):
        tokens = tokenize("if (a && b || c != d)")
        assert [t.kind for t in tokens] == [
            TokenKind.IF,
            TokenKind.LPAREN,
            TokenKind.IDENTIFIER,
            TokenKind.AND,
            TokenKind.IDENTIFIER,
            TokenKind.OR,
            TokenKind.IDENTIFIER,
            TokenKind.NE,
            TokenKind.IDENTIFIER,
            TokenKind.RPAREN,
        ]

    def test_token_repr(self):
        tokens = scan_source("x")
        assert repr(tokens[0]) == "Token(IDENTIFIER, 'x', 1:1)"
        assert repr(tokens[1]) == "Token(EOF, 1:2)"

    def test_eof_position_after_trailing_newline(self):
        """EOF stays on the last line, one past its final character."""
        eof = scan_source("x\n")[-1]
        assert eof.is_eof()
        assert (eof.line, eof.column) == (1, 3)
