"""
Lexer for jsonhelpers - tokenizes input text for parsing.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, NoReturn, Optional, TextIO, Union

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    InvalidEscapeSequenceError,
    ParseError,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from ..security.limits import LimitValidator
from .constants import (
    DECIMAL_CHUNK_DIGITS,
    QUOTE_CHARS,
    STRING_ESCAPE_MAP,
    WHITESPACE_CHARS,
    get_reserved_word_map,
    get_structural_token_map,
)


class TokenType(Enum):
    """Token types produced by the lexer."""

    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    COLON = "COLON"
    COMMA = "COMMA"

    COMMENT = "COMMENT"
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"
    INTEGER = "INTEGER"
    DOUBLE = "DOUBLE"
    NULL = "NULL"
    UNDEFINED = "UNDEFINED"

    EOF = "EOF"


@dataclass
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int


class Token(NamedTuple):
    """Token with type, decoded value and position of its first character."""

    type: TokenType
    value: Any
    position: Position


def _digits_to_int(digits: str) -> int:
    # int() refuses long digit strings, so convert in chunks
    result = 0
    for start in range(0, len(digits), DECIMAL_CHUNK_DIGITS):
        chunk = digits[start:start + DECIMAL_CHUNK_DIGITS]
        result = result * 10 ** len(chunk) + int(chunk)
    return result


class Lexer:
    """Lexical analyzer for permissive JSON input.

    When a LimitValidator is given, number literals are checked against
    max_number_length as written, before they are converted.
    """

    def __init__(
        self,
        source: Union[str, TextIO],
        error_reporter: Optional[ErrorReporter] = None,
        validator: Optional[LimitValidator] = None,
    ) -> None:
        self.text = source if isinstance(source, str) else source.read()
        self.error_reporter = error_reporter
        self.validator = validator
        self.pos = 0
        self.line = 1
        self.column = 1

    def current_position(self) -> Position:
        """Get current position in the text."""
        return Position(self.line, self.column)

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def advance(self) -> str:
        """Advance position and return the current character."""
        if self.pos >= len(self.text):
            return ""

        char = self.text[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def at_end(self) -> bool:
        """Whether all input has been consumed."""
        return self.pos >= len(self.text)

    def skip_whitespace(self) -> None:
        """Skip whitespace characters (space, tab, newline, carriage return)."""
        while not self.at_end() and self.peek() in WHITESPACE_CHARS:
            self.advance()

    def read_comment(self, start: Position) -> str:
        """Read a // line comment or /* block */ comment, returning its text."""
        self.advance()
        kind = self.peek()

        if kind == "/":
            self.advance()
            result = []
            while not self.at_end() and self.peek() != "\n":
                result.append(self.advance())
            return "".join(result)

        if kind == "*":
            self.advance()
            result = []
            while True:
                if self.at_end():
                    self._raise_error(
                        UnterminatedCommentError,
                        "Unterminated block comment",
                        start,
                        ErrorSuggestionEngine.suggest_for_unterminated("comment"),
                    )
                if self.peek() == "*" and self.peek(1) == "/":
                    self.advance()
                    self.advance()
                    return "".join(result)
                result.append(self.advance())

        self._raise_error(
            UnexpectedCharacterError,
            "Expected '//' or '/*' to start a comment",
            self.current_position(),
        )

    def read_string(self, quote_char: str, start: Position) -> str:
        """Read a quoted string with escape sequence handling."""
        result = []
        self.advance()

        while True:
            if self.at_end():
                self._raise_error(
                    UnterminatedStringError,
                    "Unterminated string literal",
                    start,
                    ErrorSuggestionEngine.suggest_for_unterminated("string"),
                )

            char = self.peek()
            if char == quote_char:
                self.advance()
                return "".join(result)

            if char == "\\":
                result.append(self._read_escape())
            else:
                result.append(self.advance())

    def _read_escape(self) -> str:
        """Read a backslash escape and return the characters it stands for."""
        escape_pos = self.current_position()
        self.advance()

        if self.at_end():
            # the string itself is unterminated; let read_string report it
            return ""

        next_char = self.advance()
        if next_char in STRING_ESCAPE_MAP:
            return STRING_ESCAPE_MAP[next_char]

        # line continuation
        if next_char == "\n":
            return ""
        if next_char == "\r" and self.peek() == "\n":
            self.advance()
            return ""

        self._raise_error(
            InvalidEscapeSequenceError,
            f"Invalid escape sequence '\\{next_char}'",
            escape_pos,
            ErrorSuggestionEngine.suggest_for_invalid_escape(next_char),
        )

    def read_number(self) -> Token:
        """Read an integer or floating point literal."""
        start = self.current_position()
        start_pos = self.pos

        negative = self.peek() == "-"
        if negative:
            self.advance()

        digits_start = self.pos
        while self._is_digit(self.peek()):
            self.advance()
        digits_end = self.pos

        is_double = False
        if self.peek() == ".":
            is_double = True
            self.advance()
            self._expect_digit("Expected digit after decimal point")
            while self._is_digit(self.peek()):
                self.advance()

        if self.peek() in ("e", "E"):
            is_double = True
            self.advance()
            if self.peek() in ("+", "-"):
                self.advance()
            self._expect_digit("Expected digit in exponent")
            while self._is_digit(self.peek()):
                self.advance()

        literal = self.text[start_pos:self.pos]
        if self.validator:
            self.validator.validate_number_length(literal, start)

        if is_double:
            return Token(TokenType.DOUBLE, float(literal), start)
        result = _digits_to_int(self.text[digits_start:digits_end])
        return Token(TokenType.INTEGER, -result if negative else result, start)

    def _expect_digit(self, message: str) -> None:
        if not self._is_digit(self.peek()):
            self._raise_error(UnexpectedCharacterError, message, self.current_position())

    @staticmethod
    def _is_digit(char: str) -> bool:
        return char.isascii() and char.isdigit()

    def read_identifier(self) -> str:
        """Read an identifier made of letters, digits and underscores."""
        result = []
        while not self.at_end():
            char = self.peek()
            if char.isalnum() or char == "_":
                result.append(self.advance())
            else:
                break
        return "".join(result)

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the input text, yielding tokens as they are read."""
        while True:
            self.skip_whitespace()

            if self.at_end():
                break

            char = self.peek()
            pos = self.current_position()

            token = self._try_structural_token(char, pos)
            if token:
                yield token
                continue

            token = self._try_comment_token(char, pos)
            if token:
                yield token
                continue

            token = self._try_string_token(char, pos)
            if token:
                yield token
                continue

            token = self._try_number_token(char)
            if token:
                yield token
                continue

            token = self._try_identifier_token(char, pos)
            if token:
                yield token
                continue

            self._raise_error(
                UnexpectedCharacterError,
                f"Unexpected character {char!r}",
                pos,
                ErrorSuggestionEngine.suggest_for_unexpected_token(char),
            )

        yield Token(TokenType.EOF, "", self.current_position())

    def _try_structural_token(self, char: str, pos: Position) -> Optional[Token]:
        """Try to create structural tokens (braces, brackets, etc.)."""
        token_map = get_structural_token_map()

        if char in token_map:
            self.advance()
            return Token(token_map[char], char, pos)
        return None

    def _try_comment_token(self, char: str, pos: Position) -> Optional[Token]:
        """Try to create a comment token."""
        if char == "/":
            return Token(TokenType.COMMENT, self.read_comment(pos), pos)
        return None

    def _try_string_token(self, char: str, pos: Position) -> Optional[Token]:
        """Try to create a string token."""
        if char in QUOTE_CHARS:
            return Token(TokenType.STRING, self.read_string(char, pos), pos)
        return None

    def _try_number_token(self, char: str) -> Optional[Token]:
        """Try to create an integer or double token."""
        if self._is_digit(char) or (char == "-" and self._is_digit(self.peek(1))):
            return self.read_number()
        return None

    def _try_identifier_token(self, char: str, pos: Position) -> Optional[Token]:
        """Try to create an identifier or reserved literal token."""
        if char.isalpha() or char == "_":
            identifier = self.read_identifier()

            reserved = get_reserved_word_map().get(identifier)
            if reserved is not None:
                token_type, value = reserved
                return Token(token_type, value, pos)
            return Token(TokenType.IDENTIFIER, identifier, pos)
        return None

    def get_all_tokens(self) -> list[Token]:
        """Get all tokens as a list."""
        return list(self.tokenize())

    def _raise_error(
        self,
        error_class: type,
        message: str,
        position: Position,
        suggestions: Optional[list[str]] = None,
    ) -> NoReturn:
        error: ParseError
        if self.error_reporter:
            error = self.error_reporter.create_parse_error(
                message, position, suggestions, error_class
            )
        else:
            error = error_class(message, position, suggestions=suggestions)
        raise error
