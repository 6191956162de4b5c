"""
Exceptions and error reporting for jsonhelpers.

All errors raised by the library derive from JsonHelpersError. Lexical and
syntactic failures are ParseError subclasses carrying the line and column of
the offending input; ErrorReporter attaches the surrounding source text.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..core.tokenizer import Position


@dataclass
class ErrorContext:
    """Source context surrounding an error position."""

    text: str
    position: "Position"
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class JsonHelpersError(Exception):
    """Base exception for all jsonhelpers errors."""

    def __init__(
        self,
        message: str,
        position: Optional["Position"] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message

        if self.position:
            msg += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            msg += f"\n\nContext:\n{self.context.line_text}"
            msg += f"\n{self.context.column_indicator}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  - {suggestion}"

        return msg


class ParseError(JsonHelpersError):
    """Raised when input text cannot be tokenized or parsed."""

    @property
    def line(self) -> Optional[int]:
        """Line of the failure, if known."""
        return self.position.line if self.position else None

    @property
    def column(self) -> Optional[int]:
        """Column of the failure, if known."""
        return self.position.column if self.position else None


class UnexpectedCharacterError(ParseError):
    """A character that cannot start or continue any token."""


class UnterminatedStringError(ParseError):
    """End of input inside a string literal."""


class UnterminatedCommentError(ParseError):
    """End of input inside a block comment."""


class InvalidEscapeSequenceError(ParseError):
    """A backslash escape that is not recognized."""


class UnexpectedTokenError(ParseError):
    """A well-formed token in a place the grammar does not allow."""

    def __init__(
        self,
        message: str,
        position: Optional["Position"] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
        expected: str = "",
        found: str = "",
    ):
        self.expected = expected
        self.found = found
        super().__init__(message, position, context, suggestions)


class SecurityError(JsonHelpersError):
    """Raised when a configured parsing limit is exceeded."""


class TypeMismatchError(JsonHelpersError, TypeError):
    """Raised when a value is accessed as a kind it does not hold."""

    def __init__(self, expected: Any, actual: Any):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected.name} but found {actual.name}")


class ErrorReporter:
    """Builds errors with source context for a given input text."""

    def __init__(
        self,
        text: str,
        max_context: int = 50,
        include_context: bool = True,
        include_suggestions: bool = True,
    ):
        self.text = text
        self.max_context = max_context
        self.include_context = include_context
        self.include_suggestions = include_suggestions
        self.lines = text.split("\n")

    def create_context(self, position: "Position") -> ErrorContext:
        """Extract the text around a line/column position."""
        line_idx = min(max(position.line - 1, 0), len(self.lines) - 1)
        line_text = self.lines[line_idx]
        col_idx = min(max(position.column - 1, 0), len(line_text))

        start = max(0, col_idx - self.max_context)
        end = min(len(line_text), col_idx + self.max_context)

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=line_text[start:col_idx],
            context_after=line_text[col_idx:end],
            error_char=line_text[col_idx] if col_idx < len(line_text) else "",
            line_text=line_text,
            column_indicator=" " * col_idx + "^",
        )

    def create_parse_error(
        self,
        message: str,
        position: "Position",
        suggestions: Optional[list[str]] = None,
        error_class: type = ParseError,
        **extra: Any,
    ) -> ParseError:
        """Create a ParseError (or subclass) with source context."""
        context = self.create_context(position) if self.include_context else None
        if not self.include_suggestions:
            suggestions = None
        error: ParseError = error_class(
            message, position, context, suggestions, **extra
        )
        return error

    def create_security_error(
        self, message: str, position: Optional["Position"] = None
    ) -> SecurityError:
        """Create a SecurityError, with context when a position is known."""
        context = (
            self.create_context(position)
            if position and self.include_context
            else None
        )
        return SecurityError(message, position, context)


class ErrorSuggestionEngine:
    """Canned hints attached to common failures."""

    @staticmethod
    def suggest_for_unexpected_token(found: str) -> list[str]:
        """Hints for a token that is not valid where it appears."""
        suggestions = []
        if found in ('"', "'"):
            suggestions.append("Check for an unmatched quote")
        elif found in ("]", "}"):
            suggestions.append("Check for a missing value or an extra closing bracket")
        elif found == ":":
            suggestions.append("Object members are written as \"name\" : value")
        elif found == ",":
            suggestions.append("Remove the extra comma")
        elif found:
            suggestions.append(
                "Bare words are not values; quote strings and use "
                "true, false, null or undefined"
            )
        suggestions.append("Expected a value, array or object")
        return suggestions

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        """Hints for an array or object missing its closing bracket."""
        if structure_type == "object":
            return [
                "Add a closing brace '}' to end the object",
                "Separate members with commas",
            ]
        return [
            "Add a closing bracket ']' to end the array",
            "Separate elements with commas",
        ]

    @staticmethod
    def suggest_for_invalid_escape(char: str) -> list[str]:
        """Hints for an unsupported backslash escape."""
        return [
            f"'\\{char}' is not a supported escape sequence",
            "Supported escapes: \\\" \\' \\\\ \\t \\n \\r and backslash-newline",
            "Write a literal backslash as '\\\\'",
        ]

    @staticmethod
    def suggest_for_unterminated(literal_type: str) -> list[str]:
        """Hints for a string or block comment running into end of input."""
        if literal_type == "comment":
            return ["Close the block comment with '*/'"]
        return [
            "Close the string with a matching quote",
            "Escape quotes inside the string with a backslash",
        ]
