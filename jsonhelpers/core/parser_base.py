"""
Base parser functionality: token conversion and structure bookkeeping.
"""

from typing import Optional

from ..model.scalars import (
    Bool,
    Double,
    Int,
    Node,
    Null,
    String,
    Undefined,
    format_int,
)
from ..security.limits import LimitValidator
from .tokenizer import Position, Token, TokenType

_TOKEN_DESCRIPTIONS = {
    TokenType.EOF: "end of input",
    TokenType.COMMENT: "comment",
    TokenType.IDENTIFIER: "identifier",
    TokenType.STRING: "string",
    TokenType.BOOLEAN: "boolean",
    TokenType.INTEGER: "integer",
    TokenType.DOUBLE: "double",
    TokenType.NULL: "null",
    TokenType.UNDEFINED: "undefined",
}

# longer literals are cut short in error messages
_MAX_DESCRIBED_LENGTH = 40


class BaseParserMixin:
    """Common parsing helpers used by Parser."""

    def scalar_from_token(self, token: Token) -> Optional[Node]:
        """Build the scalar node a literal token stands for, or None."""
        if token.type == TokenType.UNDEFINED:
            return Undefined()
        if token.type == TokenType.NULL:
            return Null()
        if token.type == TokenType.BOOLEAN:
            return Bool(token.value)
        if token.type == TokenType.INTEGER:
            return Int(token.value)
        if token.type == TokenType.DOUBLE:
            return Double(token.value)
        if token.type == TokenType.STRING:
            return String(token.value)
        return None

    def describe_token(self, token: Token) -> str:
        """Short human-readable description of a token for error messages."""
        if token.type == TokenType.INTEGER:
            text = format_int(token.value)
        elif token.type in (TokenType.IDENTIFIER, TokenType.STRING, TokenType.DOUBLE):
            text = repr(token.value)
        elif token.type in _TOKEN_DESCRIPTIONS:
            return _TOKEN_DESCRIPTIONS[token.type]
        else:
            return f"'{token.value}'"

        if len(text) > _MAX_DESCRIBED_LENGTH:
            text = text[:_MAX_DESCRIBED_LENGTH] + "..."
        return f"{_TOKEN_DESCRIPTIONS[token.type]} {text}"

    def validate_literal(
        self, token: Token, validator: Optional[LimitValidator]
    ) -> None:
        """Check a string literal or member name against max_string_length.

        Number literals are measured by the lexer, as written.
        """
        if validator and token.type == TokenType.STRING:
            validator.validate_string_length(token.value, token.position)

    def validate_and_enter_structure(
        self, validator: Optional[LimitValidator], position: Position
    ) -> None:
        """Validate and enter a structure if validator exists."""
        if validator:
            validator.enter_structure(position)

    def validate_and_exit_structure(self, validator: Optional[LimitValidator]) -> None:
        """Validate and exit a structure if validator exists."""
        if validator:
            validator.exit_structure()
