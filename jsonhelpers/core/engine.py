"""
Parser for jsonhelpers - builds a Value tree from lexer tokens.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import NoReturn, Optional, TextIO, Union

from ..model.containers import Array, Object
from ..model.value import Value
from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    ParseError,
    UnexpectedTokenError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .parser_base import BaseParserMixin
from .tokenizer import Lexer, Position, Token, TokenType


class Parser(BaseParserMixin):
    """Recursive-descent parser over a token stream.

    Tokens are pulled from the iterable one at a time, so a Lexer.tokenize()
    generator is only advanced as far as the parser has read.

    Grammar::

        document := value EOF
        value    := literal | array | object | comment value
        array    := '[' [ value (',' value)* [','] ] ']'
        object   := '{' [ member (',' member)* [','] ] '}'
        member   := [comment] name ':' value

    A comment in front of a value is attached to it; when several comments
    precede a value the first one wins. A comment in front of a member name
    goes to the member's value unless the value has its own. Comments in any
    other position have nothing to attach to and are dropped.
    """

    def __init__(
        self,
        tokens: Iterable[Token],
        config: ParseConfig,
        error_reporter: Optional[ErrorReporter] = None,
        validator: Optional[LimitValidator] = None,
    ):
        self._tokens: Iterator[Token] = iter(tokens)
        self._current: Optional[Token] = None
        self.token_count = 0
        self.config = config

        if validator is None and config.limits:
            validator = LimitValidator(config.limits, error_reporter)
        self.validator = validator
        self.error_reporter = error_reporter
        self.logger = config.logger or logging.getLogger(__name__)

    def current_token(self) -> Token:
        """Get the current token, pulling it from the stream if needed."""
        if self._current is None:
            token = next(self._tokens, None)
            if token is None:
                token = Token(TokenType.EOF, "", Position(0, 0))
            else:
                self.token_count += 1
            self._current = token
        return self._current

    def advance(self) -> Token:
        """Consume the current token and return it."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self._current = None
        return token

    def _collect_comments(self) -> Optional[str]:
        """Consume consecutive comments, returning the first one's text."""
        comment = None
        while self.current_token().type == TokenType.COMMENT:
            token = self.advance()
            if comment is None:
                comment = token.value
            else:
                self._drop_comment(token)
        return comment

    def _skip_comments(self) -> None:
        """Consume comments that cannot be attached to anything."""
        while self.current_token().type == TokenType.COMMENT:
            self._drop_comment(self.advance())

    def _drop_comment(self, token: Token) -> None:
        self.logger.debug(
            f"Dropping comment at line {token.position.line}, "
            f"column {token.position.column}: no value to attach to"
        )

    def parse_value(self, leading_comment: Optional[str] = None) -> Value:
        """Parse a value, attaching any comment that precedes it."""
        comment = self._collect_comments()
        if comment is None:
            comment = leading_comment

        value = self._parse_bare_value()

        if comment is not None and self.config.keep_comments:
            value.comment = comment
        return value

    def _parse_bare_value(self) -> Value:
        token = self.current_token()

        node = self.scalar_from_token(token)
        if node is not None:
            self.validate_literal(token, self.validator)
            self.advance()
            self._count_item(token.position)
            return Value(node, move=True)

        if token.type == TokenType.LBRACKET:
            return self.parse_array()

        if token.type == TokenType.LBRACE:
            return self.parse_object()

        self._raise_unexpected(
            token,
            "a value",
            ErrorSuggestionEngine.suggest_for_unexpected_token(
                "" if token.type == TokenType.EOF else str(token.value)
            ),
        )

    def parse_array(self) -> Value:
        """Parse an array, trailing comma allowed."""
        opening = self._expect(TokenType.LBRACKET, "'['")
        self.validate_and_enter_structure(self.validator, opening.position)
        self._count_item(opening.position)

        arr = Array()
        while True:
            comment = self._collect_comments()
            element = self.current_token()
            if element.type == TokenType.RBRACKET:
                if comment is not None:
                    self.logger.debug("Dropping comment before ']'")
                break

            arr.add(self.parse_value(comment), move=True)
            if self.validator:
                self.validator.validate_array_items(len(arr), element.position)

            self._skip_comments()
            if self.current_token().type == TokenType.COMMA:
                self.advance()
                continue
            if self.current_token().type == TokenType.RBRACKET:
                break
            self._raise_unclosed("array", "',' or ']'")

        self.advance()
        self.validate_and_exit_structure(self.validator)
        return Value(arr, move=True)

    def parse_object(self) -> Value:
        """Parse an object, trailing comma allowed. Repeated names overwrite."""
        opening = self._expect(TokenType.LBRACE, "'{'")
        self.validate_and_enter_structure(self.validator, opening.position)
        self._count_item(opening.position)

        obj = Object()
        while True:
            comment = self._collect_comments()
            member = self.current_token()
            if member.type == TokenType.RBRACE:
                if comment is not None:
                    self.logger.debug("Dropping comment before '}'")
                break

            name = self._parse_member_name()
            self._skip_comments()
            self._expect(TokenType.COLON, "':'")

            obj.set(name, self.parse_value(comment), move=True)
            if self.validator:
                self.validator.validate_object_keys(len(obj), member.position)

            self._skip_comments()
            if self.current_token().type == TokenType.COMMA:
                self.advance()
                continue
            if self.current_token().type == TokenType.RBRACE:
                break
            self._raise_unclosed("object", "',' or '}'")

        self.advance()
        self.validate_and_exit_structure(self.validator)
        return Value(obj, move=True)

    def _parse_member_name(self) -> str:
        token = self.current_token()
        if token.type == TokenType.STRING or (
            token.type == TokenType.IDENTIFIER and self.config.identifier_keys
        ):
            self.validate_literal(token, self.validator)
            self.advance()
            return token.value

        expected = (
            "a member name" if self.config.identifier_keys else "a quoted member name"
        )
        suggestions = ["Object members are written as \"name\" : value"]
        if token.type == TokenType.IDENTIFIER:
            suggestions.append(f"Quote the member name: \"{token.value}\"")
        self._raise_unexpected(token, expected, suggestions)

    def parse(self) -> Value:
        """Parse a complete document: one value, then only comments."""
        value = self.parse_value()
        self._skip_comments()

        token = self.current_token()
        if token.type != TokenType.EOF:
            self._raise_unexpected(
                token,
                "end of input",
                ["A document holds a single value; wrap several in an array"],
            )
        return value

    def _expect(self, token_type: TokenType, description: str) -> Token:
        token = self.current_token()
        if token.type != token_type:
            self._raise_unexpected(token, description)
        return self.advance()

    def _count_item(self, position: Position) -> None:
        if self.validator:
            self.validator.count_item(position)

    def _raise_unclosed(self, structure_type: str, expected: str) -> NoReturn:
        token = self.current_token()
        closer = "]" if structure_type == "array" else "}"
        message = (
            f"Unexpected end of input, expected '{closer}' to close {structure_type}"
            if token.type == TokenType.EOF
            else None
        )
        self._raise_unexpected(
            token,
            expected,
            ErrorSuggestionEngine.suggest_for_unclosed_structure(structure_type),
            message,
        )

    def _raise_unexpected(
        self,
        token: Token,
        expected: str,
        suggestions: Optional[list[str]] = None,
        message: Optional[str] = None,
    ) -> NoReturn:
        found = self.describe_token(token)
        self._raise_parse_error(
            message or f"Expected {expected} but found {found}",
            token.position,
            suggestions,
            expected=expected,
            found=found,
        )

    def _raise_parse_error(
        self,
        message: str,
        position: Position,
        suggestions: Optional[list[str]] = None,
        expected: str = "",
        found: str = "",
    ) -> NoReturn:
        if self.error_reporter:
            raise self.error_reporter.create_parse_error(
                message,
                position,
                suggestions,
                UnexpectedTokenError,
                expected=expected,
                found=found,
            )
        raise UnexpectedTokenError(
            message, position, suggestions=suggestions, expected=expected, found=found
        )


def loads(
    s: Union[str, bytes, bytearray],
    *,
    config: Optional[ParseConfig] = None,
) -> Value:
    """
    Parse a document held in a string.

    Args:
        s: Document text; bytes and bytearray are decoded as UTF-8
        config: Optional ParseConfig for limits, behavior and error reporting

    Returns:
        The document's root Value

    Raises:
        ParseError: If the text is not a well-formed document
        SecurityError: If a configured limit is exceeded
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8")
    return parse(s, config=config)


def load(fp: TextIO, *, config: Optional[ParseConfig] = None) -> Value:
    """
    Parse a document read from a file-like object.

    The stream is read to the end before parsing starts.
    """
    return loads(fp.read(), config=config)


def parse(
    text: Union[str, TextIO],
    config: Optional[ParseConfig] = None,
) -> Value:
    """
    Parse a permissive JSON string or stream into a Value tree.

    Args:
        text: The document text, or a file-like object to read it from
        config: Optional ParseConfig; defaults apply when omitted

    Returns:
        The document's root Value

    Raises:
        ParseError: If parsing fails; the subclass names the failure and the
            error carries the line and column where it was detected
        SecurityError: If a configured limit is exceeded
        ValueError: If text is neither a string nor a readable object
    """
    if config is None:
        config = ParseConfig()

    return _parse_internal(text, config)


def _parse_internal(text: Union[str, TextIO], config: ParseConfig) -> Value:
    """Internal parsing function shared by parse(), loads() and load()."""
    if hasattr(text, "read"):
        text = text.read()  # type: ignore[union-attr]
        if isinstance(text, (bytes, bytearray)):
            text = text.decode("utf-8")

    if not isinstance(text, str):
        raise ValueError("Input must be a string or file-like object")

    logger = config.logger or logging.getLogger(__name__)

    error_reporter = ErrorReporter(
        text,
        config.max_error_context,
        include_context=config.include_context,
        include_suggestions=config.include_suggestions,
    )
    validator = None
    if config.limits:
        validator = LimitValidator(config.limits, error_reporter)
        validator.validate_input_size(text)

    lexer = Lexer(text, error_reporter, validator)
    parser = Parser(lexer.tokenize(), config, error_reporter, validator)

    logger.debug(f"Parsing document of {len(text)} characters")
    try:
        value = parser.parse()
    except ParseError as e:
        logger.debug(f"Parse failed after {parser.token_count} tokens: {e.message}")
        raise
    except RecursionError as e:
        # nesting beyond what the interpreter stack can descend into
        position = lexer.current_position()
        logger.debug(
            f"Recursion limit reached at line {position.line}, "
            f"column {position.column}"
        )
        raise error_reporter.create_security_error(
            "Nesting depth exceeds the interpreter's recursion limit", position
        ) from e

    logger.debug(
        f"Parsed {value.kind.value} document from {parser.token_count} tokens"
    )
    return value
