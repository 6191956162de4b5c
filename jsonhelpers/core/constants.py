"""
Common constants and mappings used across the jsonhelpers library.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tokenizer import TokenType

# Escapes accepted inside string literals. A backslash followed by a newline
# is a line continuation and handled separately by the lexer.
STRING_ESCAPE_MAP = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "t": "\t",
    "n": "\n",
    "r": "\r",
}

# Inverse of STRING_ESCAPE_MAP for rendering double-quoted strings.
RENDER_ESCAPE_MAP = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}

QUOTE_CHARS = "\"'"
WHITESPACE_CHARS = " \t\n\r"

# Digits converted per step between int and text. Below the smallest digit
# limit the interpreter can be configured with for str()/int().
DECIMAL_CHUNK_DIGITS = 500


def get_structural_token_map() -> dict[str, "TokenType"]:
    """Get the mapping of structural characters to TokenType enums."""
    # Import here to avoid circular imports
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
        "[": TokenType.LBRACKET,
        "]": TokenType.RBRACKET,
        ":": TokenType.COLON,
        ",": TokenType.COMMA,
    }


def get_reserved_word_map() -> dict[str, tuple["TokenType", object]]:
    """Get the reserved literal words with their token type and value."""
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "null": (TokenType.NULL, None),
        "undefined": (TokenType.UNDEFINED, None),
        "true": (TokenType.BOOLEAN, True),
        "false": (TokenType.BOOLEAN, False),
    }
