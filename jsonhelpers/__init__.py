"""
jsonhelpers - a small in-memory document model for permissive JSON.

jsonhelpers parses a forgiving superset of JSON into a tree of Value objects
and renders such trees back to text.

Key Features:
- Value: a tagged union over undefined, Null, bool, int, double, string,
  array and object, with deep-copy value semantics and explicit moves
- Comments (// and /* */) are kept as metadata on the value they precede
- Objects keep member insertion order
- Single or double quoted strings, trailing commas, undefined literal
- Structured errors with line, column and source context
- Resource limits for nesting depth, literal sizes and item counts

Quick Start:
    import jsonhelpers

    doc = jsonhelpers.parse('{"name": "demo", /* answer */ "value": 42,}')
    obj = doc.as_(jsonhelpers.Object)
    print(obj["value"].comment)        # ' answer '
    print(jsonhelpers.dumps(doc))      # {"name" : "demo", "value" : 42}

    arr = jsonhelpers.Array()
    arr.add(4)
    arr.add(jsonhelpers.Null())
    print(arr)                         # [4, Null]
"""

from .core.engine import load, loads, parse
from .core.render import dump, dumps, to_python
from .model import (
    UNDEFINED,
    Array,
    Bool,
    Double,
    Int,
    Kind,
    Null,
    Object,
    String,
    Undefined,
    Value,
)
from .security.exceptions import (
    InvalidEscapeSequenceError,
    JsonHelpersError,
    ParseError,
    SecurityError,
    TypeMismatchError,
    UnexpectedCharacterError,
    UnexpectedTokenError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from .utils.config import ErrorReporting, ParseConfig, ParseLimits, ParsingBehavior

__version__ = "0.1.0"
__author__ = "jsonhelpers contributors"

__all__ = [
    # Parsing and rendering
    "parse", "loads", "load", "dumps", "dump", "to_python",
    # Document model
    "Value", "Kind", "UNDEFINED",
    "Undefined", "Null", "Bool", "Int", "Double", "String", "Array", "Object",
    # Configuration classes
    "ParseConfig", "ParseLimits", "ParsingBehavior", "ErrorReporting",
    # Exception classes
    "JsonHelpersError", "ParseError", "SecurityError", "TypeMismatchError",
    "UnexpectedCharacterError", "UnterminatedStringError",
    "UnterminatedCommentError", "InvalidEscapeSequenceError",
    "UnexpectedTokenError",
]
