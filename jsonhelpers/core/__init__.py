"""
jsonhelpers Core Parsing Engine.

This module provides the lexer, the parser and rendering of Value trees.
"""

from .engine import Parser, load, loads, parse
from .render import dump, dumps, to_python
from .tokenizer import Lexer, Position, Token, TokenType

__all__ = [
    'parse', 'loads', 'load', 'Parser',
    'dumps', 'dump', 'to_python',
    'Lexer', 'Token', 'TokenType', 'Position',
]
