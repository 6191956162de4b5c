"""
jsonhelpers errors and resource limits.

This module provides the exception hierarchy, error reporting and limit
validation.
"""

from .exceptions import (
    ErrorContext,
    ErrorReporter,
    ErrorSuggestionEngine,
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
from .limits import LimitValidator

__all__ = [
    'JsonHelpersError', 'ParseError', 'SecurityError', 'TypeMismatchError',
    'UnexpectedCharacterError', 'UnterminatedStringError',
    'UnterminatedCommentError', 'InvalidEscapeSequenceError',
    'UnexpectedTokenError',
    'ErrorContext', 'ErrorReporter', 'ErrorSuggestionEngine', 'LimitValidator',
]
