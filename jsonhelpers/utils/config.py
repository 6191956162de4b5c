"""
Configuration and limits for jsonhelpers parsing.

This module defines resource limits and behavior options for parsing documents.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class SizeLimits:
    """Input and literal size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100


@dataclass
class StructureLimits:
    """Document structure complexity limits."""
    max_nesting_depth: int = 100
    max_object_keys: int = 10000
    max_array_items: int = 100000
    max_total_items: int = 1000000


@dataclass
class ParseLimits:
    """Resource limits applied while parsing."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **limit_args: int,
    ):
        if size_limits is not None:
            self.size_limits = size_limits
        else:
            defaults = SizeLimits()
            self.size_limits = SizeLimits(
                max_input_size=limit_args.get('max_input_size', defaults.max_input_size),
                max_string_length=limit_args.get(
                    'max_string_length', defaults.max_string_length
                ),
                max_number_length=limit_args.get(
                    'max_number_length', defaults.max_number_length
                ),
            )

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            defaults_s = StructureLimits()
            self.structure_limits = StructureLimits(
                max_nesting_depth=limit_args.get(
                    'max_nesting_depth', defaults_s.max_nesting_depth
                ),
                max_object_keys=limit_args.get('max_object_keys', defaults_s.max_object_keys),
                max_array_items=limit_args.get('max_array_items', defaults_s.max_array_items),
                max_total_items=limit_args.get('max_total_items', defaults_s.max_total_items),
            )

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length for individual strings."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_number_length(self) -> int:
        """Maximum length for number literals."""
        assert self.size_limits is not None
        return self.size_limits.max_number_length

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth of arrays and objects."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth

    @property
    def max_object_keys(self) -> int:
        """Maximum number of members in an object."""
        assert self.structure_limits is not None
        return self.structure_limits.max_object_keys

    @property
    def max_array_items(self) -> int:
        """Maximum number of elements in an array."""
        assert self.structure_limits is not None
        return self.structure_limits.max_array_items

    @property
    def max_total_items(self) -> int:
        """Maximum total values in one document."""
        assert self.structure_limits is not None
        return self.structure_limits.max_total_items


@dataclass
class ParsingBehavior:
    """Core parsing behavior settings."""
    identifier_keys: bool = False
    keep_comments: bool = True


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_context: bool = True
    include_suggestions: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for jsonhelpers parsing."""

    limits: Optional[ParseLimits] = None
    behavior: Optional[ParsingBehavior] = None
    error_reporting: Optional[ErrorReporting] = None
    logger: Optional[logging.Logger] = None

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        behavior: Optional[ParsingBehavior] = None,
        error_reporting: Optional[ErrorReporting] = None,
        logger: Optional[logging.Logger] = None,
        **config_options: Any,
    ):
        self.limits = limits or ParseLimits()
        self.logger = logger

        if behavior is not None:
            self.behavior = behavior
        else:
            self.behavior = ParsingBehavior(
                identifier_keys=config_options.get('identifier_keys', False),
                keep_comments=config_options.get('keep_comments', True),
            )

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_context=config_options.get('include_context', True),
                include_suggestions=config_options.get('include_suggestions', True),
                max_error_context=config_options.get('max_error_context', 50),
            )

    @property
    def identifier_keys(self) -> bool:
        """Whether bare identifiers are accepted as member names."""
        assert self.behavior is not None
        return self.behavior.identifier_keys

    @identifier_keys.setter
    def identifier_keys(self, value: bool) -> None:
        """Set bare identifier member names."""
        assert self.behavior is not None
        self.behavior.identifier_keys = value

    @property
    def keep_comments(self) -> bool:
        """Whether parsed comments are attached to values."""
        assert self.behavior is not None
        return self.behavior.keep_comments

    @keep_comments.setter
    def keep_comments(self, value: bool) -> None:
        """Set comment attachment."""
        assert self.behavior is not None
        self.behavior.keep_comments = value

    @property
    def include_context(self) -> bool:
        """Whether errors carry the surrounding source text."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        """Set source context reporting."""
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def include_suggestions(self) -> bool:
        """Whether errors carry suggestions."""
        assert self.error_reporting is not None
        return self.error_reporting.include_suggestions

    @include_suggestions.setter
    def include_suggestions(self, value: bool) -> None:
        """Set suggestion reporting."""
        assert self.error_reporting is not None
        self.error_reporting.include_suggestions = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context on each side of an error."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

    @max_error_context.setter
    def max_error_context(self, value: int) -> None:
        """Set maximum error context length."""
        assert self.error_reporting is not None
        self.error_reporting.max_error_context = value
