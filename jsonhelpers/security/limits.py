"""
Resource limits for jsonhelpers parsing.

One LimitValidator is shared by the lexer and the parser of a single parse
call. Every check raises SecurityError as soon as a configured limit is
crossed, positioned at the token that crossed it.
"""

from typing import TYPE_CHECKING, Optional

from ..utils.config import ParseLimits
from .exceptions import ErrorReporter, SecurityError

if TYPE_CHECKING:
    from ..core.tokenizer import Position


class LimitValidator:
    """Tracks parser progress against ParseLimits."""

    def __init__(
        self,
        limits: ParseLimits,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        self.limits = limits
        self.error_reporter = error_reporter
        self.nesting_depth = 0
        self.total_items = 0

    def _check(
        self,
        what: str,
        amount: int,
        limit: int,
        position: Optional["Position"] = None,
    ) -> None:
        if amount <= limit:
            return
        message = f"{what} {amount} exceeds limit {limit}"
        if self.error_reporter:
            raise self.error_reporter.create_security_error(message, position)
        raise SecurityError(message, position)

    def validate_input_size(self, text: str) -> None:
        """Check the whole document against max_input_size."""
        self._check("Input size", len(text), self.limits.max_input_size)

    def validate_string_length(
        self, string: str, position: Optional["Position"] = None
    ) -> None:
        """Check a decoded string literal or member name."""
        self._check(
            "String length", len(string), self.limits.max_string_length, position
        )

    def validate_number_length(
        self, literal: str, position: Optional["Position"] = None
    ) -> None:
        """Check a number literal as written in the source, sign included."""
        self._check(
            "Number length", len(literal), self.limits.max_number_length, position
        )

    def enter_structure(self, position: Optional["Position"] = None) -> None:
        """Record an opening bracket or brace."""
        self.nesting_depth += 1
        self._check(
            "Nesting depth",
            self.nesting_depth,
            self.limits.max_nesting_depth,
            position,
        )

    def exit_structure(self) -> None:
        """Record a closing bracket or brace."""
        if self.nesting_depth > 0:
            self.nesting_depth -= 1

    def validate_object_keys(
        self, key_count: int, position: Optional["Position"] = None
    ) -> None:
        """Check the member count of the object being built."""
        self._check(
            "Object key count", key_count, self.limits.max_object_keys, position
        )

    def validate_array_items(
        self, item_count: int, position: Optional["Position"] = None
    ) -> None:
        """Check the element count of the array being built."""
        self._check(
            "Array item count", item_count, self.limits.max_array_items, position
        )

    def count_item(self, position: Optional["Position"] = None) -> None:
        """Count one more value in the document."""
        self.total_items += 1
        self._check(
            "Total item count", self.total_items, self.limits.max_total_items, position
        )
