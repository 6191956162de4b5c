"""
Test cases for core engine error handling.

Tests focus on error kinds, messages and reported positions for malformed
input, plus resource limit enforcement during parsing.
"""

import unittest

import jsonhelpers
from jsonhelpers.core.engine import _parse_internal, parse
from jsonhelpers.model.containers import Array
from jsonhelpers.model.scalars import Int
from jsonhelpers.security.exceptions import (
    InvalidEscapeSequenceError,
    JsonHelpersError,
    ParseError,
    SecurityError,
    UnexpectedCharacterError,
    UnexpectedTokenError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from jsonhelpers.utils.config import ErrorReporting, ParseConfig, ParseLimits


class TestSyntaxErrors(unittest.TestCase):
    """Test grammar violations."""

    def test_error_messages(self):
        """Each malformed document produces a descriptive message."""
        cases = [
            ("[1, 2", "Unexpected end of input, expected ']' to close array"),
            ('{"a": 1', "Unexpected end of input, expected '}' to close object"),
            ("[1 2]", "Expected ',' or ']' but found integer 2"),
            ('{"a": 1 "b": 2}', "Expected ',' or '}' but found string 'b'"),
            ('{"a" 1}', "Expected ':' but found integer 1"),
            ("[1, , 3]", "Expected a value but found ','"),
            ("", "Expected a value but found end of input"),
            ("   ", "Expected a value but found end of input"),
            ("1 2", "Expected end of input but found integer 2"),
            ('{"a": 1} x', "Expected end of input but found identifier 'x'"),
            ("]", "Expected a value but found ']'"),
            ("{1: 2}", "Expected a quoted member name but found integer 1"),
        ]

        for text, message in cases:
            with self.subTest(text=text):
                with self.assertRaises(UnexpectedTokenError) as cm:
                    parse(text)
                self.assertEqual(cm.exception.message, message)

    def test_expected_and_found(self):
        """Token errors record what was expected and what was seen."""
        with self.assertRaises(UnexpectedTokenError) as cm:
            parse('{"a" 1}')

        self.assertEqual(cm.exception.expected, "':'")
        self.assertEqual(cm.exception.found, "integer 1")

    def test_missing_bracket_position(self):
        """Unclosed structures are reported where input ran out."""
        with self.assertRaises(UnexpectedTokenError) as cm:
            parse("[1,\n 2")

        self.assertEqual(cm.exception.line, 2)
        self.assertEqual(cm.exception.column, 3)

    def test_error_position_in_message(self):
        """The rendered message names line and column."""
        with self.assertRaises(ParseError) as cm:
            parse('{\n  "a": 1,\n  "b" 2\n}')

        error = cm.exception
        self.assertEqual((error.line, error.column), (3, 7))
        self.assertIn("at line 3, column 7", str(error))

    def test_trailing_comment_allowed(self):
        """Only comments may follow the root value."""
        self.assertEqual(str(parse("[1] // done\n/* really */")), "[1]")


class TestLexicalErrorsThroughParse(unittest.TestCase):
    """Test that lexer errors surface unchanged from parse()."""

    def test_error_kinds(self):
        """Each lexical failure raises its own error type."""
        cases = [
            ('"unterminated', UnterminatedStringError),
            ("['a', 'b", UnterminatedStringError),
            ("[1] /* open", UnterminatedCommentError),
            ('"bad \\q escape"', InvalidEscapeSequenceError),
            ("[1, @]", UnexpectedCharacterError),
            ("[1.]", UnexpectedCharacterError),
        ]

        for text, error_class in cases:
            with self.subTest(text=text):
                with self.assertRaises(error_class) as cm:
                    parse(text)
                self.assertIsInstance(cm.exception, ParseError)
                self.assertIsInstance(cm.exception, JsonHelpersError)
                self.assertIsNotNone(cm.exception.line)
                self.assertIsNotNone(cm.exception.column)

    def test_lexical_error_after_valid_prefix(self):
        """Errors deep in the input report their own position."""
        with self.assertRaises(UnexpectedCharacterError) as cm:
            parse('{"a": [1, 2],\n "b": #}')

        self.assertEqual((cm.exception.line, cm.exception.column), (2, 7))


class TestErrorReportingOptions(unittest.TestCase):
    """Test ErrorReporting switches."""

    def test_context_included_by_default(self):
        """Errors carry the source line and a caret by default."""
        with self.assertRaises(ParseError) as cm:
            parse("[1 2]")

        error = cm.exception
        self.assertIsNotNone(error.context)
        self.assertEqual(error.context.line_text, "[1 2]")
        self.assertEqual(error.context.column_indicator, "   ^")
        self.assertIn("Context:", str(error))
        self.assertTrue(error.suggestions)
        self.assertIn("Suggestions:", str(error))

    def test_context_disabled(self):
        """include_context=False drops the source text but keeps position."""
        config = ParseConfig(error_reporting=ErrorReporting(include_context=False))
        with self.assertRaises(ParseError) as cm:
            parse("[1 2]", config)

        error = cm.exception
        self.assertIsNone(error.context)
        self.assertEqual(error.column, 4)
        self.assertNotIn("Context:", str(error))

    def test_suggestions_disabled(self):
        """include_suggestions=False drops the suggestion list."""
        config = ParseConfig(include_suggestions=False)
        with self.assertRaises(ParseError) as cm:
            parse("[1 2]", config)

        self.assertEqual(cm.exception.suggestions, [])
        self.assertNotIn("Suggestions:", str(cm.exception))

    def test_max_error_context(self):
        """Context is clipped to max_error_context characters each side."""
        text = "[" + "1, " * 40 + "@]"
        config = ParseConfig(max_error_context=5)
        with self.assertRaises(UnexpectedCharacterError) as cm:
            parse(text, config)

        context = cm.exception.context
        self.assertEqual(len(context.context_before), 5)
        self.assertEqual(context.context_after, "@]")


class TestLimitsDuringParsing(unittest.TestCase):
    """Test that ParseLimits are enforced by the parser."""

    def test_limit_violations(self):
        """Each limit raises SecurityError when crossed."""
        cases = [
            (ParseLimits(max_input_size=5), "[1, 2, 3]"),
            (ParseLimits(max_string_length=3), '["abcd"]'),
            (ParseLimits(max_number_length=3), "[12345]"),
            (ParseLimits(max_nesting_depth=2), "[[[1]]]"),
            (ParseLimits(max_array_items=2), "[1, 2, 3]"),
            (ParseLimits(max_object_keys=1), '{"a": 1, "b": 2}'),
            (ParseLimits(max_total_items=3), "[1, 2, 3]"),
        ]

        for limits, text in cases:
            with self.subTest(text=text, limits=limits):
                with self.assertRaises(SecurityError):
                    parse(text, ParseConfig(limits=limits))

    def test_within_limits(self):
        """Documents inside every limit parse normally."""
        limits = ParseLimits(
            max_input_size=100,
            max_string_length=10,
            max_nesting_depth=3,
            max_array_items=5,
            max_object_keys=5,
        )
        value = parse('{"a": [[1, "short"]]}', ParseConfig(limits=limits))
        self.assertEqual(str(value), '{"a" : [[1, "short"]]}')

    def test_member_names_are_length_checked(self):
        """Member names count against max_string_length."""
        config = ParseConfig(limits=ParseLimits(max_string_length=3))
        with self.assertRaises(SecurityError):
            parse('{"long_name": 1}', config)

    def test_security_error_is_not_parse_error(self):
        """Limit failures are reported separately from syntax errors."""
        config = ParseConfig(limits=ParseLimits(max_input_size=1))
        with self.assertRaises(SecurityError) as cm:
            parse("[1]", config)

        self.assertNotIsInstance(cm.exception, ParseError)
        self.assertIsInstance(cm.exception, jsonhelpers.JsonHelpersError)

    def test_limit_error_position_and_context(self):
        """Limit failures point at the token that crossed the limit."""
        config = ParseConfig(limits=ParseLimits(max_string_length=3))
        with self.assertRaises(SecurityError) as cm:
            parse('[1, "abcdef"]', config)

        error = cm.exception
        self.assertEqual((error.position.line, error.position.column), (1, 5))
        self.assertIn("at line 1, column 5", str(error))
        self.assertEqual(error.context.line_text, '[1, "abcdef"]')
        self.assertEqual(error.context.column_indicator, "    ^")

    def test_structure_limits_are_positioned(self):
        """Depth and count failures report the bracket or element position."""
        cases = [
            (ParseLimits(max_nesting_depth=2), "[[\n  [1]]]", (2, 3)),
            (ParseLimits(max_array_items=2), "[1, 2, 3]", (1, 8)),
            (ParseLimits(max_object_keys=1), '{"a": 1,\n "b": 2}', (2, 2)),
            (ParseLimits(max_total_items=2), "[1, 2]", (1, 5)),
        ]

        for limits, text, expected in cases:
            with self.subTest(text=text):
                with self.assertRaises(SecurityError) as cm:
                    parse(text, ParseConfig(limits=limits))
                position = cm.exception.position
                self.assertEqual((position.line, position.column), expected)


class TestNumberLiteralLimits(unittest.TestCase):
    """Test max_number_length against literals as written."""

    def test_long_integer_rejected_by_default(self):
        """A very long integer is a SecurityError, not an interpreter error."""
        with self.assertRaises(SecurityError) as cm:
            parse("1" * 5000)
        self.assertIn("Number length 5000 exceeds limit 100", str(cm.exception))
        self.assertEqual(cm.exception.position.column, 1)

    def test_long_integer_within_raised_limit(self):
        """Integers past the interpreter's str()/int() digit limit still parse."""
        config = ParseConfig(limits=ParseLimits(max_number_length=10000))
        value = parse("1" * 5000, config)

        self.assertEqual(value.as_(Int).value, (10 ** 5000 - 1) // 9)
        self.assertEqual(str(value), "1" * 5000)

    def test_long_negative_integer(self):
        """The sign is kept on long integers."""
        config = ParseConfig(limits=ParseLimits(max_number_length=10000))
        value = parse("[-1" + "0" * 6000 + "]", config)

        self.assertEqual(value.as_(Array)[0].as_(Int).value, -(10 ** 6000))
        self.assertEqual(str(value), "[-1" + "0" * 6000 + "]")

    def test_double_measured_as_written(self):
        """Fraction and exponent digits count toward the length."""
        cases = [
            "0." + "0" * 140 + "1",
            "1." + "0" * 99,
            "1e" + "0" * 99,
        ]

        for text in cases:
            with self.subTest(length=len(text)):
                with self.assertRaises(SecurityError):
                    parse(text)

    def test_sign_counts_toward_length(self):
        """The minus sign is part of the literal."""
        parse("9" * 100)
        with self.assertRaises(SecurityError):
            parse("-" + "9" * 100)

    def test_literal_positioned(self):
        """The error points at the first character of the literal."""
        config = ParseConfig(limits=ParseLimits(max_number_length=3))
        with self.assertRaises(SecurityError) as cm:
            parse("[1,\n  -1234]", config)

        position = cm.exception.position
        self.assertEqual((position.line, position.column), (2, 3))


class TestDeepNesting(unittest.TestCase):
    """Test nesting deeper than the interpreter stack allows."""

    def test_recursion_limit_reported_as_security_error(self):
        """Nesting past the recursion limit is a positioned SecurityError."""
        config = ParseConfig(limits=ParseLimits(max_nesting_depth=5000))
        with self.assertRaises(SecurityError) as cm:
            parse("[" * 2000, config)

        error = cm.exception
        self.assertIn("recursion limit", error.message)
        self.assertIsNotNone(error.position)
        self.assertEqual(error.position.line, 1)
        self.assertIsInstance(error.__cause__, RecursionError)

    def test_nested_objects(self):
        """Objects nest through the same recursion."""
        config = ParseConfig(limits=ParseLimits(max_nesting_depth=5000))
        with self.assertRaises(SecurityError):
            parse('{"a": ' * 2000, config)

    def test_depth_limit_checked_first(self):
        """The configured depth limit applies before the stack runs out."""
        with self.assertRaises(SecurityError) as cm:
            parse("[" * 2000)
        self.assertIn("Nesting depth 101 exceeds limit 100", str(cm.exception))


class TestInputValidation(unittest.TestCase):
    """Test rejection of unusable inputs."""

    def test_non_string_input(self):
        """Only strings and readable objects are accepted."""
        for bad in (123, None, ["[1]"]):
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    _parse_internal(bad, ParseConfig())


if __name__ == '__main__':
    unittest.main()
