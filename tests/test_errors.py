"""
Tests for lexer error reporting.

Errors are fatal: tokenization either succeeds completely or raises.
"""

import logging
import unittest
import sys
import os

project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from prooflang.lexer import (
    Lexer, LexerError, MalformedNumericLiteralError, UnrecognizedCharacterError, tokenize_string
)
from prooflang.lexer.errors import ERROR_CODES, Diagnostic, suggest_unicode_alternatives


class TestUnrecognizedCharacter(unittest.TestCase):

    def test_lone_at_sign(self):
        with self.assertRaises(UnrecognizedCharacterError) as ctx:
            tokenize_string("@")
        error = ctx.exception
        self.assertEqual(error.char, "@")
        self.assertEqual(error.remaining, "@")
        self.assertEqual(error.offset, 0)
        self.assertEqual(error.code, "L001")

    def test_carries_remaining_input(self):
        with self.assertRaises(UnrecognizedCharacterError) as ctx:
            tokenize_string("x + # y")
        self.assertEqual(ctx.exception.remaining, "# y")
        self.assertEqual(ctx.exception.offset, 4)

    def test_is_a_lexer_error(self):
        with self.assertRaises(LexerError):
            tokenize_string("a ; b")

    def test_suggests_logic_symbols(self):
        with self.assertRaises(UnrecognizedCharacterError) as ctx:
            tokenize_string("p & q")
        self.assertEqual(ctx.exception.diagnostic.suggestions, ["∧"])
        self.assertIn("∧", str(ctx.exception))

    def test_non_printable_character(self):
        with self.assertRaises(UnrecognizedCharacterError) as ctx:
            tokenize_string("\x00")
        self.assertIn("U+0000", ctx.exception.diagnostic.help_text)

    def test_superscript_digit_cannot_start_a_token(self):
        with self.assertRaises(UnrecognizedCharacterError):
            tokenize_string("²")


class TestMalformedNumber(unittest.TestCase):

    def test_two_points(self):
        with self.assertRaises(MalformedNumericLiteralError) as ctx:
            tokenize_string("1.2.3")
        self.assertEqual(ctx.exception.lexeme, "1.2.3")
        self.assertEqual(ctx.exception.code, "L003")

    def test_reports_literal_offset(self):
        with self.assertRaises(MalformedNumericLiteralError) as ctx:
            tokenize_string("x + 4..")
        self.assertEqual(ctx.exception.offset, 4)
        self.assertEqual(ctx.exception.lexeme, "4..")

    def test_leading_point_literal(self):
        with self.assertRaises(MalformedNumericLiteralError):
            tokenize_string(".5.")


class TestAllOrNothing(unittest.TestCase):

    def test_no_partial_result(self):
        lexer = Lexer()
        result = None
        with self.assertRaises(LexerError):
            result = lexer.tokenize("f(x) -> y @")
        self.assertIsNone(result)

    def test_failure_is_logged_at_debug(self):
        with self.assertLogs("prooflang.lexer.lexer", level=logging.DEBUG) as logs:
            with self.assertRaises(LexerError):
                tokenize_string("a @")
        self.assertTrue(any("offset 2" in line for line in logs.output))


class TestDiagnostics(unittest.TestCase):

    def test_error_codes_are_documented(self):
        self.assertIn("L001", ERROR_CODES)
        self.assertIn("L003", ERROR_CODES)

    def test_unicode_alternatives(self):
        self.assertEqual(suggest_unicode_alternatives("|"), ["∨"])
        self.assertEqual(suggest_unicode_alternatives("!"), ["¬"])
        self.assertEqual(suggest_unicode_alternatives("$"), [])

    def test_no_suggestion_without_ascii_look_alike(self):
        with self.assertRaises(UnrecognizedCharacterError) as ctx:
            tokenize_string("@")
        self.assertEqual(ctx.exception.diagnostic.suggestions, [])
        self.assertIn("not valid in prooflang source", ctx.exception.diagnostic.help_text)

    def test_diagnostic_str(self):
        diagnostic = Diagnostic("Malformed numeric literal: '1..'", 3, "1.. x", code="L003")
        self.assertEqual(
            str(diagnostic),
            "ERROR[L003]: Malformed numeric literal: '1..'\n  --> offset 3: '1.. x'\n"
        )

    def test_str_truncates_long_context(self):
        with self.assertRaises(UnrecognizedCharacterError) as ctx:
            tokenize_string("#" + "a" * 50)
        text = str(ctx.exception)
        self.assertTrue(text.startswith("ERROR[L001]"))
        self.assertIn("...", text)


if __name__ == '__main__':
    unittest.main()
