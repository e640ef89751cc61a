"""
Error handling tests for the RDL lexer.

Tests cover:
- Illegal characters, lone '!' and unterminated strings
- Diagnostics and their rendering
- Resuming after an error and collecting errors with tokenize()

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from rdl.lexer import (
    Lexer, Token, TokenType, TokenCategory, LexerError, IllegalCharacterError,
    LoneBangError, UnterminatedStringError, tokenize_string
)
from rdl.lexer.errors import ERROR_CODES


class TestIllegalCharacter(unittest.TestCase):
    """Characters that start no token."""

    def test_at_sign(self):
        """@ raises IllegalCharacterError at line 1, column 0."""
        with self.assertRaises(IllegalCharacterError) as ctx:
            Lexer("@").next_token()

        error = ctx.exception
        self.assertEqual(error.char, "@")
        self.assertEqual((error.line, error.column), (1, 0))
        self.assertEqual(error.code, "L001")

    def test_error_position_after_newline(self):
        """Error location follows line/column tracking."""
        lexer = Lexer("a\n  #")
        lexer.next_token()

        with self.assertRaises(IllegalCharacterError) as ctx:
            lexer.next_token()

        self.assertEqual(ctx.exception.location.line, 2)
        self.assertEqual(ctx.exception.location.column, 2)
        self.assertEqual(ctx.exception.location.offset, 4)

    def test_carriage_return_is_illegal(self):
        """Only space, tab and newline count as whitespace."""
        with self.assertRaises(IllegalCharacterError) as ctx:
            Lexer("\r\n").next_token()

        self.assertIn("U+000D", ctx.exception.diagnostic.help_text)

    def test_scanning_resumes_after_error(self):
        """The cursor is left past the offending character."""
        lexer = Lexer("a $ b")

        self.assertEqual(lexer.next_token().text, "a")
        with self.assertRaises(IllegalCharacterError):
            lexer.next_token()
        self.assertEqual(lexer.next_token(), Token(TokenType.IDENTIFIER, "b", 1, 4))
        self.assertEqual(lexer.next_token().kind, TokenType.EOF)

    def test_error_token(self):
        """Every error exposes an ILLEGAL token for the offending text."""
        with self.assertRaises(LexerError) as ctx:
            Lexer("  ;").next_token()

        token = ctx.exception.token
        self.assertEqual(token, Token(TokenType.ILLEGAL, ";", 1, 2))
        self.assertEqual(token.category, TokenCategory.ILLEGAL)
        self.assertTrue(token.is_illegal)


class TestLoneBang(unittest.TestCase):
    """'!' must be followed by '='."""

    def test_lone_bang(self):
        """A bare ! raises LoneBangError."""
        lexer = Lexer("a ! b")
        lexer.next_token()

        with self.assertRaises(LoneBangError) as ctx:
            lexer.next_token()

        self.assertEqual(ctx.exception.char, "!")
        self.assertEqual(ctx.exception.column, 2)
        self.assertEqual(ctx.exception.code, "L003")
        self.assertEqual(ctx.exception.diagnostic.suggestions, ["!="])
        self.assertEqual(lexer.next_token().text, "b")

    def test_lone_bang_at_end_of_input(self):
        """A trailing ! is still an error."""
        with self.assertRaises(LoneBangError):
            Lexer("!").next_token()

    def test_lone_bang_is_illegal_character(self):
        """LoneBangError can be caught as IllegalCharacterError."""
        with self.assertRaises(IllegalCharacterError):
            Lexer("!a").next_token()


class TestUnterminatedString(unittest.TestCase):
    """String literals that never close."""

    def test_unterminated(self):
        """The error is anchored at the opening quote."""
        with self.assertRaises(UnterminatedStringError) as ctx:
            Lexer('"unterminated').next_token()

        error = ctx.exception
        self.assertEqual((error.line, error.column), (1, 0))
        self.assertEqual(error.code, "L002")
        self.assertEqual(error.partial_text, "unterminated")
        self.assertEqual(error.token.text, '"unterminated')

    def test_unterminated_consumes_rest_of_input(self):
        """After the error the next token is EOF."""
        lexer = Lexer('x = "abc\ndef')
        lexer.next_token()
        lexer.next_token()

        with self.assertRaises(UnterminatedStringError) as ctx:
            lexer.next_token()

        self.assertEqual(ctx.exception.column, 4)
        self.assertEqual(lexer.next_token(), Token(TokenType.EOF, "", 2, 3))


class TestDiagnostics(unittest.TestCase):
    """Rendering of error diagnostics."""

    def test_str_includes_location(self):
        """str(error) names the file, line and column."""
        with self.assertRaises(LexerError) as ctx:
            Lexer("@", "main.rdl").next_token()

        text = str(ctx.exception)
        self.assertTrue(text.startswith("ERROR: Illegal character: '@'"))
        self.assertIn("  --> main.rdl:1:0", text)
        self.assertIn("help:", text)

    def test_str_lists_suggestions(self):
        with self.assertRaises(LoneBangError) as ctx:
            Lexer("!").next_token()

        self.assertIn("suggestions:\n    - !=", str(ctx.exception))

    def test_error_codes_are_documented(self):
        """Every code used by the factories has a title."""
        self.assertEqual(set(ERROR_CODES), {"L001", "L002", "L003"})


class TestErrorCollection(unittest.TestCase):
    """tokenize() keeps going and records every error."""

    def test_collects_all_errors(self):
        """Errors are recorded and ILLEGAL tokens kept in place."""
        lexer = Lexer("a @ b # c")

        tokens = lexer.tokenize()

        self.assertEqual(
            [(t.kind, t.text) for t in tokens],
            [
                (TokenType.IDENTIFIER, "a"),
                (TokenType.ILLEGAL, "@"),
                (TokenType.IDENTIFIER, "b"),
                (TokenType.ILLEGAL, "#"),
                (TokenType.IDENTIFIER, "c"),
                (TokenType.EOF, ""),
            ],
        )
        self.assertTrue(lexer.has_errors())
        self.assertEqual([e.char for e in lexer.get_diagnostics()], ["@", "#"])

    def test_clean_input_has_no_errors(self):
        lexer = Lexer("resource x {}")

        tokens = lexer.tokenize()

        self.assertFalse(lexer.has_errors())
        self.assertEqual(tokens[-1].kind, TokenType.EOF)

    def test_tokenize_logs_errors(self):
        """Recorded errors are logged at DEBUG level."""
        with self.assertLogs("rdl.lexer.lexer", level="DEBUG") as logs:
            Lexer("!", "policy.rdl").tokenize()

        self.assertTrue(any("policy.rdl:1:0" in line for line in logs.output))

    def test_tokenize_string_raises_first_error(self):
        """tokenize_string surfaces the first recorded error."""
        with self.assertRaises(IllegalCharacterError) as ctx:
            tokenize_string("a @ b #")

        self.assertEqual(ctx.exception.char, "@")
        self.assertEqual(ctx.exception.location.filename, "<string>")


if __name__ == '__main__':
    unittest.main()
