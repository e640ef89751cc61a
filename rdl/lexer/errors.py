"""
Error handling for the RDL lexer.

Scanning faults are raised as LexerError subclasses carrying a Diagnostic
with source location, help text and suggestions. The lexer never skips
an invalid character on its own; callers decide whether to stop or to
resume scanning.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, Token, TokenType, COMPOUND_OPERATORS


@dataclass
class Diagnostic:
    """Structured description of a lexer error."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer cannot produce a valid token.

    Contains detailed diagnostic information for error reporting, plus an
    ILLEGAL token covering the offending text so a caller can keep it in
    a token stream.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        lexeme: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.lexeme = lexeme
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def line(self) -> int:
        return self.diagnostic.location.line

    @property
    def column(self) -> int:
        return self.diagnostic.location.column

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def token(self) -> Token:
        """ILLEGAL token spanning the offending text."""
        return Token(TokenType.ILLEGAL, self.lexeme, self.line, self.column)

    def __str__(self) -> str:
        return str(self.diagnostic)


class IllegalCharacterError(LexerError):
    """A character that does not begin any valid token."""

    def __init__(self, char: str, location: SourceLocation, **kwargs):
        self.char = char
        super().__init__(
            kwargs.pop("message", f"Illegal character: {char!r}"),
            location,
            char,
            **kwargs
        )


class LoneBangError(IllegalCharacterError):
    """A '!' that is not immediately followed by '='."""


class UnterminatedStringError(LexerError):
    """A string literal whose closing quote never appears."""

    @property
    def partial_text(self) -> str:
        """Literal text scanned before end-of-input, without the opening quote."""
        return self.lexeme[1:]


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Illegal character",
    "L002": "Unterminated string literal",
    "L003": "Lone '!' without '='",
}


def _suggest_operators(char: str) -> List[str]:
    """Compound operators starting with the given character."""
    return [op for op in COMPOUND_OPERATORS if op.startswith(char)]


# Helper functions for creating common errors
def create_illegal_character_error(char: str, location: SourceLocation) -> IllegalCharacterError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character {char!r} is not valid in RDL source."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return IllegalCharacterError(
        char,
        location,
        code="L001",
        help_text=help_text,
    )


def create_lone_bang_error(location: SourceLocation) -> LoneBangError:
    """Create an error for a '!' that is not part of '!='."""
    return LoneBangError(
        "!",
        location,
        message="Unexpected '!': negation is not an operator",
        code="L003",
        help_text="'!' is only valid as part of the '!=' comparison.",
        suggestions=_suggest_operators("!"),
    )


def create_unterminated_string_error(lexeme: str, location: SourceLocation) -> UnterminatedStringError:
    """Create an error for an unterminated string literal.

    ``lexeme`` is everything from the opening quote to end-of-input.
    """
    return UnterminatedStringError(
        message="Unterminated string literal",
        location=location,
        lexeme=lexeme,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote'],
    )
