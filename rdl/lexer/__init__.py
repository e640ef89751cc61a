"""
RDL Lexer Package

Lexical analyzer for RDL, a small declarative language describing
resources, services, policies and derived mappings.

Key Features:
- One fine-grained TokenType per keyword and glyph, coarse categories derived
- Two-character comparison operators via look-ahead
- Structured, catchable errors with source locations
- Optional error collection across a whole input

Author: xwest
"""

from .tokens import Token, TokenType, TokenCategory, SourceLocation, KEYWORDS
from .lexer import Lexer, tokenize_string
from .errors import (
    LexerError, IllegalCharacterError, LoneBangError, UnterminatedStringError
)

__all__ = [
    "Lexer",
    "tokenize_string",
    "Token",
    "TokenType",
    "TokenCategory",
    "SourceLocation",
    "KEYWORDS",
    "LexerError",
    "IllegalCharacterError",
    "LoneBangError",
    "UnterminatedStringError",
]
