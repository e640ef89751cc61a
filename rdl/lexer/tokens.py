"""
Token definitions for the RDL lexer.

This module defines all token types produced when scanning RDL sources:
- Reserved words (resource, service, model, ...)
- Operators (arithmetic and comparison)
- Literals (identifiers, unsigned integers, strings)
- Punctuation and delimiters

Every token carries exactly one fine-grained TokenType. The coarse
TokenCategory is always derived from it, never stored.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in RDL.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input
    ILLEGAL = auto()                # Offending text attached to a LexerError

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # db, replicas, region2
    NUMBER = auto()                 # 5, 8080 (unsigned digit runs only)
    STRING = auto()                 # "postgres" (no escapes)
    BOOL = auto()                   # reserved for boolean literals

    # ========================================================================
    # Keywords
    # ========================================================================
    RESOURCE = auto()               # resource
    SERVICE = auto()                # service
    MODEL = auto()                  # model
    PROVIDER = auto()               # provider
    EXTENDS = auto()                # extends
    FUNC = auto()                   # func
    ABSTRACT = auto()               # abstract

    # Reserved vocabulary, not yet in the keyword table
    WHEN = auto()                   # when
    DERIVE = auto()                 # derive
    MAP = auto()                    # map
    POLICY = auto()                 # policy
    ENFORCE = auto()                # enforce
    TRUE = auto()                   # true
    FALSE = auto()                  # false

    # ========================================================================
    # Operators
    # ========================================================================

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    QUESTION = auto()               # ?

    # Comparison operators
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=
    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >
    LESS_EQUAL = auto()             # <=
    GREATER_EQUAL = auto()          # >=

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    ASSIGN = auto()                 # =
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    COLON = auto()                  # :


class TokenCategory(Enum):
    """Coarse token categories, derived from a TokenType."""

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"
    EOF = "eof"
    ILLEGAL = "illegal"


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting. Lines are 1-based, columns 0-based.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in an RDL source.

    Contains the fine-grained token kind, the exact matched text and
    the position of its first character.
    """
    kind: TokenType
    text: str                       # Matched text (string quotes stripped)
    line: int                       # 1-based
    column: int                     # 0-based

    def __str__(self) -> str:
        return f"{self.kind.name}({self.text!r})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}, {self.column})"

    @property
    def position(self) -> Tuple[int, int]:
        """(line, column) pair, handy for ordering checks."""
        return (self.line, self.column)

    @property
    def category(self) -> TokenCategory:
        """Coarse category of this token."""
        return category_of(self.kind)

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.kind in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.kind in SYMBOL_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.kind == TokenType.IDENTIFIER

    @property
    def is_eof(self) -> bool:
        return self.kind == TokenType.EOF

    @property
    def is_illegal(self) -> bool:
        return self.kind == TokenType.ILLEGAL


# Lookup tables for token recognition. They are built once at import time
# and exposed read-only.

KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "resource": TokenType.RESOURCE,
    "service": TokenType.SERVICE,
    "model": TokenType.MODEL,
    "provider": TokenType.PROVIDER,
    "extends": TokenType.EXTENDS,
    "func": TokenType.FUNC,
    "abstract": TokenType.ABSTRACT,
})

# Words with a dedicated TokenType that the keyword table does not map yet.
# They scan as identifiers.
RESERVED_VOCABULARY: Mapping[str, TokenType] = MappingProxyType({
    "when": TokenType.WHEN,
    "derive": TokenType.DERIVE,
    "map": TokenType.MAP,
    "policy": TokenType.POLICY,
    "enforce": TokenType.ENFORCE,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
})

SINGLE_CHAR_TOKENS: Mapping[str, TokenType] = MappingProxyType({
    # Punctuation
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ":": TokenType.COLON,
    "=": TokenType.ASSIGN,

    # Arithmetic
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "?": TokenType.QUESTION,

    # Comparison
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
})

# Two-character operators; the second character is always "="
COMPOUND_OPERATORS: Mapping[str, TokenType] = MappingProxyType({
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
})

OPERATORS: Mapping[str, TokenType] = MappingProxyType({
    **SINGLE_CHAR_TOKENS,
    **COMPOUND_OPERATORS,
})

BOOLEAN_TYPES = frozenset({TokenType.BOOL, TokenType.TRUE, TokenType.FALSE})
KEYWORD_TYPES = (
    frozenset(KEYWORDS.values()) | frozenset(RESERVED_VOCABULARY.values())
) - BOOLEAN_TYPES
SYMBOL_TYPES = frozenset(OPERATORS.values())
LITERAL_TYPES = frozenset({TokenType.NUMBER, TokenType.STRING}) | BOOLEAN_TYPES

_SIMPLE_CATEGORIES = {
    TokenType.EOF: TokenCategory.EOF,
    TokenType.ILLEGAL: TokenCategory.ILLEGAL,
    TokenType.IDENTIFIER: TokenCategory.IDENTIFIER,
    TokenType.NUMBER: TokenCategory.NUMBER,
    TokenType.STRING: TokenCategory.STRING,
}


def category_of(kind: TokenType) -> TokenCategory:
    """Map a fine-grained TokenType onto its coarse category."""
    if kind in _SIMPLE_CATEGORIES:
        return _SIMPLE_CATEGORIES[kind]
    if kind in BOOLEAN_TYPES:
        return TokenCategory.BOOLEAN
    if kind in KEYWORD_TYPES:
        return TokenCategory.KEYWORD
    return TokenCategory.SYMBOL
