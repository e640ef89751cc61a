"""
RDL Package

Front end for RDL, a declarative configuration language describing
resources, services, policies and derived mappings.

Architecture:
    rdl/
    └── lexer/           # Tokenization and lexical analysis

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
