"""
RDL Lexer - turns configuration source text into tokens

Pull-based: each next_token() call skips whitespace and classifies the
character under the cursor. Lines are 1-based, columns 0-based; a tab
counts as one column.

xwest
"""

import logging
from typing import List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS, COMPOUND_OPERATORS
)
from .errors import (
    LexerError, create_illegal_character_error, create_lone_bang_error,
    create_unterminated_string_error
)

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n")


class Lexer:
    """
    RDL lexical analyzer.

    Holds the source and a cursor that only moves forward. Scanning
    faults are raised as LexerError subclasses with the cursor already
    past the offending input, so calling next_token() again resumes
    scanning.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Complete source text
            filename: Name of the source for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 0
        self.errors: List[LexerError] = []
        self._eof_token: Optional[Token] = None

    @property
    def at_end(self) -> bool:
        """True once the end-of-input token has been produced."""
        return self._eof_token is not None

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns the same EOF token on every call once the input is
        exhausted.

        Raises:
            IllegalCharacterError: character starts no valid token
            LoneBangError: '!' not followed by '='
            UnterminatedStringError: string literal runs into end-of-input
        """
        if self._eof_token is not None:
            return self._eof_token

        self._skip_whitespace()

        if self.pos >= len(self.source):
            self._eof_token = Token(TokenType.EOF, "", self.line, self.column)
            return self._eof_token

        start_pos = self.pos
        start_line = self.line
        start_column = self.column

        current_char = self.source[self.pos]

        if current_char.isalpha():
            return self._tokenize_identifier_or_keyword(start_line, start_column)

        if current_char.isdecimal():
            return self._tokenize_number(start_line, start_column)

        if current_char == '"':
            return self._tokenize_string(start_line, start_column, start_pos)

        return self._tokenize_operator(start_line, start_column, start_pos)

    def tokenize(self) -> List[Token]:
        """
        Scan the rest of the input.

        Errors are recorded in ``self.errors`` and their ILLEGAL tokens
        are kept in the result, so a single pass reports every fault.

        Returns:
            List of tokens ending with the EOF token
        """
        tokens: List[Token] = []

        while True:
            try:
                token = self.next_token()
            except LexerError as e:
                logger.debug("%s: %s", e.location, e.diagnostic.message)
                self.errors.append(e)
                tokens.append(e.token)
                continue

            tokens.append(token)
            if token.kind == TokenType.EOF:
                break

        logger.debug(
            "Scanned %d tokens from %s (%d errors)",
            len(tokens), self.filename, len(self.errors)
        )
        return tokens

    def _tokenize_identifier_or_keyword(self, line: int, column: int) -> Token:
        """Tokenize a letter-initial run of letters and digits."""
        start_pos = self.pos

        # First character is already validated as a letter
        self._advance()

        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)

        return Token(token_type, lexeme, line, column)

    def _tokenize_number(self, line: int, column: int) -> Token:
        """Tokenize an unsigned integer literal."""
        start_pos = self.pos

        while self.pos < len(self.source) and self.source[self.pos].isdecimal():
            self._advance()

        return Token(TokenType.NUMBER, self.source[start_pos:self.pos], line, column)

    def _tokenize_string(self, line: int, column: int, offset: int) -> Token:
        """Tokenize a string literal; the quotes are not part of the text."""
        self._advance()  # Skip opening quote
        start_pos = self.pos

        while self.pos < len(self.source) and self.source[self.pos] != '"':
            self._advance()

        if self.pos >= len(self.source):
            raise create_unterminated_string_error(
                self.source[offset:],
                SourceLocation(self.filename, line, column, offset)
            )

        value = self.source[start_pos:self.pos]
        self._advance()  # Skip closing quote

        return Token(TokenType.STRING, value, line, column)

    def _tokenize_operator(self, line: int, column: int, offset: int) -> Token:
        """Tokenize punctuation and operators, preferring two-character forms."""
        current_char = self.source[self.pos]

        pair = current_char + self._peek()
        if pair in COMPOUND_OPERATORS:
            self._advance_by(2)
            return Token(COMPOUND_OPERATORS[pair], pair, line, column)

        self._advance()

        if current_char in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[current_char], current_char, line, column)

        location = SourceLocation(self.filename, line, column, offset)
        if current_char == "!":
            raise create_lone_bang_error(location)
        raise create_illegal_character_error(current_char, location)

    def _is_identifier_continue(self, char: str) -> bool:
        """Check if character can continue an identifier."""
        return char.isalpha() or char.isdecimal()

    def _skip_whitespace(self):
        """Skip spaces, tabs and newlines."""
        while self.pos < len(self.source) and self.source[self.pos] in WHITESPACE:
            self._advance()

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 0
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_errors(self) -> bool:
        """Check if tokenize() recorded any errors."""
        return len(self.errors) > 0

    def get_diagnostics(self) -> List[LexerError]:
        """Get all recorded errors."""
        return list(self.errors)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source text
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens
