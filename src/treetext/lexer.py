"""Character-level lexer for tree notation.

Scans the source once, left to right. Parentheses become single-character
tokens, whitespace separates tokens, and every maximal run of other
characters becomes a value token. Any string tokenizes; there are no error
cases.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from treetext.location import SourceLocation
from treetext.tokens import CLOSE_PAREN, OPEN_PAREN, Token, TokenType

# Only these three separate tokens; other whitespace is part of a value.
WHITESPACE = frozenset(" \t\n")
_DELIMITERS = WHITESPACE | {OPEN_PAREN, CLOSE_PAREN}


class Lexer:
    """Single-pass lexer producing Token objects.

    Usage:
            >>> for token in Lexer("(A\\n B)").tokenize():
            ...     print(token)
        Token(OPEN, '(', 1:1)
        Token(VALUE, 'A', 1:2)
        Token(VALUE, 'B', 2:2)
        Token(CLOSE, ')', 2:3)

    """

    __slots__ = ("_source", "_source_len", "_pos", "_lineno", "_line_start")

    def __init__(self, source: str, start: int = 0, end: int | None = None) -> None:
        """Initialize lexer over source[start:end].

        Locations stay relative to the whole source, so a caller that strips
        surrounding whitespace still gets positions in the text the user typed.

        """
        self._source = source
        self._source_len = len(source) if end is None else end
        self._pos = start
        self._lineno = source.count("\n", 0, start) + 1
        self._line_start = source.rfind("\n", 0, start) + 1

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until the source is exhausted."""
        source = self._source
        while self._pos < self._source_len:
            char = source[self._pos]
            if char == OPEN_PAREN:
                yield self._emit(TokenType.OPEN, char)
                self._pos += 1
            elif char == CLOSE_PAREN:
                yield self._emit(TokenType.CLOSE, char)
                self._pos += 1
            elif char in WHITESPACE:
                self._pos += 1
                if char == "\n":
                    self._lineno += 1
                    self._line_start = self._pos
            else:
                yield self._scan_value()

    def _scan_value(self) -> Token:
        source = self._source
        start = self._pos
        end = start
        while end < self._source_len and source[end] not in _DELIMITERS:
            end += 1
        token = self._emit(TokenType.VALUE, source[start:end])
        self._pos = end
        return token

    def _emit(self, token_type: TokenType, value: str) -> Token:
        location = SourceLocation(
            lineno=self._lineno,
            col_offset=self._pos - self._line_start + 1,
            offset=self._pos,
        )
        return Token(token_type, value, location)


def tokenize(source: str) -> list[str]:
    """Split tree notation into its token strings.

    Args:
        source: Raw tree notation text

    Returns:
        List of "(", ")" and value strings, in source order. Empty or
        whitespace-only input gives an empty list.

    Example:
        >>> tokenize("(A B C)")
        ['(', 'A', 'B', 'C', ')']
    """
    return [token.value for token in Lexer(source).tokenize()]


__all__ = ["Lexer", "WHITESPACE", "tokenize"]
