"""Recursive descent parser for tree notation.

Grammar:
    tree  := '(' value child* ')'
    child := value | tree
    value := any token that is not '(' or ')'

Each nesting level walks the same states: expect-open, expect-value,
consume-children, expect-close. The Python call stack holds one frame per
level, so nesting depth is bounded by the interpreter's recursion limit.
Exceeding it raises RecursionError; a partial tree is never returned.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per parse
operation. No module-level state is touched.

"""

from __future__ import annotations

from treetext.errors import TreeSyntaxError
from treetext.lexer import Lexer
from treetext.location import SourceLocation
from treetext.nodes import TreeNode, add_child, make_node
from treetext.tokens import CLOSE_PAREN, OPEN_PAREN, Token, TokenType

MSG_WRAPPER = "tree must start with '(' and end with ')'"
MSG_UNEXPECTED_END = "unexpected end of expression"
MSG_EXPECTED_OPEN = "expected opening parenthesis"
MSG_EMPTY_PARENS = "empty parentheses not allowed"
MSG_EXPECTED_VALUE = "expected a node value"
MSG_EXPECTED_CLOSE = "expected closing parenthesis"


class Parser:
    """Recursive descent parser over a token cursor.

    Usage:
            >>> root = Parser("(A (B C) D)").parse()
            >>> root.value, [child.value for child in root.children]
            ('A', ['B', 'D'])

    """

    __slots__ = (
        "_source",
        "_require_wrapper",
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_end",
    )

    def __init__(self, source: str, *, require_wrapper: bool = True) -> None:
        """Initialize parser with source text.

        Args:
            source: Tree notation text
            require_wrapper: Reject input whose stripped text does not start
                with '(' and end with ')' before tokenizing. When False, the
                descent itself reports what is wrong with the first tokens.

        """
        self._source = source
        self._require_wrapper = require_wrapper
        self._tokens: list[Token] = []
        self._tokens_len = 0
        self._pos = 0
        self._current: Token | None = None
        self._end = len(source)

    def parse(self) -> TreeNode:
        """Parse the source into a tree.

        Tokens after the outermost closing parenthesis are ignored.

        Raises:
            TreeSyntaxError: If the input is malformed.

        """
        source = self._source
        stripped = source.strip()
        if self._require_wrapper and not (
            stripped.startswith(OPEN_PAREN) and stripped.endswith(CLOSE_PAREN)
        ):
            raise TreeSyntaxError(MSG_WRAPPER)

        start = len(source) - len(source.lstrip())
        self._end = start + len(stripped)
        self._tokens = list(Lexer(source, start, self._end).tokenize())
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._current = self._tokens[0] if self._tokens else None
        return self._parse_tree()

    # =========================================================================
    # Token navigation
    # =========================================================================

    def _advance(self) -> Token | None:
        """Advance to next token and return it."""
        self._pos += 1
        if self._pos < self._tokens_len:
            self._current = self._tokens[self._pos]
        else:
            self._current = None
        return self._current

    def _error(self, message: str, token: Token | None) -> TreeSyntaxError:
        location = token.location if token is not None else self._end_location()
        return TreeSyntaxError(message, lineno=location.lineno, col_offset=location.col_offset)

    def _end_location(self) -> SourceLocation:
        """Location just past the last character that was tokenized."""
        line_start = self._source.rfind("\n", 0, self._end) + 1
        return SourceLocation(
            lineno=self._source.count("\n", 0, self._end) + 1,
            col_offset=self._end - line_start + 1,
            offset=self._end,
        )

    # =========================================================================
    # Productions
    # =========================================================================

    def _parse_tree(self) -> TreeNode:
        """tree := '(' value child* ')'"""
        self._expect_open()

        token = self._current
        if token is None or token.type is TokenType.CLOSE:
            # Bare "()" at any depth
            raise self._error(MSG_EMPTY_PARENS, token)
        if token.type is TokenType.OPEN:
            raise self._error(MSG_EXPECTED_VALUE, token)

        node = make_node(token.value)
        self._advance()
        self._parse_children(node)
        self._expect_close()
        return node

    def _parse_children(self, node: TreeNode) -> None:
        """child* -- stops at ')' or end of stream."""
        while self._current is not None and self._current.type is not TokenType.CLOSE:
            if self._current.type is TokenType.OPEN:
                add_child(node, self._parse_tree())
            else:
                add_child(node, make_node(self._current.value))
                self._advance()

    def _expect_open(self) -> None:
        token = self._current
        if token is None:
            raise self._error(MSG_UNEXPECTED_END, None)
        if token.type is not TokenType.OPEN:
            raise self._error(MSG_EXPECTED_OPEN, token)
        self._advance()

    def _expect_close(self) -> None:
        token = self._current
        if token is None or token.type is not TokenType.CLOSE:
            raise self._error(MSG_EXPECTED_CLOSE, token)
        self._advance()


def parse_tree(source: str) -> TreeNode:
    """Parse tree notation into a TreeNode.

    Args:
        source: Text such as "(A (B C) D)"

    Returns:
        The root node

    Raises:
        TreeSyntaxError: If the input is malformed.

    Example:
        >>> parse_tree("(A)").value
        'A'
    """
    return Parser(source).parse()


__all__ = [
    "MSG_EMPTY_PARENS",
    "MSG_EXPECTED_CLOSE",
    "MSG_EXPECTED_OPEN",
    "MSG_EXPECTED_VALUE",
    "MSG_UNEXPECTED_END",
    "MSG_WRAPPER",
    "Parser",
    "parse_tree",
]
