"""
treetext — parenthesized tree notation to ASCII diagrams

Parses S-expression-like text into a tree and renders trees as indented
text diagrams. Zero runtime dependencies.

Quick Start:
    >>> from treetext import parse, render
    >>> root = parse("(A (B C) D)")
    >>> print(render(root))
    A---+
        B---+
        |   C
        D

    >>> # Trees can be built directly too
    >>> from treetext import add_child, make_node
    >>> root = make_node("A")
    >>> add_child(root, make_node("B"))
    >>> render(root)
    'A---+\\n    B'

Errors:
    Malformed input raises TreeSyntaxError:

    >>> parse("()")
    Traceback (most recent call last):
        ...
    treetext.errors.TreeSyntaxError: 1:2 empty parentheses not allowed
"""

from treetext.config import (
    TreeTextConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from treetext.controller import TreeController
from treetext.errors import EmptyInputError, TreeSyntaxError, TreeTextError
from treetext.lexer import Lexer, tokenize
from treetext.location import SourceLocation
from treetext.nodes import TreeNode, add_child, make_node
from treetext.parser import Parser, parse_tree
from treetext.renderers import TextRenderer, TreeRenderer, render_node, render_tree
from treetext.tokens import Token, TokenType

__version__ = "0.1.0"


def parse(source: str) -> TreeNode:
    """Parse tree notation into a tree.

    Args:
        source: Text such as "(A (B C) D)"

    Returns:
        Root TreeNode

    Raises:
        TreeSyntaxError: If the input is malformed.
    """
    return parse_tree(source)


def render(root: TreeNode | None) -> str:
    """Render a tree as an indented ASCII diagram.

    Args:
        root: Tree to render, or None

    Returns:
        Diagram text, or the empty-tree placeholder for None
    """
    return render_tree(root)

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "tokenize",
    "parse",
    "render",
    "make_node",
    "add_child",
    # Nodes and tokens
    "TreeNode",
    "Token",
    "TokenType",
    "SourceLocation",
    # Components
    "Lexer",
    "Parser",
    "parse_tree",
    "TextRenderer",
    "TreeRenderer",
    "render_node",
    "render_tree",
    # Front ends
    "TreeController",
    # Errors
    "TreeTextError",
    "TreeSyntaxError",
    "EmptyInputError",
    # Configuration (ContextVar-based)
    "TreeTextConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
]
