"""Renderers for treetext trees."""

from treetext.renderers.protocol import TreeRenderer
from treetext.renderers.text import (
    BRANCH_MARKER,
    PIPE_INDENT,
    ROOT_INDENT,
    TextRenderer,
    render_node,
    render_tree,
)

__all__ = [
    "BRANCH_MARKER",
    "PIPE_INDENT",
    "ROOT_INDENT",
    "TextRenderer",
    "TreeRenderer",
    "render_node",
    "render_tree",
]
