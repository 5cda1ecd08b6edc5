"""ASCII-art text renderer.

Produces one line per node in depth-first pre-order. A node with children
ends in a branch marker; every ancestor below the root contributes a
vertical-bar column and the root contributes blank indentation:

    A---+
        B---+
        |   C
        D

Example:
    >>> from treetext import parse, render
    >>> print(render(parse("(+ (* 2 3) 4)")))
    +---+
        *---+
        |   2
        |   3
        4

Thread Safety:
Rendering only reads the tree. Renderer instances hold no per-call state.

"""

from treetext.config import get_config
from treetext.nodes import TreeNode

BRANCH_MARKER = "---+"
ROOT_INDENT = "    "
PIPE_INDENT = "|   "


def render_node(node: TreeNode, prefix: str, lines: list[str]) -> None:
    """Append the lines for ``node`` and its subtree to ``lines``.

    Args:
        node: Subtree root
        prefix: Text placed before this node's value
        lines: Output list, appended to in place

    """
    # Explicit stack so any tree the parser can build renders.
    stack = [(node, prefix)]
    while stack:
        current, current_prefix = stack.pop()
        if not current.children:
            lines.append(current_prefix + current.value)
            continue

        lines.append(current_prefix + current.value + BRANCH_MARKER)
        if current_prefix:
            child_prefix = current_prefix + PIPE_INDENT
        else:
            child_prefix = ROOT_INDENT
        stack.extend((child, child_prefix) for child in reversed(current.children))


class TextRenderer:
    """Render a tree as an indented ASCII diagram."""

    __slots__ = ("_empty_placeholder",)

    def __init__(self, empty_placeholder: str | None = None) -> None:
        """Initialize renderer.

        Args:
            empty_placeholder: Text for a missing tree. Defaults to the
                active config's ``empty_placeholder``, read at render time.
        """
        self._empty_placeholder = empty_placeholder

    def render(self, root: TreeNode | None) -> str:
        if root is None:
            if self._empty_placeholder is not None:
                return self._empty_placeholder
            return get_config().empty_placeholder

        lines: list[str] = []
        render_node(root, "", lines)
        return "\n".join(lines)


def render_tree(root: TreeNode | None) -> str:
    """Render a tree with the default TextRenderer.

    Returns the empty-tree placeholder when ``root`` is None.
    """
    return TextRenderer().render(root)
