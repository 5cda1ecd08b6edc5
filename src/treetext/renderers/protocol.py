"""TreeRenderer protocol — stable interface for tree renderers.

Any renderer that implements ``render(root) -> str`` conforms to this protocol.
The built-in ``TextRenderer`` is the reference implementation.

Example:
    from treetext.renderers.protocol import TreeRenderer

    def show(renderer: TreeRenderer, root: TreeNode | None) -> str:
        return renderer.render(root)

"""

from typing import Protocol

from treetext.nodes import TreeNode


class TreeRenderer(Protocol):
    """Protocol for tree renderers.

    Implementations must accept a root node (or None for no tree) and
    return a rendered string.

    """

    def render(self, root: TreeNode | None) -> str:
        """Render a tree to a string.

        Args:
            root: The tree to render, or None when there is no tree.

        Returns:
            Rendered string output.

        """
        ...
