"""Tree nodes for treetext.

Unlike a frozen AST, a TreeNode is built incrementally: the parser creates
a node for each value and appends children as it meets them. Once the parse
that produced a tree returns, nothing mutates it again.

Trees can also be composed directly for rendering or testing:

    >>> root = make_node("A")
    >>> add_child(root, make_node("B"))
    >>> [child.value for child in root.children]
    ['B']

Thread Safety:
Nodes are not locked. A tree under construction belongs to the code
building it; a finished tree is only read.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True)
class TreeNode:
    """One node of a parsed tree.

    Attributes:
        value: Label taken verbatim from one value token
        children: Child nodes in left-to-right source order

    """

    value: str
    children: list[TreeNode] = field(default_factory=list)

    def add_child(self, child: TreeNode) -> None:
        """Append a child, keeping call order."""
        self.children.append(child)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator[TreeNode]:
        """Iterate over this subtree in depth-first pre-order.

        Uses an explicit stack, so deeply nested trees do not hit the
        interpreter's recursion limit.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def node_count(self) -> int:
        """Number of nodes in this subtree, including this one."""
        return sum(1 for _ in self.walk())


def make_node(value: str) -> TreeNode:
    """Create a node with no children."""
    return TreeNode(value)


def add_child(parent: TreeNode, child: TreeNode) -> None:
    """Append ``child`` to ``parent.children``."""
    parent.add_child(child)


__all__ = ["TreeNode", "add_child", "make_node"]
