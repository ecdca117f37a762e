"""Binary tree reconstruction and recovery."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_NODE_PATTERN = re.compile(r"(\D*)(\d+)")


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def _walk(root: TreeNode) -> Iterator[TreeNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def recover_from_preorder(traversal: str) -> TreeNode:
    """Rebuild a tree from a preorder string where dashes give each node's depth.

    A single child is always the left child. Parsing stops at the first node
    whose depth does not fit the tree built so far.
    """
    nodes = [(len(dashes), int(value)) for dashes, value in _NODE_PATTERN.findall(traversal)]
    if not nodes or nodes[0][0] != 0:
        raise ValueError("traversal must start with the root value")

    root = TreeNode(nodes[0][1])
    path = [root]
    for depth, value in nodes[1:]:
        while path and (len(path) > depth or path[-1].right is not None):
            path.pop()
        if depth == 0 or len(path) != depth:
            break
        parent = path[-1]
        child = TreeNode(value)
        if parent.left is None:
            parent.left = child
        else:
            parent.right = child
        path.append(child)
    return root


def construct_from_pre_post(preorder: Sequence[int], postorder: Sequence[int]) -> TreeNode:
    """Build a tree of distinct values from its preorder and postorder traversals."""
    if not postorder:
        raise ValueError("traversals must not be empty")
    rank = {value: index for index, value in enumerate(preorder)}
    remaining = list(reversed(postorder))
    position = 0

    def build() -> TreeNode:
        nonlocal position
        node = TreeNode(remaining[position])
        position += 1
        if position < len(remaining) and rank[node.val] < rank[remaining[position]]:
            node.right = build()
        if position < len(remaining) and rank[node.val] < rank[remaining[position]]:
            node.left = build()
        return node

    return build()


class FindElements:
    """Restores a contaminated tree (root 0, children 2v+1 and 2v+2) and answers lookups."""

    def __init__(self, root: TreeNode) -> None:
        if root is None:
            raise ValueError("root must not be None")
        self.root = root
        root.val = 0
        self._values: set[int] = set()
        stack = [root]
        while stack:
            node = stack.pop()
            self._values.add(node.val)
            for child, offset in ((node.left, 1), (node.right, 2)):
                if child is not None:
                    child.val = node.val * 2 + offset
                    stack.append(child)

    def find(self, target: int) -> bool:
        """Return whether the recovered tree holds ``target``."""
        return target in self._values