import pytest

from algokit.trees import (
    FindElements,
    TreeNode,
    construct_from_pre_post,
    recover_from_preorder,
)


def _serialize(root):
    parts = []
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        parts.append("-" * depth + str(node.val))
        if node.right is not None:
            stack.append((node.right, depth + 1))
        if node.left is not None:
            stack.append((node.left, depth + 1))
    return "".join(parts)


def _preorder(root):
    if root is None:
        return []
    return [root.val] + _preorder(root.left) + _preorder(root.right)


def _postorder(root):
    if root is None:
        return []
    return _postorder(root.left) + _postorder(root.right) + [root.val]


def _nodes(root):
    if root is None:
        return []
    return [root] + _nodes(root.left) + _nodes(root.right)


@pytest.mark.parametrize(
    "traversal",
    ["1-2--3--4-5--6--7", "1-2--3---4-5--6---7", "1-401--349---90--88", "42"],
)
def test_recover_round_trip(traversal):
    assert _serialize(recover_from_preorder(traversal)) == traversal


def test_recover_single_children_are_left():
    root = recover_from_preorder("1-2--3---4")
    for node in _nodes(root):
        assert node.right is None
    assert _preorder(root) == [1, 2, 3, 4]


def test_recover_stops_at_impossible_depth():
    root = recover_from_preorder("1--2")
    assert root == TreeNode(1)


def test_recover_requires_root():
    with pytest.raises(ValueError):
        recover_from_preorder("")
    with pytest.raises(ValueError):
        recover_from_preorder("-1")


@pytest.mark.parametrize(
    "preorder, postorder",
    [
        ([1, 2, 4, 5, 3, 6, 7], [4, 5, 2, 6, 7, 3, 1]),
        ([1], [1]),
        ([5, 3, 8], [3, 8, 5]),
        ([1, 2, 3], [3, 2, 1]),
    ],
)
def test_construct_reproduces_traversals(preorder, postorder):
    root = construct_from_pre_post(preorder, postorder)
    assert _preorder(root) == preorder
    assert _postorder(root) == postorder


def test_construct_rejects_empty():
    with pytest.raises(ValueError):
        construct_from_pre_post([], [])


def _contaminated():
    return TreeNode(
        -1,
        TreeNode(-1, TreeNode(-1), None),
        TreeNode(-1, None, TreeNode(-1, TreeNode(-1))),
    )


def test_find_elements_restores_values():
    root = _contaminated()
    FindElements(root)
    assert root.val == 0
    for node in _nodes(root):
        if node.left is not None:
            assert node.left.val == node.val * 2 + 1
        if node.right is not None:
            assert node.right.val == node.val * 2 + 2


def test_find_elements_lookup():
    root = _contaminated()
    finder = FindElements(root)
    present = {node.val for node in _nodes(root)}
    assert all(finder.find(value) for value in present)
    for value in range(max(present) + 5):
        if value not in present:
            assert not finder.find(value)
    assert not finder.find(-1)


def test_find_elements_rejects_none():
    with pytest.raises(ValueError):
        FindElements(None)