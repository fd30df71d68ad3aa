"""Binary tree node type and classic binary tree algorithms."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where ``None`` marks a missing child."""
    items = list(values)
    if not items or items[0] is None:
        return None
    root = TreeNode(items[0])
    queue = deque([root])
    children = iter(items[1:])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(children, _MISSING)
            if value is _MISSING:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def _inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.right, q.right) and is_same_tree(p.left, q.left)


def _mirror(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None or left.val != right.val:
        return False
    return _mirror(left.left, right.right) and _mirror(left.right, right.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirror(root.left, root.right)


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values level by level, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return node values level by level, alternating direction from left to right."""
    return [
        values if depth % 2 == 0 else values[::-1]
        for depth, values in enumerate(level_order(root))
    ]


def height(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if every node's subtrees differ in height by at most one."""
    if root is None:
        return True
    return (
        abs(height(root.left) - height(root.right)) <= 1
        and is_balanced(root.left)
        and is_balanced(root.right)
    )


def path_sum(root: Optional[TreeNode], target_sum: int) -> list[list[int]]:
    """Return every root-to-leaf path whose values add up to ``target_sum``."""
    paths: list[list[int]] = []
    path: list[int] = []

    def walk(node: Optional[TreeNode], remaining: int) -> None:
        if node is None:
            return
        remaining -= node.val
        path.append(node.val)
        if node.is_leaf and remaining == 0:
            paths.append(list(path))
        walk(node.left, remaining)
        walk(node.right, remaining)
        path.pop()

    walk(root, target_sum)
    return paths


def deepest_leaves_sum(root: Optional[TreeNode]) -> int:
    """Return the sum of the values on the deepest level."""
    levels = level_order(root)
    return sum(levels[-1]) if levels else 0


def get_target_copy(
    original: Optional[TreeNode], cloned: Optional[TreeNode], target: TreeNode
) -> Optional[TreeNode]:
    """Return the node in ``cloned`` at the position of ``target`` in ``original``."""
    stack = [(original, cloned)]
    while stack:
        node, twin = stack.pop()
        if node is None or twin is None:
            continue
        if node is target:
            return twin
        stack.append((node.right, twin.right))
        stack.append((node.left, twin.left))
    return None


def pseudo_palindromic_paths(root: Optional[TreeNode]) -> int:
    """Count root-to-leaf paths whose values can be permuted into a palindrome."""
    count = 0
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, parity = stack.pop()
        parity ^= 1 << node.val
        if node.is_leaf:
            if parity & (parity - 1) == 0:
                count += 1
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, parity))
    return count


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return [level[-1].val for level in _levels(root)]


def check_tree(root: TreeNode) -> bool:
    """Return True if the root's value equals the sum of its two children."""
    if root.left is None or root.right is None:
        raise ValueError("root must have both a left and a right child")
    return root.val == root.left.val + root.right.val


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based) of a binary search tree."""
    if k < 1:
        raise IndexError("k must be at least 1")
    for position, node in enumerate(_inorder(root), start=1):
        if position == k:
            return node.val
    raise IndexError("k exceeds the number of nodes")


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node that has both ``p`` and ``q`` as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def convert_bst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Replace each value of a BST with the sum of all values not smaller, in place."""
    total = 0
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        total += node.val
        node.val = total
        node = node.left
    return root


def tree_to_str(root: Optional[TreeNode]) -> str:
    """Render the tree in preorder with parentheses around children."""
    if root is None:
        return " "
    text = str(root.val)
    if root.left is not None:
        text += f"({tree_to_str(root.left)})"
    if root.right is not None:
        if root.left is None:
            text += "()"
        text += f"({tree_to_str(root.right)})"
    return text


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val`` in a binary search tree, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.right if node.val < val else node.left
    return node


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in in-order sequence."""
    return [node.val for node in _inorder(root)]


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a strict binary search tree."""

    def valid(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if (low is not None and node.val <= low) or (high is not None and node.val >= high):
            return False
        return valid(node.left, low, node.val) and valid(node.right, node.val, high)

    return valid(root, None, None)