"""Binary tree node type and algorithms over binary trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @classmethod
    def from_list(cls, values: Iterable[Optional[int]]) -> Optional["TreeNode"]:
        """Build a tree from a level-order list where ``None`` marks a missing child."""
        items = iter(values)
        first = next(items, None)
        if first is None:
            return None
        root = cls(first)
        pending: deque[TreeNode] = deque([root])
        while pending:
            node = pending.popleft()
            try:
                left_val = next(items)
            except StopIteration:
                break
            if left_val is not None:
                node.left = cls(left_val)
                pending.append(node.left)
            try:
                right_val = next(items)
            except StopIteration:
                break
            if right_val is not None:
                node.right = cls(right_val)
                pending.append(node.right)
        return root


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True when both trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is not None and q is not None and p.val == q.val:
        return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)
    return False


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the node values grouped level by level, left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.val for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def remove_leaf_nodes(root: Optional[TreeNode], target: int) -> Optional[TreeNode]:
    """Repeatedly delete leaves whose value equals ``target``; return the new root."""
    if root is None:
        return None
    root.left = remove_leaf_nodes(root.left, target)
    root.right = remove_leaf_nodes(root.right, target)
    if root.left is None and root.right is None and root.val == target:
        return None
    return root


_FALSE, _TRUE, _OR, _AND = 0, 1, 2, 3


def evaluate_tree(root: TreeNode) -> bool:
    """Evaluate a full boolean tree: leaves 0/1, inner nodes 2 (OR) and 3 (AND)."""
    if root.val == _FALSE:
        return False
    if root.val == _TRUE:
        return True
    if root.val in (_OR, _AND):
        if root.left is None or root.right is None:
            raise ValueError("operator node must have two children")
        left = evaluate_tree(root.left)
        right = evaluate_tree(root.right)
        return (left or right) if root.val == _OR else (left and right)
    raise ValueError(f"invalid node value: {root.val}")