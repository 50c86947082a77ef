"""Binary and n-ary tree traversals."""

from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: "Optional[TreeNode]" = None
    right: "Optional[TreeNode]" = None


@dataclass(eq=False)
class NaryNode:
    """A node of a tree whose nodes may have any number of children."""

    val: int = 0
    children: "List[NaryNode]" = field(default_factory=list)


def _children(node):
    return node.children or ()


def preorder_traversal(root):
    """Return the values of a binary tree in node, left, right order."""
    values = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def postorder_traversal(root):
    """Return the values of a binary tree in left, right, node order."""
    reversed_values = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reversed_values.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed_values[::-1]


def inorder_traversal(root):
    """Return the values of a binary tree in left, node, right order."""
    values = []
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values


def level_order(root):
    """Return the values of an n-ary tree grouped level by level."""
    if root is None:
        return []
    levels = []
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(_children(node))
        levels.append(level)
    return levels


def nary_preorder(root):
    """Return the values of an n-ary tree, each node before its children."""
    values = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        stack.extend(reversed(_children(node)))
    return values


def nary_postorder(root):
    """Return the values of an n-ary tree, each node after its children."""
    reversed_values = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reversed_values.append(node.val)
        stack.extend(_children(node))
    return reversed_values[::-1]