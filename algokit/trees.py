"""Binary trees and binary search trees built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """A binary tree node."""

    value: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


def insert(root: Optional[Node], value: Any) -> Node:
    """Insert ``value`` into the search tree and return its root.

    Values not less than a node's value go to its right subtree.
    """
    new = Node(value)
    if root is None:
        return new
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def search(root: Optional[Node], key: Any) -> Optional[Node]:
    """Return the first node holding ``key`` on the search path, or None."""
    node = root
    while node is not None and node.value != key:
        node = node.right if node.value < key else node.left
    return node


def find_min(root: Optional[Node]) -> Optional[Node]:
    """Return the leftmost node of the tree, or None for an empty tree."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def delete(root: Optional[Node], key: Any) -> Optional[Node]:
    """Remove one node holding ``key`` from the search tree and return its root.

    A node with two children takes the value of its in-order successor.
    """
    parent: Optional[Node] = None
    node = root
    while node is not None:
        if key < node.value:
            parent, node = node, node.left
        elif key > node.value:
            parent, node = node, node.right
        else:
            break
    if node is None:
        return root

    if node.left is not None and node.right is not None:
        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent, successor = successor, successor.left
        node.value = successor.value
        if successor_parent is node:
            successor_parent.right = successor.right
        else:
            successor_parent.left = successor.right
        return root

    child = node.left if node.left is not None else node.right
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root


def _preorder_nodes(root: Optional[Node]) -> Iterator[Node]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def count_nodes(root: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _preorder_nodes(root))


def preorder(root: Optional[Node]) -> list[Any]:
    """Return values in root, left, right order."""
    return [node.value for node in _preorder_nodes(root)]


def inorder(root: Optional[Node]) -> list[Any]:
    """Return values in left, root, right order."""
    values = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right
    return values


def postorder(root: Optional[Node]) -> list[Any]:
    """Return values in left, right, root order."""
    values = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    values.reverse()
    return values