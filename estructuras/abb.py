"""Binary search trees of Info elements ordered by their natural component.

A tree is either ``None`` (the empty tree) or an ``Abb`` node. Functions that
change a tree return its new root.
"""

from __future__ import annotations

from dataclasses import dataclass

from estructuras.info import Info

_ROTATIONS = ("LL", "LR", "RR", "RL")


@dataclass
class Abb:
    """A node holding ``info`` with left and right subtrees."""

    info: Info
    left: Abb | None = None
    right: Abb | None = None


def _rotate_right(node):
    pivot = node.left
    if pivot is None:
        return node
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node):
    pivot = node.right
    if pivot is None:
        return node
    node.right = pivot.left
    pivot.left = node
    return pivot


def _apply_rotation(kind, node):
    if kind == "LL":
        return _rotate_right(node)
    if kind == "RR":
        return _rotate_left(node)
    if kind == "LR":
        if node.left is not None and node.left.right is not None:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        return node
    if node.right is not None and node.right.left is not None:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def rotate(key, kind, tree):
    """Apply the AVL rotation ``kind`` ('LL', 'LR', 'RR' or 'RL') at the node with ``key``.

    If ``key`` is not in the tree or the rotation cannot be applied, the tree
    is left unchanged.
    """
    kind = "".join(kind)
    if kind not in _ROTATIONS:
        raise ValueError(f"rotation must be one of {', '.join(_ROTATIONS)}: {kind!r}")
    if tree is None:
        return None
    natural = tree.info.natural
    if key == natural:
        return _apply_rotation(kind, tree)
    if key < natural:
        if tree.left is not None:
            tree.left = rotate(key, kind, tree.left)
    elif tree.right is not None:
        tree.right = rotate(key, kind, tree.right)
    return tree


def find_subtree(key, tree):
    """Return the subtree rooted at the node with ``key``, or None."""
    node = tree
    while node is not None:
        natural = node.info.natural
        if key == natural:
            return node
        node = node.left if key < natural else node.right
    return None


def min_info(tree):
    """Return the element with the smallest natural component."""
    if tree is None:
        raise ValueError("min_info of an empty tree")
    while tree.left is not None:
        tree = tree.left
    return tree.info


def max_info(tree):
    """Return the element with the largest natural component."""
    if tree is None:
        raise ValueError("max_info of an empty tree")
    while tree.right is not None:
        tree = tree.right
    return tree.info


def insert(info, tree):
    """Insert ``info`` keeping the order; its natural component must be new."""
    if tree is None:
        return Abb(info)
    node = tree
    while True:
        natural = node.info.natural
        if info.natural == natural:
            raise ValueError(f"key already in tree: {info.natural}")
        if info.natural < natural:
            if node.left is None:
                node.left = Abb(info)
                return tree
            node = node.left
        else:
            if node.right is None:
                node.right = Abb(info)
                return tree
            node = node.right


def remove(key, tree):
    """Remove the node with ``key``.

    A node with two subtrees takes the largest element of its left subtree.
    """
    if tree is None:
        raise KeyError(key)
    natural = tree.info.natural
    if key < natural:
        tree.left = remove(key, tree.left)
    elif key > natural:
        tree.right = remove(key, tree.right)
    elif tree.left is None:
        return tree.right
    elif tree.right is None:
        return tree.left
    else:
        replacement = max_info(tree.left)
        tree.info = replacement
        tree.left = remove(replacement.natural, tree.left)
    return tree


def copy_tree(tree):
    """Return a copy of ``tree`` that shares no nodes with it."""
    if tree is None:
        return None
    return Abb(tree.info, copy_tree(tree.left), copy_tree(tree.right))