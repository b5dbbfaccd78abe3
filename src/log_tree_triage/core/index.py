"""Timestamp-ordered binary search tree of recognized messages.

A tree is either :data:`EMPTY` or a :class:`Node` that exclusively owns its two
subtrees. Nodes are reused when inserting, so a tree passed to :func:`insert`
must not be used afterwards except through the returned value.

Inserting a timestamp that is already present is a no-op: the first message
seen for a timestamp wins. There is no deletion and no rebalancing, so logs
that arrive already sorted produce a list-shaped tree; both walks below are
loops rather than recursion for that reason.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import LogMessage, Recognized, Unrecognized


class Empty:
    """The empty tree."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


@dataclass(slots=True, eq=False)
class Node:
    message: Recognized
    left: Tree = EMPTY
    right: Tree = EMPTY


Tree = Empty | Node


def insert(tree: Tree, message: Recognized) -> Tree:
    """Insert message keyed by its timestamp and return the resulting tree."""
    if isinstance(tree, Empty):
        return Node(message)

    node = tree
    key = message.timestamp
    while True:
        current = node.message.timestamp
        if key < current:
            if isinstance(node.left, Empty):
                node.left = Node(message)
                break
            node = node.left
        elif key > current:
            if isinstance(node.right, Empty):
                node.right = Node(message)
                break
            node = node.right
        else:
            break
    return tree


def insert_message(tree: Tree, message: LogMessage) -> Tree:
    """Like insert, but unrecognized messages leave the tree untouched."""
    if isinstance(message, Unrecognized):
        return tree
    return insert(tree, message)


def build(messages: Iterable[LogMessage]) -> Tree:
    """Fold messages into a fresh tree, in sequence order."""
    tree: Tree = EMPTY
    for message in messages:
        tree = insert_message(tree, message)
    return tree


def in_order(tree: Tree) -> list[Recognized]:
    """Return the indexed messages by ascending timestamp."""
    out: list[Recognized] = []
    stack: list[Node] = []
    current = tree
    while stack or isinstance(current, Node):
        while isinstance(current, Node):
            stack.append(current)
            current = current.left
        node = stack.pop()
        out.append(node.message)
        current = node.right
    return out
