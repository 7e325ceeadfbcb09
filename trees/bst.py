"""
MiniDS Binary Search Tree
=========================
Unbalanced, in-memory binary search tree supporting insert, exact search,
min/max, floor/ceil, delete, in-order successor/predecessor and ordered
iteration.

Architecture:
  - Every node is itself a BinarySearchTree (value, left, right).
  - A node exclusively owns its children; dropping a node drops its subtree.
  - value is None only for the root of an empty tree.
    Invariant: left subtree < value, right subtree > value.

Insertion:
  - insert():        equal values route RIGHT, so duplicates are stored.
  - insert_unique(): stops on an equal value (no-op).
  Both contracts are kept as separate operations.

Concurrency: none, callers serialize access.
Balancing: not implemented, depth can degrade to O(n).
"""

import logging
from typing import Any, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


# ─── Tree ──────────────────────────────────────────────────────────────────

class BinarySearchTree:
    """
    Node-owns-children binary search tree.

    Usage:
        tree = BinarySearchTree()
        tree.insert(25)
        tree.search(25)       # True
        tree.floor(30)        # 25
        list(tree)            # ascending order
    """
    __slots__ = ('value', 'left', 'right')

    def __init__(self):
        self.value: Any = None
        self.left: Optional['BinarySearchTree'] = None
        self.right: Optional['BinarySearchTree'] = None

    def is_empty(self) -> bool:
        return self.value is None

    # ─── Search ─────────────────────────────────────────────────────

    def search(self, value: Any) -> bool:
        """Return True iff value is stored in this tree."""
        if value is None:
            return False
        node = self if self.value is not None else None
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False

    def __contains__(self, value: Any) -> bool:
        return self.search(value)

    # ─── Insert ─────────────────────────────────────────────────────

    def insert(self, value: Any) -> None:
        """
        Insert value into the appropriate location in this tree.

        Equality is not special-cased: an equal value descends to the
        right and is stored again. See insert_unique() for the variant
        that ignores values already present.
        """
        _reject_none(value)
        if self.value is None:
            self.value = value
            return

        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _leaf(value)
                    return
                node = node.left
            else:
                if value == node.value:
                    logger.debug("insert: storing duplicate %r", value)
                if node.right is None:
                    node.right = _leaf(value)
                    return
                node = node.right

    def insert_unique(self, value: Any) -> None:
        """Insert value unless an equal value is already stored."""
        _reject_none(value)
        if self.value is None:
            self.value = value
            return

        node = self
        while node.value != value:
            if node.value > value:
                if node.left is None:
                    node.left = _leaf(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _leaf(value)
                    return
                node = node.right

    # ─── Bounds ─────────────────────────────────────────────────────

    def minimum(self) -> Optional[Any]:
        """Smallest value in this tree, or None if empty."""
        node = self
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Optional[Any]:
        """Largest value in this tree, or None if empty."""
        node = self
        while node.right is not None:
            node = node.right
        return node.value

    def floor(self, value: Any) -> Optional[Any]:
        """Greatest stored value <= value."""
        if value is None:
            return None
        candidate = None
        node = self if self.value is not None else None
        while node is not None:
            key = node.value
            if key > value:
                node = node.left
            elif key < value:
                candidate = key
                node = node.right
            else:
                return key
        return candidate

    def ceil(self, value: Any) -> Optional[Any]:
        """Least stored value >= value."""
        if value is None:
            return None
        candidate = None
        node = self if self.value is not None else None
        while node is not None:
            key = node.value
            if key < value:
                node = node.right
            elif key > value:
                candidate = key
                node = node.left
            else:
                return key
        return candidate

    # ─── Neighbours ─────────────────────────────────────────────────

    def inorder_successor(self, value: Any) -> Optional[Any]:
        """
        Next value in ascending order after value.
        value does not have to be stored in the tree.
        """
        if value is None:
            return None
        candidate = None
        node = self if self.value is not None else None
        while node is not None:
            if node.value > value:
                # Turn left: this node is the nearest bound so far
                candidate = node.value
                node = node.left
            else:
                node = node.right
        return candidate

    def inorder_predecessor(self, value: Any) -> Optional[Any]:
        """
        Previous value in ascending order before value.
        value does not have to be stored in the tree.
        """
        if value is None:
            return None
        candidate = None
        node = self if self.value is not None else None
        while node is not None:
            if node.value < value:
                candidate = node.value
                node = node.right
            else:
                node = node.left
        return candidate

    # ─── Delete ─────────────────────────────────────────────────────

    def delete(self, value: Any) -> None:
        """
        Remove one occurrence of value. No-op if value is not stored.

        - leaf: cleared (and detached from its parent)
        - one child: the child's value and subtrees are spliced up
        - two children: the in-order successor is copied in, then its
          node is removed from the right subtree
        """
        if value is None or self.value is None:
            return

        parent: Optional[BinarySearchTree] = None
        node: Optional[BinarySearchTree] = self
        while node is not None and node.value != value:
            parent = node
            node = node.left if node.value > value else node.right
        if node is None:
            return

        if node.left is not None and node.right is not None:
            # Successor is the leftmost node of the right subtree
            parent, successor = node, node.right
            while successor.left is not None:
                parent, successor = successor, successor.left
            node.value = successor.value
            node = successor

        # node has at most one child here
        child = node.left if node.left is not None else node.right
        if child is not None:
            node._splice(child)
        elif parent is None:
            node.value = None
        elif parent.left is node:
            parent.left = None
        else:
            parent.right = None

    def _splice(self, child: 'BinarySearchTree') -> None:
        """Pull child's value and subtrees up into this node."""
        self.value = child.value
        self.left = child.left
        self.right = child.right

    # ─── Iteration ──────────────────────────────────────────────────

    def iter(self) -> 'BinarySearchTreeIter':
        """New iterator over this tree in ascending order."""
        return BinarySearchTreeIter(self)

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    # ─── Debug / Verification ───────────────────────────────────────

    def verify_structure(self) -> List[str]:
        """
        Verify BST ordering and node shape.
        Returns list of issues found (empty = healthy).

        Each node is checked against the (low, high) bounds set by its
        ancestors, using an explicit stack so chains of any depth work.
        """
        issues: List[str] = []
        if self.value is None:
            if self.left is not None or self.right is not None:
                issues.append("Empty root has children")
            return issues

        stack: List[Tuple['BinarySearchTree', Any, Any, int]] = [(self, None, None, 0)]
        while stack:
            node, low, high, depth = stack.pop()
            if node.value is None:
                issues.append(f"Depth {depth}: empty non-root node")
                continue
            # Duplicates from insert() sit in the right subtree, so low is inclusive
            if low is not None and node.value < low:
                issues.append(f"Depth {depth}: {node.value!r} below ancestor {low!r}")
            if high is not None and node.value >= high:
                issues.append(f"Depth {depth}: {node.value!r} at/above ancestor {high!r}")

            if node.right is not None:
                stack.append((node.right, node.value, high, depth + 1))
            if node.left is not None:
                stack.append((node.left, low, node.value, depth + 1))
        return issues

    def __repr__(self) -> str:
        return f"BinarySearchTree(root={self.value!r}, values={list(self)!r})"


# ─── Iterator ──────────────────────────────────────────────────────────────

class BinarySearchTreeIter:
    """
    Explicit-stack in-order traversal.
    The left spine is pushed eagerly; popping a node pushes the left
    spine of its right child. Once exhausted it stays exhausted.
    """
    __slots__ = ('_stack',)

    def __init__(self, tree: BinarySearchTree):
        self._stack: List[BinarySearchTree] = []
        if tree.value is not None:
            self._push_left(tree)

    def _push_left(self, node: Optional[BinarySearchTree]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> 'BinarySearchTreeIter':
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.value


# ─── Helpers ───────────────────────────────────────────────────────────────

def _leaf(value: Any) -> BinarySearchTree:
    node = BinarySearchTree()
    node.value = value
    return node


def _reject_none(value: Any) -> None:
    if value is None:
        raise ValueError("Cannot store None in a BinarySearchTree (marks an empty tree)")
