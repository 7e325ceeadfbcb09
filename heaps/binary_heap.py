"""
MiniDS Binary Heap
==================
Array-backed binary heap ordered by a caller-supplied predicate.

Layout:
  - _items[0] is an unused sentinel so parent/child math is 1-based
  - live elements occupy _items[1.._count]; len(_items) == _count + 1
  - parent(i) = i // 2, left(i) = 2i, right(i) = 2i + 1

Ordering:
  higher_priority(a, b) is True when a belongs nearer the root than b.
  operator.lt gives a min-heap, operator.gt a max-heap; any callable
  works, including closures over external state (priority maps).
  Invariant: no child outranks its parent.

Known gap:
  delete_min_heap()/delete_max_heap() only restore the heap property
  when removing the root (idx == 1). Removing an interior index leaves
  the moved element where it lands; verify_structure() reports it.

Extraction:
  pop() and drain() consume the heap. There is no non-destructive
  ordered iteration.
"""

import logging
import operator
from typing import Any, Callable, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

Predicate = Callable[[Any, Any], bool]

ROOT_IDX = 1


# ─── Heap ──────────────────────────────────────────────────────────────────

class Heap:
    """
    Binary heap with a pluggable priority predicate.

    Usage:
        heap = Heap.new_min()
        heap.add(4)
        heap.add(2)
        heap.pop()            # 2
        list(heap.drain())    # remaining values, heap left empty

        by_x = Heap(lambda a, b: a[0] < b[0])
    """

    def __init__(self, higher_priority: Predicate):
        if not callable(higher_priority):
            raise TypeError(
                f"higher_priority must be callable, got {type(higher_priority).__name__}")
        self._count = 0
        # Sentinel at position 0 keeps index arithmetic 1-based
        self._items: List[Any] = [None]
        self._higher_priority = higher_priority

    @classmethod
    def new_min(cls) -> 'Heap':
        """Heap yielding the smallest value first."""
        return cls(operator.lt)

    @classmethod
    def new_max(cls) -> 'Heap':
        """Heap yielding the largest value first."""
        return cls(operator.gt)

    def __len__(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    @property
    def items(self) -> List[Any]:
        """Live elements in storage order, root first."""
        return self._items[1:]

    def peek(self) -> Optional[Any]:
        """Root element without removing it, or None if empty."""
        if self._count == 0:
            return None
        return self._items[ROOT_IDX]

    # ─── Insert / Remove ────────────────────────────────────────────

    def add(self, value: Any) -> None:
        """Append value and sift it up to its place."""
        self._count += 1
        self._items.append(value)
        self.heapify_up(self._count)

    def delete_min_heap(self, idx: int) -> Optional[Any]:
        """Remove the element at idx from a min-ordered heap."""
        return self._delete_at(idx)

    def delete_max_heap(self, idx: int) -> Optional[Any]:
        """Remove the element at idx from a max-ordered heap."""
        return self._delete_at(idx)

    def _delete_at(self, idx: int) -> Optional[Any]:
        """
        Swap idx with the last element, truncate, and sift down only
        when idx is the root. Returns None (heap unchanged) for an
        index outside 1..count.
        """
        if idx < ROOT_IDX or idx > self._count:
            return None

        removed = self._items[idx]
        self._swap(idx, self._count)
        self._items.pop()
        self._count -= 1

        if idx == ROOT_IDX:
            self.heapify_down(idx)
        elif idx <= self._count:
            logger.debug("delete: index %d removed without re-heapify", idx)
        return removed

    def pop(self) -> Optional[Any]:
        """Remove and return the root, or None if the heap is empty."""
        if self._count == 0:
            return None
        root = self._items[ROOT_IDX]
        last = self._items.pop()
        self._count -= 1
        if self._count > 0:
            self._items[ROOT_IDX] = last
            self.heapify_down(ROOT_IDX)
        return root

    def drain(self) -> Iterator[Any]:
        """
        Lazily pop every element in heap order.
        Consumes the heap; values added while draining are picked up.
        """
        while self._count > 0:
            yield self.pop()

    # ─── Sift ───────────────────────────────────────────────────────

    def heapify_up(self, idx: int) -> None:
        """Move the element at idx toward the root while it outranks its parent."""
        if idx < ROOT_IDX or idx > self._count:
            return
        while self.parent_present(idx):
            pdx = self.parent_idx(idx)
            if not self._higher_priority(self._items[idx], self._items[pdx]):
                break
            self._swap(idx, pdx)
            idx = pdx

    def heapify_down(self, idx: int) -> None:
        """Move the element at idx toward the leaves while a child outranks it."""
        if idx < ROOT_IDX or idx > self._count:
            return
        while self.children_present(idx):
            cdx = self.smallest_child_idx(idx)
            if not self._higher_priority(self._items[cdx], self._items[idx]):
                break
            self._swap(idx, cdx)
            idx = cdx

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    # ─── Navigation ─────────────────────────────────────────────────

    @staticmethod
    def parent_idx(idx: int) -> int:
        return idx // 2

    @staticmethod
    def left_child_idx(idx: int) -> int:
        return idx * 2

    @staticmethod
    def right_child_idx(idx: int) -> int:
        return idx * 2 + 1

    def parent_present(self, idx: int) -> bool:
        return self.parent_idx(idx) > 0

    def children_present(self, idx: int) -> bool:
        return self.left_child_idx(idx) <= self._count

    def smallest_child_idx(self, idx: int) -> int:
        """
        Index of the child the predicate ranks higher.
        "Smallest" only holds for min-heaps; for a max-heap this is the
        largest child. Assumes children_present(idx).
        """
        ldx = self.left_child_idx(idx)
        rdx = self.right_child_idx(idx)
        if rdx > self._count:
            return ldx
        if self._higher_priority(self._items[ldx], self._items[rdx]):
            return ldx
        return rdx

    # ─── Debug / Verification ───────────────────────────────────────

    def verify_structure(self) -> List[str]:
        """
        Verify the heap property and storage shape.
        Returns list of issues found (empty = healthy).
        """
        issues: List[str] = []
        if len(self._items) != self._count + 1:
            issues.append(
                f"Storage length {len(self._items)} does not match count {self._count}")
            return issues

        for idx in range(ROOT_IDX + 1, self._count + 1):
            pdx = self.parent_idx(idx)
            if self._higher_priority(self._items[idx], self._items[pdx]):
                issues.append(
                    f"Position {idx}: {self._items[idx]!r} outranks parent "
                    f"{self._items[pdx]!r} at {pdx}")
        return issues

    def __repr__(self) -> str:
        return f"Heap(count={self._count}, items={self.items!r})"


# ─── Helpers ───────────────────────────────────────────────────────────────

def heapsort(values: Iterable[Any],
             higher_priority: Predicate = operator.lt) -> List[Any]:
    """
    Sort values by pushing them through a Heap.
    Ascending with the default predicate, descending with operator.gt.
    """
    heap = Heap(higher_priority)
    for value in values:
        heap.add(value)
    return list(heap.drain())
