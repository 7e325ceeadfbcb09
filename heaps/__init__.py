"""
MiniDS Heaps Module
===================
Array-backed binary heaps.

Components:
  - binary_heap: 1-indexed binary heap with a pluggable priority
    predicate (min, max or custom key), index deletion and draining

Status: COMPLETE
"""

from heaps.binary_heap import Heap, heapsort

__all__ = ['Heap', 'heapsort']
