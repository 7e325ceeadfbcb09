"""
MiniDS Trees Module
===================
In-memory ordered trees.

Components:
  - bst: unbalanced binary search tree with floor/ceil, delete,
    in-order successor/predecessor and stack-based iteration

Status: COMPLETE
"""

from trees.bst import BinarySearchTree, BinarySearchTreeIter

__all__ = ['BinarySearchTree', 'BinarySearchTreeIter']
