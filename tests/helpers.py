"""Shared helpers for the ordering tests"""

from typing import List, TypeVar


T = TypeVar('T')


def rotations(items: List[T]) -> List[List[T]]:
    """Every cyclic rotation of items, starting with items itself"""
    return [items[index:] + items[:index] for index in range(len(items))]
