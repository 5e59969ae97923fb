"""Ascending iterator over an AvlTree's keys."""

from typing import List, Optional

from ..exceptions import NoSuchElementError, UnsupportedOperationError
from .node import Node


class AscendingIterator:
    """Forward-only iterator yielding keys in increasing order.
    
    The keys are captured when the iterator is created, by locating the
    minimum node and following successor links. Later changes to the tree
    do not affect an iterator that already exists; ask the tree for a new
    iterator to see them.
    """
    
    def __init__(self, root: Optional[Node]):
        """Initialize iterator from a tree root.
        
        Args:
            root: Root node of the tree, or None for an empty tree
        """
        self._keys: List[int] = []
        node = root.find_min() if root is not None else None
        while node is not None:
            self._keys.append(node.key)
            node = node.successor()
        self._index = 0
    
    def __iter__(self) -> 'AscendingIterator':
        return self
    
    def has_next(self) -> bool:
        """Return True if another key is available."""
        return self._index < len(self._keys)
    
    def next(self) -> int:
        """Return the next key.
        
        Raises:
            NoSuchElementError: If every key has already been returned
        """
        if not self.has_next():
            raise NoSuchElementError("iterator is exhausted")
        key = self._keys[self._index]
        self._index += 1
        return key
    
    __next__ = next
    
    def remove(self) -> None:
        """Removal through the iterator is not supported.
        
        Raises:
            UnsupportedOperationError: Always
        """
        raise UnsupportedOperationError("Operations of removals are not supported")
    
    def __length_hint__(self) -> int:
        return len(self._keys) - self._index
