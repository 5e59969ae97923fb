"""Test fixtures for avltreelib consumers.

These fixtures provide controlled access to a tree's shape for testing
purposes without exposing node internals as part of the public API.
"""

from typing import Dict, List, Optional, Tuple

from ..core.node import Node
from ..core.traverser import BreadthFirstTraverser
from ..core.tree import AvlTree


class TreeInspector:
    """Public test fixture for structural verification.
    
    Example:
        tree = AvlTree([10, 20, 30])
        inspector = TreeInspector(tree)
        
        assert inspector.root_key() == 20
        assert inspector.children_of(20) == (10, 30)
        assert inspector.is_balanced()
    """
    
    def __init__(self, tree: AvlTree):
        """Initialize with the tree to inspect.
        
        Args:
            tree: The AvlTree under test
        """
        self._tree = tree
    
    def _node(self, key: int) -> Node:
        root = self._tree.root
        node = root.search(key) if root is not None else None
        if node is None:
            raise KeyError(key)
        return node
    
    def root_key(self) -> Optional[int]:
        """Key stored at the root, or None for an empty tree."""
        return self._tree.root_key
    
    def children_of(self, key: int) -> Tuple[Optional[int], Optional[int]]:
        """Return (left key, right key) of the node holding ``key``.
        
        Raises:
            KeyError: If ``key`` is not in the tree
        """
        node = self._node(key)
        return (
            node.left.key if node.left is not None else None,
            node.right.key if node.right is not None else None,
        )
    
    def parent_of(self, key: int) -> Optional[int]:
        """Key of the parent of ``key``'s node, or None for the root."""
        parent = self._node(key).parent
        return parent.key if parent is not None else None
    
    def is_leaf(self, key: int) -> bool:
        return self._node(key).is_leaf()
    
    def balance_factors(self) -> Dict[int, int]:
        """Balance factor of every node, keyed by node key."""
        return {
            node.key: node.balance_factor()
            for node, _ in BreadthFirstTraverser().traverse(self._tree.root)
        }
    
    def levels(self) -> List[List[int]]:
        """Keys grouped by depth, left to right."""
        levels: List[List[int]] = []
        for node, depth in BreadthFirstTraverser().traverse(self._tree.root):
            if depth == len(levels):
                levels.append([])
            levels[depth].append(node.key)
        return levels
    
    def is_balanced(self) -> bool:
        """True if every node's balance factor is in {-1, 0, 1}."""
        return all(f in (-1, 0, 1) for f in self.balance_factors().values())
    
    def parent_links_consistent(self) -> bool:
        """True if every child's parent back-reference points at its parent."""
        for node, _ in BreadthFirstTraverser().traverse(self._tree.root):
            for child in node.children():
                if child.parent is not node:
                    return False
        root = self._tree.root
        return root is None or root.parent is None
