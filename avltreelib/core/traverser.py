"""Tree traversal strategies for avltreelib.

Traversers implement different orders for walking the node graph of an
AvlTree. All of them yield ``(node, depth)`` tuples where depth is the
number of edges from the traversal root.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from ..config import TraversalStrategy
from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    @abstractmethod
    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        """Traverse the subtree starting from root.

        Args:
            root: Starting node (None yields nothing)
            max_depth: Deepest level to visit (None = unlimited)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of a node at given depth should be visited."""
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    On a binary search tree this visits keys in ascending order. An explicit
    stack is used so deep trees do not hit the recursion limit.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        node, depth = root, 0
        while stack or node is not None:
            # Descend left as far as the depth limit allows
            while node is not None:
                stack.append((node, depth))
                if not self._should_explore(depth, max_depth):
                    node = None
                    break
                node, depth = node.left, depth + 1
            node, depth = stack.pop()
            yield (node, depth)
            if self._should_explore(depth, max_depth):
                node, depth = node.right, depth + 1
            else:
                node = None


class PreOrderTraverser(TreeTraverser):
    """Pre-order traversal: node before its children.

    Re-inserting keys in pre-order reproduces the same tree shape.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        stack: List[Tuple[Node, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            yield (node, depth)
            if self._should_explore(depth, max_depth):
                # Right pushed first so left is visited first
                if node.right is not None:
                    stack.append((node.right, depth + 1))
                if node.left is not None:
                    stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Post-order traversal: children before node.

    Good for calculating aggregate values bottom-up, such as subtree heights.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded or not self._should_explore(depth, max_depth) or node.is_leaf():
                yield (node, depth)
                continue
            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1, left to
    right within a level.
    """

    def traverse(self,
                 root: Optional[Node],
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            yield (node, depth)
            if self._should_explore(depth, max_depth):
                for child in node.children():
                    queue.append((child, depth + 1))


_STRATEGIES = {
    TraversalStrategy.IN_ORDER: InOrderTraverser,
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
}

_ALIASES = {
    'in_order': TraversalStrategy.IN_ORDER,
    'inorder': TraversalStrategy.IN_ORDER,
    'in': TraversalStrategy.IN_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'preorder': TraversalStrategy.PRE_ORDER,
    'pre': TraversalStrategy.PRE_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'postorder': TraversalStrategy.POST_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'level': TraversalStrategy.BREADTH_FIRST,
    'level_order': TraversalStrategy.BREADTH_FIRST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy
    strategy_lower = str(strategy).lower()
    if strategy_lower not in _ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_ALIASES.keys())}"
        )
    return _ALIASES[strategy_lower]


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy member or name (in_order, pre, post, bfs, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _STRATEGIES[parse_strategy(strategy)]()
