"""AVL tree container for avltreelib.

AvlTree owns the node graph. Placement and search are delegated to Node;
after each structural change the tree walks parent links upward from the
point of disturbance and restores the balance invariant with rotations.
"""

import logging
from typing import Iterable, Optional, Union

from cachetools import LRUCache, cached

from ..config import TreeConfig
from ..exceptions import EmptyTreeError, InvariantViolationError
from .iterator import AscendingIterator
from .node import Node

logger = logging.getLogger(__name__)

LEFT_VIOLATION = 2    # Left subtree two levels taller than the right
RIGHT_VIOLATION = -2  # Right subtree two levels taller than the left


def _check_key(key) -> None:
    # bool is an int subclass but never a meaningful key
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError(f"AvlTree keys must be int, got {type(key).__name__}")


@cached(cache=LRUCache(maxsize=128))
def _min_nodes(h: int) -> int:
    if h == 0:
        return 1
    if h == 1:
        return 2
    prev, cur = 1, 2
    for _ in range(2, h + 1):
        prev, cur = cur, prev + cur + 1
    return cur


class AvlTree:
    """Self-balancing binary search tree of unique integer keys.

    Construction:
        AvlTree()               -> empty tree
        AvlTree(other_tree)     -> deep copy of other_tree
        AvlTree([5, 3, 8, 3])   -> bulk build, duplicates skipped
        AvlTree(None)           -> empty tree

    Example:
        >>> tree = AvlTree([10, 20, 30])
        >>> tree.contains(20)
        0
        >>> list(tree)
        [10, 20, 30]
    """

    def __init__(self,
                 source: Union['AvlTree', Iterable[int], None] = None,
                 config: Optional[TreeConfig] = None):
        """Create a tree, optionally filled from ``source``.

        Args:
            source: Another AvlTree to copy, an iterable of ints, or None
            config: Runtime configuration (a copy inherits the source's)

        Raises:
            ValueError: If the configuration is invalid
        """
        if config is None:
            config = source.config if isinstance(source, AvlTree) else TreeConfig()
        config_errors = config.validate()
        if config_errors:
            raise ValueError(f"Invalid configuration: {'; '.join(config_errors)}")

        self.config = config
        self._root: Optional[Node] = None
        self._size = 0

        if source is None:
            return
        # Copying goes through the source's ascending iterator so the new
        # tree never shares nodes with the old one
        for key in source:
            self.add(key)

    # Public API

    def add(self, key: int) -> bool:
        """Insert ``key``.

        Args:
            key: Integer key to insert

        Returns:
            True if the key was inserted, False if it was already present
        """
        _check_key(key)
        if self.contains(key) != -1:
            return False

        new_node = Node(key)
        self._size += 1

        if self._root is None:
            self._root = new_node
            self._after_mutation()
            return True

        self._place(new_node)

        # One rebalance at the lowest unbalanced ancestor restores the
        # height that subtree had before the insert
        current = new_node.parent
        while current is not None and current.balance_factor() not in (LEFT_VIOLATION, RIGHT_VIOLATION):
            current = current.parent
        if current is not None:
            self._add_rebalance(current)

        self._after_mutation()
        return True

    def delete(self, key: int) -> bool:
        """Remove ``key``.

        Args:
            key: Integer key to remove

        Returns:
            True if the key was found and removed, False otherwise
        """
        _check_key(key)
        if self.contains(key) == -1:
            return False

        current = self._remove_node(key)
        # Unlike insertion, fixing one level can shorten the subtree and
        # unbalance an ancestor, so the walk always reaches the root
        while current is not None:
            if current.balance_factor() in (LEFT_VIOLATION, RIGHT_VIOLATION):
                current = self._delete_rebalance(current)
            else:
                current = current.parent

        self._size -= 1
        self._after_mutation()
        return True

    def contains(self, key: int) -> int:
        """Depth of ``key`` (0 for the root), or -1 if it is not in the tree."""
        _check_key(key)
        if self._root is None:
            return -1
        return self._root.depth_of(key)

    def size(self) -> int:
        """Number of keys in the tree."""
        return self._size

    def iterator(self) -> AscendingIterator:
        """Return a new iterator over the keys in ascending order.

        The iterator does not support ``remove()``.
        """
        return AscendingIterator(self._root)

    @staticmethod
    def min_nodes_for_height(h: int) -> int:
        """Minimum number of nodes in an AVL tree of height ``h``.

        Follows N(0)=1, N(1)=2, N(h)=N(h-1)+N(h-2)+1.

        Args:
            h: Tree height (non-negative)

        Raises:
            ValueError: If ``h`` is negative
        """
        if h < 0:
            raise ValueError(f"Height must be non-negative, got {h}")
        return _min_nodes(h)

    # Convenience

    @property
    def root(self) -> Optional[Node]:
        return self._root

    @property
    def root_key(self) -> Optional[int]:
        return self._root.key if self._root is not None else None

    def height(self) -> int:
        """Height of the whole tree; -1 when empty."""
        return Node.subtree_height(self._root)

    def min(self) -> int:
        if self._root is None:
            raise EmptyTreeError("min() of an empty tree")
        return self._root.find_min().key

    def max(self) -> int:
        if self._root is None:
            raise EmptyTreeError("max() of an empty tree")
        return self._root.find_max().key

    def copy(self) -> 'AvlTree':
        return AvlTree(self)

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def validate(self) -> None:
        """Check every structural invariant of the tree.

        Verifies AVL balance, strict BST ordering, parent back-references
        and the size counter.

        Raises:
            InvariantViolationError: On the first violation found
        """
        try:
            count = self._validate_subtree(self._root, None, None, None)
            if count != self._size:
                raise InvariantViolationError(
                    f"size counter is {self._size} but tree holds {count} nodes"
                )
        except InvariantViolationError as e:
            logger.warning("AVL invariant violated: %s", e)
            raise

    # Python protocol

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, key) -> bool:
        if not isinstance(key, int) or isinstance(key, bool):
            return False
        return self.contains(key) != -1

    def __iter__(self) -> AscendingIterator:
        return self.iterator()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AvlTree):
            return NotImplemented
        return self._size == other._size and list(self) == list(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"

    # Structural helpers

    def _place(self, new_node: Node) -> None:
        """Attach ``new_node`` as a leaf in BST order (key known absent)."""
        current = self._root
        while True:
            if new_node.key > current.key:
                if current.right is None:
                    current.set_right(new_node)
                    return
                current = current.right
            else:
                if current.left is None:
                    current.set_left(new_node)
                    return
                current = current.left

    def _replace_in_parent(self, old: Node, new: Optional[Node]) -> None:
        """Put ``new`` where ``old`` hangs from its parent (or at the root)."""
        parent = old.parent
        if parent is None:
            self._root = new
            if new is not None:
                new.set_parent(None)
        elif old.is_left_child():
            parent.set_left(new)
        else:
            parent.set_right(new)

    def _remove_node(self, key: int) -> Optional[Node]:
        """Unlink the node holding ``key``.

        Returns:
            The lowest node whose subtree changed, i.e. where the rebalance
            walk has to start (None if the tree became empty)
        """
        target = self._root.search(key)
        parent = target.parent

        if target.left is None or target.right is None:
            # Leaf or single child: promote whatever is below
            self._replace_in_parent(target, target.left or target.right)
            target.unlink()
            return parent

        # Two children: splice the in-order successor into target's place
        successor = target.right.find_min()
        successor_parent = successor.parent
        start = successor if successor_parent is target else successor_parent
        logger.debug("delete %d: splicing successor %d", key, successor.key)

        if successor_parent is target:
            target.set_right(successor.right)
        else:
            successor_parent.set_left(successor.right)

        self._replace_in_parent(target, successor)
        successor.set_left(target.left)
        successor.set_right(target.right)
        target.unlink()
        return start

    # Rotations

    def _rotate_left(self, pivot: Node) -> Node:
        """Promote ``pivot.right`` into pivot's position; return it."""
        child = pivot.right
        if self.config.log_rotations:
            logger.debug("rotate left at %d", pivot.key)
        pivot.set_right(child.left)
        self._replace_in_parent(pivot, child)
        child.set_left(pivot)
        return child

    def _rotate_right(self, pivot: Node) -> Node:
        """Promote ``pivot.left`` into pivot's position; return it."""
        child = pivot.left
        if self.config.log_rotations:
            logger.debug("rotate right at %d", pivot.key)
        pivot.set_left(child.right)
        self._replace_in_parent(pivot, child)
        child.set_right(pivot)
        return child

    def _add_rebalance(self, node: Node) -> None:
        """Fix the first unbalanced ancestor found after an insertion."""
        factor = node.balance_factor()
        if factor == RIGHT_VIOLATION:
            child_factor = node.right.balance_factor()
            if child_factor <= -1:
                logger.debug("right-right imbalance at %d", node.key)
                self._rotate_left(node)
            elif child_factor >= 1:
                logger.debug("right-left imbalance at %d", node.key)
                self._rotate_right(node.right)
                self._rotate_left(node)
        elif factor == LEFT_VIOLATION:
            child_factor = node.left.balance_factor()
            if child_factor >= 1:
                logger.debug("left-left imbalance at %d", node.key)
                self._rotate_right(node)
            elif child_factor <= -1:
                logger.debug("left-right imbalance at %d", node.key)
                self._rotate_left(node.left)
                self._rotate_right(node)

    def _delete_rebalance(self, node: Node) -> Node:
        """Fix an unbalanced node found during the post-delete walk.

        A child factor of 0 can only happen after deletion and is handled as
        the single-rotation case.

        Returns:
            The node now occupying ``node``'s former position
        """
        if node.balance_factor() == RIGHT_VIOLATION:
            if node.right.balance_factor() >= 1:
                logger.debug("right-left imbalance at %d", node.key)
                self._rotate_right(node.right)
                return self._rotate_left(node)
            logger.debug("right-right imbalance at %d", node.key)
            return self._rotate_left(node)

        if node.left.balance_factor() <= -1:
            logger.debug("left-right imbalance at %d", node.key)
            self._rotate_left(node.left)
            return self._rotate_right(node)
        logger.debug("left-left imbalance at %d", node.key)
        return self._rotate_right(node)

    # Validation

    def _after_mutation(self) -> None:
        if self.config.check_invariants:
            self.validate()

    def _validate_subtree(self,
                          node: Optional[Node],
                          parent: Optional[Node],
                          low: Optional[int],
                          high: Optional[int]) -> int:
        """Validate ``node``'s subtree and return its node count."""
        if node is None:
            return 0
        if node.parent is not parent:
            raise InvariantViolationError(
                f"node {node.key} has a stale parent link", key=node.key
            )
        if (low is not None and node.key <= low) or (high is not None and node.key >= high):
            raise InvariantViolationError(
                f"node {node.key} is out of order (bounds {low}, {high})", key=node.key
            )
        factor = node.balance_factor()
        if factor not in (-1, 0, 1):
            raise InvariantViolationError(
                f"node {node.key} has balance factor {factor}", key=node.key
            )
        return (1
                + self._validate_subtree(node.left, node, low, node.key)
                + self._validate_subtree(node.right, node, node.key, high))
