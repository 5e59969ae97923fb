"""Node abstraction for avltreelib.

The Node is intentionally kept passive - it is a structural unit holding a key
and its links. It answers local questions about the subtree below it (height,
balance, search, successor) but never rebalances itself. Rebalancing is the
job of the owning AvlTree.

Children are owned through ordinary references. The parent link is a weak
reference so the upward pointer never keeps a detached parent alive.
"""

import weakref
from typing import Optional, Tuple


class Node:
    """A single vertex of an AVL tree.
    
    Link mutators keep the parent back-reference consistent: assigning a
    child always re-points that child's parent at this node, and a child
    that gets displaced by the assignment has its parent cleared (unless it
    was already moved under another node).
    """
    
    __slots__ = ('_key', '_left', '_right', '_parent', '__weakref__')
    
    def __init__(self, key: int):
        """Create a detached node.
        
        Args:
            key: The integer key this node holds for its whole lifetime
        """
        self._key = key
        self._left: Optional['Node'] = None
        self._right: Optional['Node'] = None
        # weakref.ref to the parent, or None for a root/detached node
        self._parent: Optional['weakref.ref[Node]'] = None
    
    @property
    def key(self) -> int:
        """The node's key (read-only)."""
        return self._key
    
    # Links
    
    @property
    def left(self) -> Optional['Node']:
        return self._left
    
    @left.setter
    def left(self, node: Optional['Node']) -> None:
        self.set_left(node)
    
    @property
    def right(self) -> Optional['Node']:
        return self._right
    
    @right.setter
    def right(self, node: Optional['Node']) -> None:
        self.set_right(node)
    
    @property
    def parent(self) -> Optional['Node']:
        if self._parent is None:
            return None
        return self._parent()
    
    @parent.setter
    def parent(self, node: Optional['Node']) -> None:
        self.set_parent(node)
    
    def set_left(self, node: Optional['Node']) -> None:
        """Make ``node`` the left child and point its parent link here."""
        old = self._left
        self._left = node
        self._adopt(node, old)
    
    def set_right(self, node: Optional['Node']) -> None:
        """Make ``node`` the right child and point its parent link here."""
        old = self._right
        self._right = node
        self._adopt(node, old)
    
    def set_parent(self, node: Optional['Node']) -> None:
        """Set only the back-reference; the parent's child link is untouched."""
        self._parent = weakref.ref(node) if node is not None else None
    
    def _adopt(self, node: Optional['Node'], old: Optional['Node']) -> None:
        if node is not None:
            node.set_parent(self)
        # Only clear the displaced child if nobody re-parented it meanwhile
        if old is not None and old is not node and old.parent is self:
            old.set_parent(None)
    
    def unlink(self) -> None:
        """Drop this node's own links before it is discarded.

        Former children are left as they are; by the time a node is unlinked
        they have already been re-parented elsewhere.
        """
        self._left = None
        self._right = None
        self._parent = None

    def children(self) -> Tuple['Node', ...]:
        """Present children, left first."""
        return tuple(c for c in (self._left, self._right) if c is not None)
    
    def is_left_child(self) -> bool:
        parent = self.parent
        return parent is not None and parent._left is self
    
    def is_right_child(self) -> bool:
        parent = self.parent
        return parent is not None and parent._right is self
    
    # Structural queries
    
    @staticmethod
    def subtree_height(root: Optional['Node']) -> int:
        """Height of the subtree rooted at ``root``.
        
        An absent subtree has height -1 and a leaf has height 0. Heights are
        not cached; every call walks the subtree.
        """
        if root is None:
            return -1
        return max(Node.subtree_height(root._left),
                   Node.subtree_height(root._right)) + 1
    
    def height(self, root: Optional['Node'] = None) -> int:
        """Height of ``root``'s subtree, or of this node's if omitted."""
        return Node.subtree_height(self if root is None else root)
    
    def balance_factor(self) -> int:
        """Left subtree height minus right subtree height.
        
        2 means the node is left-heavy beyond repair by the invariant, -2
        right-heavy. Anything in {-1, 0, 1} is balanced.
        """
        return Node.subtree_height(self._left) - Node.subtree_height(self._right)
    
    def is_leaf(self) -> bool:
        return self._left is None and self._right is None
    
    def find_min(self) -> 'Node':
        """Leftmost node of this subtree."""
        node = self
        while node._left is not None:
            node = node._left
        return node
    
    def find_max(self) -> 'Node':
        """Rightmost node of this subtree."""
        node = self
        while node._right is not None:
            node = node._right
        return node
    
    def search(self, key: int) -> Optional['Node']:
        """Find the node holding ``key`` in this subtree.
        
        Returns:
            The matching node, or None if the key is not present
        """
        node: Optional[Node] = self
        while node is not None:
            if key == node._key:
                return node
            node = node._right if key > node._key else node._left
        return None
    
    def depth_of(self, key: int) -> int:
        """Number of edges from this node down to ``key``, or -1 if absent."""
        node: Optional[Node] = self
        depth = 0
        while node is not None:
            if key == node._key:
                return depth
            node = node._right if key > node._key else node._left
            depth += 1
        return -1
    
    def successor(self) -> Optional['Node']:
        """Node with the next larger key, or None if this is the maximum."""
        if self._right is not None:
            return self._right.find_min()
        child = self
        parent = self.parent
        while parent is not None and child is parent._right:
            child = parent
            parent = parent.parent
        return parent
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self._key!r})"
