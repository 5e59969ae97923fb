"""Exception hierarchy for avltreelib.

Ordinary outcomes such as "key already present" or "key not found" are
reported through return values (``add``/``delete`` return a bool,
``contains`` returns -1). Exceptions are reserved for the iteration surface,
for empty-tree lookups and for broken invariants.
"""


class AvlTreeError(Exception):
    """Base class for all avltreelib errors."""
    pass


class NoSuchElementError(AvlTreeError, StopIteration):
    """Raised when an exhausted iterator is asked for another key.
    
    Subclasses StopIteration so ``for`` loops and ``next(it, default)``
    terminate normally.
    """
    pass


class UnsupportedOperationError(AvlTreeError, NotImplementedError):
    """Raised for operations the tree will never support, such as removal
    through an iterator."""
    pass


class EmptyTreeError(AvlTreeError, LookupError):
    """Raised when min/max is requested from an empty tree."""
    pass


class InvariantViolationError(AvlTreeError):
    """Raised by ``AvlTree.validate()`` when a structural invariant is broken.
    
    Attributes:
        key: Key of the node where the violation was detected (None when the
            violation is tree-wide, e.g. a stale size counter)
    """
    
    def __init__(self, message: str, key=None):
        super().__init__(message)
        self.key = key
