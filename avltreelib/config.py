"""Configuration system for avltreelib.

This module defines how users tune a tree's runtime checks and how they pick
a traversal order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class TraversalStrategy(Enum):
    """Order in which tree nodes are visited.
    
    IN_ORDER is the ascending key order used by tree iteration.
    """
    IN_ORDER = "in_order"           # Left, node, right (ascending keys)
    PRE_ORDER = "pre_order"         # Node before children
    POST_ORDER = "post_order"       # Children before node
    BREADTH_FIRST = "bfs"           # Level by level


@dataclass
class TreeConfig:
    """Runtime behaviour of an AvlTree.
    
    The defaults suit production use. ``check_invariants`` walks the whole
    tree after every mutation, turning O(log n) updates into O(n), so it is
    meant for tests and debugging.
    """
    
    check_invariants: bool = False   # Run validate() after each add/delete
    log_rotations: bool = True       # Emit DEBUG records for rotations
    
    def validate(self) -> List[str]:
        """Validate configuration for consistency.
        
        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        
        if not isinstance(self.check_invariants, bool):
            errors.append(
                f"check_invariants must be a bool, got {type(self.check_invariants).__name__}"
            )
        
        if not isinstance(self.log_rotations, bool):
            errors.append(
                f"log_rotations must be a bool, got {type(self.log_rotations).__name__}"
            )
        
        return errors
    
    @classmethod
    def debug(cls) -> 'TreeConfig':
        """Create config that verifies every invariant after each mutation.
        
        Returns:
            TreeConfig with invariant checking enabled
        """
        return cls(check_invariants=True, log_rotations=True)
