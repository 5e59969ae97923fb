"""Testing utilities for avltreelib consumers."""

from .fixtures import TreeInspector

__all__ = ['TreeInspector']
