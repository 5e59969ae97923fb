"""Shared pytest configuration for avltreelib tests."""

import pytest

from avltreelib import AvlTree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running randomized workloads")


@pytest.fixture
def balanced_tree():
    """Perfect tree of height 2.
    
    Structure:
            20
          /    \\
        10      30
       /  \\    /  \\
      5   15  25   35
    """
    return AvlTree([20, 10, 30, 5, 15, 25, 35])


@pytest.fixture
def fibonacci_tree():
    """Minimal AVL tree of height 4, every node left-heavy.
    
    Structure:
                  8
              /       \\
             5         11
           /   \\      /  \\
          3     7    10   12
         / \\   /    /
        2   4 6    9
       /
      1
    """
    return AvlTree([8, 5, 11, 3, 7, 10, 12, 2, 4, 6, 9, 1])
