"""
Shared pytest fixtures for ordered symbol table tests.
"""

import random

import pytest

from ordered_st import OrderedTree


@pytest.fixture
def empty_tree():
    """Provide a fresh, empty OrderedTree."""
    return OrderedTree()


@pytest.fixture
def sample_entries():
    """Provide the sample bindings in insertion order."""
    return [
        (10, "TEN"),
        (3, "THREE"),
        (1, "ONE"),
        (5, "FIVE"),
        (2, "TWO"),
        (7, "SEVEN"),
    ]


@pytest.fixture
def sample_tree(sample_entries):
    """Provide a tree built from the sample bindings."""
    tree = OrderedTree()
    for key, value in sample_entries:
        tree.put(key, value)
    return tree


@pytest.fixture
def large_sample_entries():
    """Provide a larger, shuffled sample for stress testing."""
    entries = [(i, f"value{i}") for i in range(0, 2000, 2)]
    random.Random(42).shuffle(entries)
    return entries


@pytest.fixture
def large_tree(large_sample_entries):
    """Provide a tree built from the larger sample."""
    return OrderedTree(large_sample_entries)
