import logging
import os
from collections.abc import Callable
from typing import Any

from ordered_st import OrderedTableError, OrderedTree

logger = logging.getLogger()

SAMPLE_ENTRIES = [
    (10, "TEN"),
    (3, "THREE"),
    (1, "ONE"),
    (5, "FIVE"),
    (2, "TWO"),
    (7, "SEVEN"),
]


def print_level(tree: OrderedTree, key: Any, sink: Callable[[Any], Any] = print) -> None:
    """Feed the values under key to sink, level by level."""
    for value in tree.level_order(key):
        sink(value)


def run_demo(sink: Callable[[Any], Any] = print) -> OrderedTree:
    tree = OrderedTree()
    for key, value in SAMPLE_ENTRIES:
        tree.put(key, value)

    sink("Before balance:")
    print_level(tree, 10, sink)  # root

    sink("After balance:")
    tree.balance()
    print_level(tree, 5, sink)  # root

    sink(f"Size: {tree.size()}")
    sink(tree.get(10).unwrap())

    empty = OrderedTree()
    try:
        empty.min()
    except OrderedTableError as e:
        logger.error(f"Empty table check: {e}")
        sink(f"Error: {e}")

    return tree


def main():
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    run_demo()


if __name__ == "__main__":
    main()
