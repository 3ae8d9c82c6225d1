"""
Size-augmented binary search tree implementation of an ordered symbol table.

The tree is never rebalanced on insert or delete. Call balance() to rebuild
it into a minimum-height shape on demand.
"""

import logging
import operator
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from ordered_st.interfaces.ordered_symbol_table import OrderedSymbolTable
from ordered_st.models.exceptions import EmptyTableError, SelectIndexError
from ordered_st.models.option import Option

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """Node in the binary search tree."""

    key: Any
    value: Any
    count: int = 1
    left: "Node | None" = None
    right: "Node | None" = None


def _size(node: Node | None) -> int:
    return 0 if node is None else node.count


def _update_count(node: Node) -> None:
    node.count = _size(node.left) + _size(node.right) + 1


class OrderedTree(OrderedSymbolTable):
    """
    Binary search tree implementation of OrderedSymbolTable.

    Properties maintained:
    1. Every key in a node's left subtree is smaller than the node's key,
       every key in its right subtree is larger
    2. Every node's count is the size of its subtree, itself included
    3. Keys are unique

    Each node owns its children; there are no parent links. Descents are
    loops, so a degenerate tree built from sorted input is safe to use.
    """

    def __init__(self, items: Iterable[tuple[Any, Any]] | None = None) -> None:
        self._root: Node | None = None
        if items is not None:
            for key, value in items:
                self.put(key, value)

    def put(self, key: Any, value: Any) -> None:
        """Insert or update a key-value pair. O(height)"""
        self._check_key(key)
        if self._root is None:
            self._root = Node(key=key, value=value)
            return

        path: list[Node] = []
        current = self._root
        while True:
            if key < current.key:
                path.append(current)
                if current.left is None:
                    current.left = Node(key=key, value=value)
                    break
                current = current.left
            elif key > current.key:
                path.append(current)
                if current.right is None:
                    current.right = Node(key=key, value=value)
                    break
                current = current.right
            else:
                # Key exists, counts are unchanged
                current.value = value
                return

        for node in reversed(path):
            _update_count(node)

    def get(self, key: Any) -> Option:
        """Retrieve value by key. O(height)"""
        self._check_key(key)
        node = self._find_node(key)
        return Option.some(node.value) if node else Option.absent()

    def delete(self, key: Any) -> bool:
        """Remove a key-value pair. O(height)"""
        self._check_key(key)
        path: list[Node] = []
        current = self._root
        while current is not None:
            if key < current.key:
                path.append(current)
                current = current.left
            elif key > current.key:
                path.append(current)
                current = current.right
            else:
                break

        if current is None:
            return False

        if current.right is None:
            replacement = current.left
        elif current.left is None:
            replacement = current.right
        else:
            # Two children: the successor takes this node's place
            replacement = self._min_node(current.right)
            replacement.right = self._delete_min(current.right)
            replacement.left = current.left
            _update_count(replacement)

        self._replace_child(path[-1] if path else None, current, replacement)
        for node in reversed(path):
            _update_count(node)
        return True

    def contains(self, key: Any) -> bool:
        self._check_key(key)
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return True
        return False

    def size(self, lo: Any | None = None, hi: Any | None = None) -> int:
        if lo is None and hi is None:
            return _size(self._root)
        if lo is None or hi is None:
            raise ValueError("size() needs both lo and hi, or neither")

        if hi < lo:
            return 0
        if self.contains(hi):
            return self.rank(hi) - self.rank(lo) + 1
        return self.rank(hi) - self.rank(lo)

    def min(self) -> Any:
        if self._root is None:
            raise EmptyTableError("min")
        return self._min_node(self._root).key

    def max(self) -> Any:
        if self._root is None:
            raise EmptyTableError("max")
        return self._max_node(self._root).key

    def delete_min(self) -> None:
        if self._root is None:
            raise EmptyTableError("delete_min")
        self._root = self._delete_min(self._root)

    def delete_max(self) -> None:
        if self._root is None:
            raise EmptyTableError("delete_max")
        self._root = self._delete_max(self._root)

    def floor(self, key: Any) -> Option:
        """Greatest key <= key. O(height)"""
        self._check_key(key)
        candidate: Node | None = None
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                # Current qualifies unless something in its right subtree does
                candidate = current
                current = current.right
            else:
                return Option.some(current.key)
        return Option.some(candidate.key) if candidate else Option.absent()

    def ceiling(self, key: Any) -> Option:
        """Least key >= key. O(height)"""
        self._check_key(key)
        candidate: Node | None = None
        current = self._root
        while current is not None:
            if key > current.key:
                current = current.right
            elif key < current.key:
                candidate = current
                current = current.left
            else:
                return Option.some(current.key)
        return Option.some(candidate.key) if candidate else Option.absent()

    def rank(self, key: Any) -> int:
        """Number of keys strictly less than key. O(height)"""
        self._check_key(key)
        rank = 0
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                rank += _size(current.left) + 1
                current = current.right
            else:
                return rank + _size(current.left)
        return rank

    def select(self, k: int) -> Any:
        """Key with exactly k smaller keys. O(height)"""
        index = operator.index(k)
        size = self.size()
        if not 0 <= index < size:
            raise SelectIndexError(index, size)

        k = index
        current = self._root
        while current is not None:
            left_size = _size(current.left)
            if k < left_size:
                current = current.left
            elif k > left_size:
                k -= left_size + 1
                current = current.right
            else:
                return current.key
        # Only reachable when subtree counts are corrupt
        raise SelectIndexError(index, size)

    def keys(self, lo: Any | None = None, hi: Any | None = None) -> list[Any]:
        if (lo is None) != (hi is None):
            raise ValueError("keys() needs both lo and hi, or neither")
        return [key for key, _ in self.iterator(lo, hi)]

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return _RangeIterator(self._root, start, end)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def balance(self) -> None:
        """
        Rebuild the tree into a minimum-height shape with the same bindings.

        Nodes are collected in key order and the middle of each index range
        becomes the subtree root. On an even-sized range the upper of the two
        middle nodes is chosen, so the resulting shape depends only on the
        set of keys.
        """
        nodes = list(self._in_order_nodes())
        if not logger.isEnabledFor(logging.DEBUG):
            self._root = self._build_balanced(nodes, 0, len(nodes) - 1)
            return

        height_before = self.height()
        self._root = self._build_balanced(nodes, 0, len(nodes) - 1)
        logger.debug(
            f"Rebalanced {len(nodes)} nodes: height {height_before} -> {self.height()}"
        )

    def height(self) -> int:
        """Number of levels in the tree. 0 when empty."""
        height = 0
        level = [self._root] if self._root else []
        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return height

    def level_order(self, key: Any | None = None) -> list[Any]:
        """
        Return the values of a subtree in breadth-first order.

        Args:
            key: Key whose node roots the subtree. If None, the whole tree.

        Returns:
            Values level by level, left to right. Empty if key is absent.
        """
        start = self._root if key is None else self._find_node(key)
        if start is None:
            return []

        values = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            values.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return values

    def check(self) -> bool:
        """Verify ordering, subtree counts and rank/select consistency."""
        ok = True
        if not self._is_ordered():
            logger.warning("Keys are not in symmetric order")
            ok = False
        if not self._is_size_consistent():
            logger.warning("Subtree counts are not consistent")
            ok = False
        if ok and not self._is_rank_consistent():
            logger.warning("Ranks are not consistent")
            ok = False
        return ok

    def _check_key(self, key: Any) -> None:
        if key is None:
            raise ValueError("key must not be None")

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _replace_child(
        self, parent: Node | None, child: Node, replacement: Node | None
    ) -> None:
        """Put replacement where child hangs under parent."""
        if parent is None:
            self._root = replacement
        elif parent.left is child:
            parent.left = replacement
        else:
            parent.right = replacement

    def _min_node(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _max_node(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def _delete_min(self, node: Node) -> Node | None:
        """Detach the minimum of a subtree and return the new subtree root."""
        if node.left is None:
            return node.right

        path = []
        current = node
        while current.left is not None:
            path.append(current)
            current = current.left
        path[-1].left = current.right
        for ancestor in reversed(path):
            _update_count(ancestor)
        return node

    def _delete_max(self, node: Node) -> Node | None:
        """Detach the maximum of a subtree and return the new subtree root."""
        if node.right is None:
            return node.left

        path = []
        current = node
        while current.right is not None:
            path.append(current)
            current = current.right
        path[-1].right = current.left
        for ancestor in reversed(path):
            _update_count(ancestor)
        return node

    def _in_order_nodes(self) -> Iterator[Node]:
        stack: list[Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def _build_balanced(self, nodes: list[Node], lo: int, hi: int) -> Node | None:
        if lo > hi:
            return None

        mid = (lo + hi) // 2
        if (lo + hi) % 2 == 1:
            mid += 1

        node = nodes[mid]
        node.left = self._build_balanced(nodes, lo, mid - 1)
        node.right = self._build_balanced(nodes, mid + 1, hi)
        node.count = hi - lo + 1
        return node

    def _is_ordered(self) -> bool:
        previous = None
        for index, node in enumerate(self._in_order_nodes()):
            if index > 0 and not previous < node.key:
                return False
            previous = node.key
        return True

    def _is_size_consistent(self) -> bool:
        for node in self._in_order_nodes():
            if node.count != _size(node.left) + _size(node.right) + 1:
                return False
        return True

    def _is_rank_consistent(self) -> bool:
        for i in range(self.size()):
            if self.rank(self.select(i)) != i:
                return False
        for key in self.keys():
            if self.select(self.rank(key)) != key:
                return False
        return True


class _RangeIterator(Iterator[tuple[Any, Any]]):
    """In-order iterator over the keys in [start, end] of a subtree."""

    def __init__(self, root: Node | None, start: Any | None, end: Any | None) -> None:
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and node.key > self._end:
            self._stack.clear()
            raise StopIteration

        result = (node.key, node.value)

        # Everything in the right subtree is above start already
        self._push_left_path(node.right, None)

        return result

    def _push_left_path(self, node: Node | None, start: Any | None) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node:
            if start is not None and node.key < start:
                # Skip nodes less than start
                node = node.right
            else:
                self._stack.append(node)
                if start is not None and node.key == start:
                    break
                node = node.left
