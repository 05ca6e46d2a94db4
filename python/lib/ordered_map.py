#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
ordered_map.py
--------------

An ordered map (key → value) backed by a **Red‑Black** tree.  Insertion
rebalances automatically, so lookup, insert and the ordered queries below
all run in O(log n).

Features
~~~~~~~~
* `omap.insert(key, value)` – insert a new entry (duplicate keys rejected
  unless the map was built with ``DuplicatePolicy.REPLACE``)
* `omap[key] = value`      – insert / replace (``dict`` semantics)
* `omap.member(key)`, `key in omap` – membership test
* `omap.first()`, `omap.last()` – smallest / largest key, ``None`` if empty
* `omap.min_key()`, `omap.max_key()` – same, but raise ``EmptyTreeError``
* `omap.successor(key)`, `omap.predecessor(key)` – in‑order neighbours
* `omap.search_by_key_substring(needle)` – keys containing *needle*
* `omap.search_by_value_substring(needle)` – keys whose value text contains *needle*
* `omap.validate()` – sanity‑check that the red‑black invariants hold

There is no deletion: nodes are only ever created by ``insert`` and are
restructured by rotations during the insert fix‑up.

Absent children are plain ``None``; a colour check on ``None`` always reads
as black (see ``_is_red``).

Typical usage
~~~~~~~~~~~~~
>>> from ordered_map import OrderedMap
>>> omap = OrderedMap()
>>> omap.insert("kai", "sea")
>>> omap.insert("lani", "sky")
>>> omap.insert("aina", "land")
>>> omap.first(), omap.last()
('aina', 'lani')
>>> omap.successor("aina")
'kai'
>>> omap.search_by_key_substring("ai")
['aina', 'kai']
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import (
    Callable,
    Generator,
    Generic,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
)

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Type variables (keys must be totally ordered, values may be anything)
# ----------------------------------------------------------------------
K = TypeVar("K")
V = TypeVar("V")

# ----------------------------------------------------------------------
#  Node colour constants
# ----------------------------------------------------------------------
RED = True
BLACK = False


# ----------------------------------------------------------------------
#  Errors
# ----------------------------------------------------------------------
class OrderedMapError(Exception):
    """Base class for every error raised by :class:`OrderedMap`."""


class KeyNotFoundError(OrderedMapError, KeyError):
    """The requested key is not stored in the map."""


class NoPredecessorError(OrderedMapError, KeyError):
    """The key is stored but is the smallest one."""


class NoSuccessorError(OrderedMapError, KeyError):
    """The key is stored but is the largest one."""


class EmptyTreeError(OrderedMapError, ValueError):
    """A minimum/maximum was requested from an empty map."""


class DuplicateKeyError(OrderedMapError, KeyError):
    """``insert`` was given a key that is already stored."""


class InvariantViolation(OrderedMapError, AssertionError):
    """Raised by :meth:`OrderedMap.validate` when the tree is corrupted."""


class DuplicatePolicy(Enum):
    """What ``insert`` does when the key is already present."""

    REJECT = "reject"  # raise DuplicateKeyError
    REPLACE = "replace"  # overwrite the stored value


class _Node(Generic[K, V]):
    """Internal node object – not meant to be used directly by callers."""

    __slots__ = ("key", "value", "color", "left", "right", "parent")

    def __init__(
        self,
        key: K,
        value: V,
        color: bool = RED,
        parent: Optional["_Node[K, V]"] = None,
    ) -> None:
        self.key = key
        self.value = value
        self.color = color
        self.left: Optional[_Node[K, V]] = None
        self.right: Optional[_Node[K, V]] = None
        self.parent = parent

    def __repr__(self) -> str:
        col = "R" if self.color == RED else "B"
        return f"<{col} {self.key!r}:{self.value!r}>"


def _is_red(node: Optional[_Node[K, V]]) -> bool:
    # Missing children are black leaves.
    return node is not None and node.color == RED


class OrderedMap(Generic[K, V]):
    """
    An ordered map implemented with a red‑black binary search tree.

    Parameters
    ----------
    items : iterable of (key, value), optional
        Inserted one by one with :meth:`insert`, so the duplicate policy
        applies to them too.
    value_text : Callable[[V], str], optional
        Extracts the string searched by :meth:`search_by_value_substring`.
        Defaults to ``str(value)``.
    on_duplicate : DuplicatePolicy, default ``DuplicatePolicy.REJECT``
        Behaviour of :meth:`insert` for a key that is already stored.
    """

    __slots__ = ("_root", "_size", "_value_text", "_on_duplicate")

    # ------------------------------------------------------------------
    #   Construction / basic container protocol
    # ------------------------------------------------------------------
    def __init__(
        self,
        items: Optional[Iterable[Tuple[K, V]]] = None,
        *,
        value_text: Optional[Callable[[V], str]] = None,
        on_duplicate: DuplicatePolicy = DuplicatePolicy.REJECT,
    ) -> None:
        self._root: Optional[_Node[K, V]] = None
        self._size: int = 0
        self._value_text: Callable[[V], str] = value_text or str
        self._on_duplicate = DuplicatePolicy(on_duplicate)

        if items is not None:
            for key, value in items:
                self.insert(key, value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self._find_node(key) is not None  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> V:
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def __setitem__(self, key: K, value: V) -> None:
        """Insert *key* with *value* or replace the existing value."""
        self._insert(key, value, DuplicatePolicy.REPLACE)

    def __iter__(self) -> Generator[K, None, None]:
        """Yield keys in ascending order."""
        for node in self._iter_nodes():
            yield node.key

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        node = self._find_node(key)
        return default if node is None else node.value

    def keys(self) -> List[K]:
        """Return a list of all keys in sorted order."""
        return list(self)

    def values(self) -> List[V]:
        """Return a list of all values in key order."""
        return [node.value for node in self._iter_nodes()]

    def items(self) -> List[Tuple[K, V]]:
        """Return a list of ``(key, value)`` pairs in sorted order."""
        return [(node.key, node.value) for node in self._iter_nodes()]

    # ------------------------------------------------------------------
    #   Lookup
    # ------------------------------------------------------------------
    def _find_node(self, key: K) -> Optional[_Node[K, V]]:
        """Return the node that holds *key*, or ``None`` if not found."""
        cur = self._root
        while cur is not None:
            if key == cur.key:
                return cur
            elif key < cur.key:  # type: ignore[operator]
                cur = cur.left
            else:
                cur = cur.right
        return None

    def member(self, key: K) -> bool:
        """Return ``True`` if *key* is stored in the map."""
        return self._find_node(key) is not None

    # ------------------------------------------------------------------
    #   In‑order traversal
    # ------------------------------------------------------------------
    def _iter_nodes(self) -> Generator[_Node[K, V], None, None]:
        """Yield nodes in ascending key order using an explicit stack."""
        stack: List[_Node[K, V]] = []
        cur = self._root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur
            cur = cur.right

    # ------------------------------------------------------------------
    #   First / last
    # ------------------------------------------------------------------
    @staticmethod
    def _leftmost(node: _Node[K, V]) -> _Node[K, V]:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _rightmost(node: _Node[K, V]) -> _Node[K, V]:
        while node.right is not None:
            node = node.right
        return node

    def first(self) -> Optional[K]:
        """Return the smallest key, or ``None`` if the map is empty."""
        if self._root is None:
            return None
        return self._leftmost(self._root).key

    def last(self) -> Optional[K]:
        """Return the largest key, or ``None`` if the map is empty."""
        if self._root is None:
            return None
        return self._rightmost(self._root).key

    def min_key(self) -> K:
        """Return the smallest key; raise ``EmptyTreeError`` if empty."""
        if self._root is None:
            raise EmptyTreeError("Tree is empty")
        return self._leftmost(self._root).key

    def max_key(self) -> K:
        """Return the largest key; raise ``EmptyTreeError`` if empty."""
        if self._root is None:
            raise EmptyTreeError("Tree is empty")
        return self._rightmost(self._root).key

    # ------------------------------------------------------------------
    #   Successor / predecessor
    # ------------------------------------------------------------------
    def successor(self, key: K) -> K:
        """
        Return the smallest key greater than *key*.

        Raises ``KeyNotFoundError`` if *key* is not stored and
        ``NoSuccessorError`` if it is the largest key.
        """
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)

        if node.right is not None:
            return self._leftmost(node.right).key

        # Walk up until we leave a left subtree.
        parent = node.parent
        while parent is not None and node is parent.right:
            node = parent
            parent = parent.parent
        if parent is None:
            raise NoSuccessorError(f"No successor for {key!r}")
        return parent.key

    def predecessor(self, key: K) -> K:
        """
        Return the greatest key smaller than *key*.

        Raises ``KeyNotFoundError`` if *key* is not stored and
        ``NoPredecessorError`` if it is the smallest key.
        """
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)

        if node.left is not None:
            return self._rightmost(node.left).key

        parent = node.parent
        while parent is not None and node is parent.left:
            node = parent
            parent = parent.parent
        if parent is None:
            raise NoPredecessorError(f"No predecessor for {key!r}")
        return parent.key

    # ------------------------------------------------------------------
    #   Substring search
    # ------------------------------------------------------------------
    def search_by_key_substring(self, needle: str) -> List[K]:
        """Return every key containing *needle*, in ascending order."""
        return [
            node.key
            for node in self._iter_nodes()
            if needle in node.key  # type: ignore[operator]
        ]

    def search_by_value_substring(self, needle: str) -> List[K]:
        """Return every key whose value text contains *needle*, in key order."""
        text = self._value_text
        return [node.key for node in self._iter_nodes() if needle in text(node.value)]

    # ------------------------------------------------------------------
    #   Insertion
    # ------------------------------------------------------------------
    def insert(self, key: K, value: V) -> None:
        """
        Insert a new entry.

        With ``DuplicatePolicy.REJECT`` (the default) an existing *key* raises
        ``DuplicateKeyError`` and the map is left untouched; with
        ``DuplicatePolicy.REPLACE`` the stored value is overwritten.
        """
        self._insert(key, value, self._on_duplicate)

    def _insert(self, key: K, value: V, policy: DuplicatePolicy) -> None:
        parent: Optional[_Node[K, V]] = None
        cur = self._root

        while cur is not None:
            parent = cur
            if key == cur.key:
                if policy is DuplicatePolicy.REJECT:
                    logger.debug("Rejected duplicate key %r", key)
                    raise DuplicateKeyError(key)
                logger.debug("Replaced value for key %r", key)
                cur.value = value
                return
            elif key < cur.key:  # type: ignore[operator]
                cur = cur.left
            else:
                cur = cur.right

        new_node = _Node(key, value, color=RED, parent=parent)
        if parent is None:
            self._root = new_node
        elif key < parent.key:  # type: ignore[operator]
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        self._fix_insert(new_node)
        logger.debug("Inserted key %r (size=%d)", key, self._size)

    # ------------------------------------------------------------------
    #   Insert fix‑up (preserves red‑black properties)
    # ------------------------------------------------------------------
    def _fix_insert(self, z: _Node[K, V]) -> None:
        """Restore red‑black properties after inserting node `z` (which is RED)."""
        # A red parent is never the root, so the grandparent always exists.
        while _is_red(z.parent):
            parent = z.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if _is_red(uncle):
                    # Case A – recolour and push the violation up
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    z = grandparent
                else:
                    if z is parent.right:
                        # inner child: left‑rotate at parent
                        z = parent
                        self._rotate_left(z)
                    # outer child: right‑rotate at grandparent
                    z.parent.color = BLACK
                    z.parent.parent.color = RED
                    self._rotate_right(z.parent.parent)
            else:  # Mirror of the above (parent is a right child)
                uncle = grandparent.left
                if _is_red(uncle):
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    z = grandparent
                else:
                    if z is parent.left:
                        z = parent
                        self._rotate_right(z)
                    z.parent.color = BLACK
                    z.parent.parent.color = RED
                    self._rotate_left(z.parent.parent)
        self._root.color = BLACK

    # ------------------------------------------------------------------
    #   Left / right rotations – helper primitives
    # ------------------------------------------------------------------
    def _rotate_left(self, x: _Node[K, V]) -> None:
        """Left‑rotate the subtree rooted at `x`."""
        y = x.right
        if y is None:
            raise RuntimeError("rotate_left called on a node without right child")
        # Turn y's left subtree into x's right subtree
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        # Link x's parent to y
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        # Put x on y's left
        y.left = x
        x.parent = y

    def _rotate_right(self, y: _Node[K, V]) -> None:
        """Right‑rotate the subtree rooted at `y`."""
        x = y.left
        if x is None:
            raise RuntimeError("rotate_right called on a node without left child")
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is None:
            self._root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x

    # ------------------------------------------------------------------
    #   Shape / validation utilities – useful for debugging and tests
    # ------------------------------------------------------------------
    def height(self) -> int:
        """Number of nodes on the longest root‑to‑leaf path (0 when empty)."""
        best = 0
        stack: List[Tuple[Optional[_Node[K, V]], int]] = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            if node is None:
                best = max(best, depth)
                continue
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
        return best

    def black_height(self) -> int:
        """Number of black nodes on the leftmost root‑to‑leaf path."""
        count = 0
        node = self._root
        while node is not None:
            if node.color == BLACK:
                count += 1
            node = node.left
        return count

    def validate(self) -> None:
        """
        Verify that the tree satisfies all red‑black invariants.

        Raises ``InvariantViolation`` with a descriptive message on the first
        broken property: root colour, red node with a red child, black‑height
        mismatch, BST ordering, parent back‑links or the cached size.
        """

        def check(cond: bool, message: str) -> None:
            if not cond:
                raise InvariantViolation(message)

        def dfs(
            node: Optional[_Node[K, V]],
            low: Optional[_Node[K, V]],
            high: Optional[_Node[K, V]],
        ) -> Tuple[int, int]:
            """Return ``(black_height, node_count)`` of the subtree."""
            if node is None:
                return 1, 0  # None leaves count as black

            check(node.color in (RED, BLACK), "Node colour is neither red nor black")
            if node.color == RED:
                check(not _is_red(node.left), "Red node has red left child")
                check(not _is_red(node.right), "Red node has red right child")

            # Every key must sit strictly inside the bounds set by its ancestors
            if low is not None:
                check(low.key < node.key, "BST property violated (key too small)")
            if high is not None:
                check(node.key < high.key, "BST property violated (key too large)")

            for child in (node.left, node.right):
                if child is not None:
                    check(child.parent is node, "Broken parent back-link")

            left_black, left_count = dfs(node.left, low, node)
            right_black, right_count = dfs(node.right, node, high)
            check(left_black == right_black, "Black-height mismatch")

            bh = left_black + (1 if node.color == BLACK else 0)
            return bh, left_count + right_count + 1

        if self._root is not None:
            check(self._root.color == BLACK, "Root is not black")
            check(self._root.parent is None, "Root has a parent")
        _, count = dfs(self._root, None, None)
        check(count == self._size, "Size counter does not match node count")

    # ------------------------------------------------------------------
    #   Convenience string representation (for debugging)
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{items}}})"


__all__ = [
    "BLACK",
    "RED",
    "DuplicateKeyError",
    "DuplicatePolicy",
    "EmptyTreeError",
    "InvariantViolation",
    "KeyNotFoundError",
    "NoPredecessorError",
    "NoSuccessorError",
    "OrderedMap",
    "OrderedMapError",
]
