from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Iterator, TypeVar


K = TypeVar("K")

DistanceFn = Callable[[K, K], int]

logger = logging.getLogger(__name__)


@dataclass
class BKNode(Generic[K]):
    key: K
    # edge label (distance to this node's key at insert time) -> child
    children: dict[int, "BKNode[K]"] = field(default_factory=dict)


class BKTree(Generic[K]):
    """Burkhard-Keller tree over a discrete metric.

    The distance function is supplied once and must be a metric with
    non-negative integer values. It is never checked: a function that breaks
    symmetry or the triangle inequality makes ``find`` silently miss keys.
    """

    def __init__(self, dist: DistanceFn):
        self.dist = dist
        self.root: BKNode[K] | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def insert(self, key: K) -> None:
        if self.root is None:
            self.root = BKNode(key=key)
            self._size = 1
            logger.debug("created root %r", key)
            return
        node = self.root
        while True:
            d = self.dist(node.key, key)
            if d == 0:
                logger.debug("discarded duplicate %r", key)
                return
            nxt = node.children.get(d)
            if nxt is None:
                node.children[d] = BKNode(key=key)
                self._size += 1
                return
            node = nxt

    def insert_all(self, keys: Iterable[K]) -> "BKTree[K]":
        before = self._size
        for k in keys:
            self.insert(k)
        logger.debug("insert_all added %d keys (size=%d)", self._size - before, self._size)
        return self

    def find(self, query: K, radius: int) -> list[tuple[K, int]]:
        """Return every stored key within ``radius`` of ``query``.

        Pairs are ``(key, distance)`` in traversal order, which is not a
        ranking; sort the result if needed.
        """
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        if self.root is None:
            return []
        out: list[tuple[K, int]] = []
        queue: deque[BKNode[K]] = deque([self.root])
        while queue:
            node = queue.popleft()
            d = self.dist(node.key, query)
            if d <= radius:
                out.append((node.key, d))
            # triangle inequality: dist(child, query) >= |c - d|
            for c, child in node.children.items():
                if abs(c - d) <= radius:
                    queue.append(child)
        return out

    def keys(self) -> Iterator[K]:
        """Yield every stored key once, in no particular order."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            stack.extend(node.children.values())
            yield node.key
