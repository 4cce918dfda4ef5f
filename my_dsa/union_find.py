import logging
from typing import Dict, List

from typeguard import typechecked

from .errors import ElementOutOfRangeError, InvalidArgumentError

logger = logging.getLogger(__name__)


@typechecked
class UnionFind:
    """Disjoint-set forest over the elements ``0..n-1``.

    ``find`` compresses the whole visited path onto the root and ``union``
    hangs the lower-rank root under the higher-rank one, which together give
    near-constant amortized cost per operation.
    """

    def __init__(self, n: int):
        if n < 0: raise InvalidArgumentError(f"size must be non-negative, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._count = n
        logger.debug("union-find created with %d singletons", n)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent): raise ElementOutOfRangeError(x, len(self._parent))

    def find(self, x: int) -> int:
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if they were already one set."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry: return False
        rank = self._rank
        if rank[rx] < rank[ry]: rx, ry = ry, rx
        self._parent[ry] = rx
        if rank[rx] == rank[ry]: rank[rx] += 1
        self._count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def groups(self) -> Dict[int, List[int]]:
        out: Dict[int, List[int]] = {}
        for x in range(len(self._parent)):
            out.setdefault(self.find(x), []).append(x)
        return out

    def __len__(self):
        return len(self._parent)

    def __repr__(self):
        return f"UnionFind(size={len(self._parent)}, sets={self._count})"
