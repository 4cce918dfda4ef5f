"""Adjacency-list graph and the traversal / shortest-path algorithms over it.

Algorithms keep their visited sets local to the call, so a graph is never
mutated by reading it. A start or end vertex the graph does not know is
treated as absence: empty traversals, False, None or an empty mapping.
"""
import heapq
import itertools
import logging
import math
from typing import Dict, Generic, Hashable, Iterator, List, Optional, Set, Tuple, TypeVar

from .containers import Queue, Stack
from .union_find import UnionFind

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)
Edge = Tuple[V, V, float]

WHITE, GRAY, BLACK = 0, 1, 2
_NO_PARENT = object()


class Graph(Generic[V]):
    def __init__(self, directed: bool = False):
        self.directed = directed
        self._adj: Dict[V, List[Tuple[V, float]]] = {}
        self._edges: List[Edge] = []

    def add_vertex(self, v: V) -> bool:
        if v in self._adj: return False
        self._adj[v] = []
        return True

    def add_edge(self, u: V, v: V, weight: float = 1) -> None:
        self.add_vertex(u); self.add_vertex(v)
        self._adj[u].append((v, weight))
        if not self.directed: self._adj[v].append((u, weight))
        self._edges.append((u, v, weight))

    def has_vertex(self, v: V) -> bool:
        return v in self._adj

    def vertices(self) -> List[V]:
        return list(self._adj)

    def neighbors(self, v: V) -> List[Tuple[V, float]]:
        return list(self._adj.get(v, ()))

    def edges(self) -> List[Edge]:
        """Edges as added; an undirected edge appears once."""
        return list(self._edges)

    def __len__(self):
        return len(self._adj)

    def __contains__(self, v):
        return v in self._adj

    def __iter__(self) -> Iterator[V]:
        return iter(self._adj)

    def __repr__(self):
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, vertices={len(self._adj)}, edges={len(self._edges)})"

    # traversal

    def dfs(self, start: V) -> List[V]:
        """Depth-first order from ``start`` using an explicit stack.

        Neighbours are pushed in reverse so the visiting order matches
        ``dfs_recursive``. A vertex popped a second time is skipped.
        """
        if start not in self._adj: return []
        order, visited = [], set()
        stack: Stack[V] = Stack()
        stack.push(start)
        while not stack.is_empty():
            u = stack.pop()
            if u in visited: continue
            visited.add(u); order.append(u)
            for w, _ in reversed(self._adj[u]):
                if w not in visited: stack.push(w)
        return order

    def dfs_recursive(self, start: V) -> List[V]:
        if start not in self._adj: return []
        order, visited = [], set()
        def visit(u):
            visited.add(u); order.append(u)
            for w, _ in self._adj[u]:
                if w not in visited: visit(w)
        visit(start)
        return order

    def bfs(self, start: V) -> List[V]:
        if start not in self._adj: return []
        order, visited = [], {start}
        q: Queue[V] = Queue()
        q.enqueue(start)
        while not q.is_empty():
            u = q.dequeue(); order.append(u)
            for w, _ in self._adj[u]:
                if w not in visited:
                    visited.add(w); q.enqueue(w)
        return order

    def shortest_path_unweighted(self, start: V, end: V) -> Optional[List[V]]:
        """Fewest-edges path from ``start`` to ``end``, or None when unreachable."""
        if start not in self._adj or end not in self._adj: return None
        parent = {start: _NO_PARENT}
        q: Queue[V] = Queue()
        q.enqueue(start)
        while not q.is_empty():
            u = q.dequeue()
            if u == end:
                path = [u]
                while parent[path[-1]] is not _NO_PARENT:
                    path.append(parent[path[-1]])
                return path[::-1]
            for w, _ in self._adj[u]:
                if w not in parent:
                    parent[w] = u; q.enqueue(w)
        return None

    def has_path(self, start: V, end: V) -> bool:
        return self.shortest_path_unweighted(start, end) is not None

    # ordering and cycles

    def _post_order_acyclic(self) -> Optional[List[V]]:
        """DFS finish order over the whole graph, None on a back edge to a gray vertex."""
        color = dict.fromkeys(self._adj, WHITE)
        finished = []
        for root in self._adj:
            if color[root] != WHITE: continue
            color[root] = GRAY
            stack = [(root, iter(self._adj[root]))]
            while stack:
                u, it = stack[-1]
                nxt = next(it, None)
                if nxt is None:
                    color[u] = BLACK; finished.append(u)
                    stack.pop()
                    continue
                w = nxt[0]
                if color[w] == GRAY:
                    logger.debug("back edge %r -> %r closes a cycle", u, w)
                    return None
                if color[w] == WHITE:
                    color[w] = GRAY
                    stack.append((w, iter(self._adj[w])))
        return finished

    def topological_sort(self) -> Optional[List[V]]:
        """Vertices with every edge u->v placing u before v; None if the graph has a cycle.

        Undirected edges are stored both ways, so any undirected graph with
        an edge has no topological order.
        """
        finished = self._post_order_acyclic()
        if finished is None: return None
        return finished[::-1]

    def has_cycle_directed(self) -> bool:
        return self._post_order_acyclic() is None

    def has_cycle_undirected(self) -> bool:
        """Parent-tracking DFS. Only the first edge back to the parent is the tree
        edge, so a parallel edge or a self loop counts as a cycle."""
        visited = set()
        for root in self._adj:
            if root in visited: continue
            visited.add(root)
            stack = [(root, _NO_PARENT)]
            while stack:
                u, parent = stack.pop()
                skipped = False
                for w, _ in self._adj[u]:
                    if w == parent and not skipped:
                        skipped = True; continue
                    if w in visited: return True
                    visited.add(w); stack.append((w, u))
        return False

    def has_cycle(self) -> bool:
        return self.has_cycle_directed() if self.directed else self.has_cycle_undirected()

    # weighted shortest paths

    def _dijkstra(self, start: V):
        dist = dict.fromkeys(self._adj, math.inf)
        prev = {}
        dist[start] = 0
        tie = itertools.count()
        heap = [(0, next(tie), start)]
        while heap:
            d, _, u = heapq.heappop(heap)
            if d > dist[u]: continue
            for w, weight in self._adj[u]:
                nd = d + weight
                if nd < dist[w]:
                    dist[w] = nd; prev[w] = u
                    heapq.heappush(heap, (nd, next(tie), w))
        return dist, prev

    def dijkstra(self, start: V) -> Dict[V, float]:
        """Shortest distance from ``start`` to every vertex, ``math.inf`` if unreachable.

        Edge weights must be non-negative. This is not checked; with a
        negative weight the result is simply wrong.
        """
        if start not in self._adj: return {}
        return self._dijkstra(start)[0]

    def dijkstra_path(self, start: V, end: V) -> Optional[Tuple[float, List[V]]]:
        if start not in self._adj or end not in self._adj: return None
        dist, prev = self._dijkstra(start)
        if dist[end] == math.inf: return None
        path = [end]
        while path[-1] != start:
            path.append(prev[path[-1]])
        return dist[end], path[::-1]

    # grouping

    def connected_components(self) -> List[Set[V]]:
        """Vertex sets connected when edge direction is ignored, in first-vertex order."""
        adj = {v: [w for w, _ in edges] for v, edges in self._adj.items()}
        if self.directed:
            for u, v, _ in self._edges:
                adj[v].append(u)
        components, seen = [], set()
        for root in adj:
            if root in seen: continue
            seen.add(root)
            component = {root}
            q: Queue[V] = Queue()
            q.enqueue(root)
            while not q.is_empty():
                for w in adj[q.dequeue()]:
                    if w not in seen:
                        seen.add(w); component.add(w); q.enqueue(w)
            components.append(component)
        return components

    def minimum_spanning_forest(self) -> List[Edge]:
        """Kruskal: cheapest edges first, kept when ``UnionFind.union`` joins two trees.

        Directed edges are treated as undirected.
        """
        index = {v: i for i, v in enumerate(self._adj)}
        uf = UnionFind(len(index))
        forest = []
        for u, v, weight in sorted(self._edges, key=lambda e: e[2]):
            if uf.union(index[u], index[v]): forest.append((u, v, weight))
        return forest
