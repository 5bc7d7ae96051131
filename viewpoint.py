#!/usr/bin/env python3

# Find a viewpoint of a directed graph, i.e., a vertex from which all
# others can be reached.  The conventions for graphs are as in the
# tarjan module: a graph is a dictionary { vertex : successors }, with
# a key for every vertex, even one without successors.  Vertices of a
# graph read from input are the integers 0..V-1.
#
# Components are found with Kosaraju's algorithm rather than Tarjan's,
# because the representative of a component must be the first vertex
# reached from the finishing-order stack.  All traversals are
# iterative, so large graphs don't run into the recursion limit.

import logging

log = logging.getLogger(__name__)


class InvalidVertex(ValueError):
    def __init__(self, vertex, nverts=None):
        if nverts is None:
            msg = "%r is not a vertex of the graph" % (vertex,)
        else:
            msg = "vertex %r is not in [0, %d)" % (vertex, nverts)
        super().__init__(msg)
        self.vertex = vertex
        self.nverts = nverts


# An immutable directed graph.  ADJ maps each vertex to its successors.
# Vertices are kept, and visited, in ascending order whatever the order
# of the keys of ADJ.
class Graph:
    def __init__(self, adj):
        self._adj = {u: tuple(adj[u]) for u in sorted(adj)}

    # Build the graph on vertices 0..NVERTS-1 with the given (u, v)
    # edges.  Self-loops and parallel edges are kept as they are.
    @classmethod
    def build(cls, nverts, edges):
        if nverts < 0:
            raise ValueError("vertex count must be non-negative, got %d" % nverts)
        adj = {u: [] for u in range(nverts)}
        for u, v in edges:
            for w in (u, v):
                if not 0 <= w < nverts:
                    raise InvalidVertex(w, nverts)
            adj[u].append(v)
        return cls(adj)

    def vertices(self):
        return iter(self._adj)

    def successors(self, u):
        try:
            return self._adj[u]
        except (KeyError, TypeError):
            raise InvalidVertex(u, self._range()) from None

    def edges(self):
        for u, vs in self._adj.items():
            for v in vs:
                yield u, v

    @property
    def num_edges(self):
        return sum(len(vs) for vs in self._adj.values())

    # Vertex count if this is a 0..V-1 graph, None otherwise.
    def _range(self):
        n = len(self._adj)
        if all(u == i for i, u in enumerate(self._adj)):
            return n
        return None

    def __len__(self):
        return len(self._adj)

    def __contains__(self, u):
        try:
            return u in self._adj
        except TypeError:
            return False

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adj == other._adj

    def __repr__(self):
        return "Graph(%r)" % (self._adj,)

    def __str__(self):
        return "".join("%s: %s\n" % (u, " ".join(str(v) for v in vs))
                       for u, vs in self._adj.items())


# Explore G depth-first from START, skipping anything already in
# VISITED.  Vertices are appended to PREORDER when first reached and to
# POSTORDER (if given) when their exploration is complete.
def _explore(g, start, visited, preorder, postorder=None):
    visited.add(start)
    preorder.append(start)
    stack = [(start, iter(g.successors(start)))]
    while stack:
        u, succ = stack[-1]
        for v in succ:
            if v not in visited:
                visited.add(v)
                preorder.append(v)
                stack.append((v, iter(g.successors(v))))
                break
        else:
            stack.pop()
            if postorder is not None:
                postorder.append(u)


# Return the graph with every edge reversed.  Every vertex of G is a
# vertex of the result, even one with no predecessors in G.
def transpose(g):
    adj = {u: [] for u in g.vertices()}
    for u, v in g.edges():
        adj[v].append(u)
    return Graph(adj)


# Return the vertices of G in depth-first finishing order, starting
# from each unvisited vertex in turn.  The last element is the top of
# the stack.  This is only a topological order if G is acyclic.
def finish_order(g):
    visited = set()
    order = []
    for u in g.vertices():
        if u not in visited:
            _explore(g, u, visited, [], order)
    return order


# Return a dictionary mapping each vertex to the root of its strongly
# connected component.  The root is the vertex popped from ORDER (by
# default the finishing order of G) that started the exploration of its
# component in the transpose graph.
def scc_roots(g, order=None):
    if order is None:
        order = finish_order(g)
    gt = transpose(g)
    stack = list(order)
    visited = set()
    roots = {}
    while stack:
        u = stack.pop()
        if u in visited:
            continue
        component = []
        _explore(gt, u, visited, component)
        for v in component:
            roots[v] = u
    if len(roots) != len(g):
        missing = [u for u in g.vertices() if u not in roots]
        raise ValueError("order doesn't cover vertices %r" % missing)
    return roots


# Contract each component of G, as given by ROOTS, to its root.  Every
# root becomes a vertex, in ascending order.  Every edge of G between
# different components becomes an edge between their roots; parallel
# edges are not merged.
def condense(g, roots):
    adj = {r: [] for r in sorted(set(roots.values()))}
    for u, v in g.edges():
        if roots[u] != roots[v]:
            adj[roots[u]].append(roots[v])
    return Graph(adj)


# Return the condensation of G.
def meta_graph(g):
    return condense(g, scc_roots(g))


# Return the unique vertex of G with in-degree 0, or None if there are
# none or more than one.
def source_vertex(g):
    in_deg = {u: 0 for u in g.vertices()}
    for _, v in g.edges():
        in_deg[v] += 1
    source = None
    for u, d in in_deg.items():
        if d == 0:
            if source is not None:
                return None
            source = u
    return source


# Return True if every vertex of G can be reached from SRC.
def visits_all(g, src):
    if src not in g:
        raise InvalidVertex(src, g._range())
    seen = []
    _explore(g, src, set(), seen)
    return len(seen) == len(g)


# Return the roots of the source components of G in ascending order.
# Between them they reach every vertex, and no smaller set does.
def find_roots(g):
    mg = meta_graph(g)
    in_deg = {u: 0 for u in mg.vertices()}
    for _, v in mg.edges():
        in_deg[v] += 1
    return [u for u, d in in_deg.items() if d == 0]


# Return a viewpoint of G, or None if none exists.
def get_viewpoint(g):
    roots = scc_roots(g)
    mg = condense(g, roots)
    log.debug("%d vertices, %d components, %d condensation edges",
              len(g), len(mg), mg.num_edges)

    src = source_vertex(mg)
    if src is None:
        log.debug("no unique source component")
        return None

    log.debug("source component has root %d", src)
    if not visits_all(g, src):
        log.debug("not every vertex can be reached from %d", src)
        return None
    return src


# Return a viewpoint of the graph on NVERTS vertices with the given
# edges, or None if none exists.
def find_viewpoint(nverts, edges):
    return get_viewpoint(Graph.build(nverts, edges))
