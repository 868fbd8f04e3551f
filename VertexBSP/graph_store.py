"""
Directed graph store for the superstep engine, in Lisp-like functional style.

Functions take the graph state as first argument and return it, so calls chain:
    g = add_edge(add_edge(graph(), 1, 2), 2, 3)

Or use the method-style wrapper:
    g = Graph(debug=False)
    g.add_edge(1, 2).add_edge(2, 3)

Edge removal policy: remove_edge() drops the FIRST matching (from, to) entry
only. Parallel duplicates need one call each.
"""

from .vertex import create_vertex


# =============================================================================
# CORE DATA CONSTRUCTORS
# =============================================================================

def graph(debug=True):
    """Create a new, empty graph state."""
    if debug:
        print("\033[36m[INIT] Graph store initialized\033[0m")

    return {
        "type": "Graph",
        "vertices": {},
        "edges": [],
        "debug": debug
    }


# =============================================================================
# MUTATION
# =============================================================================

def add_vertex(g, vertex_id):
    """Add a vertex. No-op if the id is already present."""
    if vertex_id not in g["vertices"]:
        g["vertices"][vertex_id] = create_vertex(vertex_id)
        if g["debug"]:
            print(f"\033[36m[REGISTER] Vertex {vertex_id}\033[0m")
    return g


def add_edge(g, from_id, to_id):
    """Add a directed edge, creating missing endpoints. Multi-edges are kept."""
    add_vertex(g, from_id)
    add_vertex(g, to_id)
    g["edges"].append((from_id, to_id))
    g["vertices"][from_id]["add_neighbor"](to_id)
    if g["debug"]:
        print(f"\033[36m[REGISTER] Edge {from_id} -> {to_id}\033[0m")
    return g


def remove_vertex(g, vertex_id):
    """
    Remove a vertex together with every incident edge and neighbor reference.

    Returns True if the vertex existed.
    """
    if vertex_id not in g["vertices"]:
        return False

    del g["vertices"][vertex_id]
    g["edges"] = [(a, b) for a, b in g["edges"] if a != vertex_id and b != vertex_id]
    for vertex in g["vertices"].values():
        vertex["remove_neighbor_all"](vertex_id)

    if g["debug"]:
        print(f"\033[33m[REMOVE] Vertex {vertex_id} and its incident edges\033[0m")
    return True


def remove_edge(g, from_id, to_id):
    """Remove the first matching (from, to) edge. Returns True if one was removed."""
    try:
        g["edges"].remove((from_id, to_id))
    except ValueError:
        return False

    g["vertices"][from_id]["remove_neighbor"](to_id)
    if g["debug"]:
        print(f"\033[33m[REMOVE] Edge {from_id} -> {to_id}\033[0m")
    return True


def reset_values(g, value):
    """Set every vertex value. Used between algorithm runs."""
    for vertex in g["vertices"].values():
        vertex["set_value"](value)
    return g


# =============================================================================
# STATE ACCESSORS
# =============================================================================

def get_vertex(g, vertex_id):
    """Get a vertex by id, or None if absent."""
    return g["vertices"].get(vertex_id)

def get_vertices(g):
    """Get all vertices in insertion order."""
    return tuple(g["vertices"].values())

def get_vertex_ids(g):
    """Get all vertex ids in insertion order."""
    return tuple(g["vertices"].keys())

def get_edges(g):
    """Get all edges in insertion order."""
    return tuple(g["edges"])

def vertex_count(g):
    return len(g["vertices"])

def has_edge(g, from_id, to_id):
    return (from_id, to_id) in g["edges"]


def to_adjacency(g):
    """Export as {vertex_id: [neighbor ids]} for the point-to-point search."""
    return {vertex_id: list(vertex["neighbors"]()) for vertex_id, vertex in g["vertices"].items()}


# =============================================================================
# OOP WRAPPER CLASS
# =============================================================================

class Graph:
    """
    Object-oriented wrapper over the functional graph API:
        g = Graph(debug=False)
        g.add_edge(1, 2).add_edge(1, 3)
        g.get_vertex(2)["get_value"]()
    """

    def __init__(self, debug=True):
        self._g = graph(debug=debug)

    def add_vertex(self, vertex_id):
        self._g = add_vertex(self._g, vertex_id)
        return self

    def add_edge(self, from_id, to_id):
        self._g = add_edge(self._g, from_id, to_id)
        return self

    def remove_vertex(self, vertex_id):
        return remove_vertex(self._g, vertex_id)

    def remove_edge(self, from_id, to_id):
        return remove_edge(self._g, from_id, to_id)

    def reset_values(self, value):
        self._g = reset_values(self._g, value)
        return self

    def get_vertex(self, vertex_id):
        return get_vertex(self._g, vertex_id)

    def has_edge(self, from_id, to_id):
        return has_edge(self._g, from_id, to_id)

    def to_adjacency(self):
        return to_adjacency(self._g)

    def __len__(self):
        return vertex_count(self._g)

    def __contains__(self, vertex_id):
        return vertex_id in self._g["vertices"]

    @property
    def state(self):
        return self._g

    @property
    def vertices(self):
        return get_vertices(self._g)

    @property
    def vertex_ids(self):
        return get_vertex_ids(self._g)

    @property
    def edges(self):
        return get_edges(self._g)

    @property
    def debug(self):
        return self._g["debug"]


def as_graph_state(g):
    """Accept either a Graph wrapper or a raw graph state."""
    return g.state if isinstance(g, Graph) else g
