"""
Bundled demonstration graphs and builders.

Each sample is an edge list plus a directed flag. get_sample() turns it into a
label-keyed adjacency mapping for the point-to-point search; build_graph()
turns an edge list into a graph store with integer vertex ids for the engine.
"""

from .graph_store import add_edge, add_vertex, graph


SAMPLE_GRAPHS = {
    "Simple Path": {
        "nodes": ["A", "B", "C", "D", "E"],
        "edges": [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("D", "E")],
        "directed": False,
    },
    "Grid Graph": {
        "nodes": ["1", "2", "3", "4", "5", "6", "7", "8", "9"],
        "edges": [
            ("1", "2"), ("2", "3"), ("4", "5"), ("5", "6"), ("7", "8"), ("8", "9"),
            ("1", "4"), ("4", "7"), ("2", "5"), ("5", "8"), ("3", "6"), ("6", "9"),
        ],
        "directed": False,
    },
    # Weights from the original demo are dropped, every edge counts as one hop
    "Weighted Graph": {
        "nodes": ["S", "A", "B", "C", "D", "T"],
        "edges": [
            ("S", "A"), ("S", "B"), ("A", "C"), ("A", "B"),
            ("B", "D"), ("C", "T"), ("D", "T"), ("C", "D"),
        ],
        "directed": False,
    },
    "Directed Graph (PageRank)": {
        "nodes": ["Home", "About", "Products", "Blog", "Contact"],
        "edges": [
            ("Home", "About"), ("Home", "Products"), ("Home", "Blog"),
            ("About", "Home"), ("About", "Contact"),
            ("Products", "Home"), ("Products", "Contact"),
            ("Blog", "Home"), ("Blog", "Products"),
            ("Contact", "Home"),
        ],
        "directed": True,
    },
    "Disconnected Graph": {
        "nodes": ["A", "B", "C", "X", "Y", "Z"],
        "edges": [("A", "B"), ("A", "C"), ("B", "C"), ("X", "Y"), ("X", "Z"), ("Y", "Z")],
        "directed": False,
    },
}


def to_adjacency(edges, directed=True, nodes=None):
    """
    Build {label: [neighbor labels]} from an edge list.

    Undirected edges are added in both directions. Labels listed in nodes
    appear even when they have no edges.
    """
    adjacency = {label: [] for label in (nodes or ())}
    for source, target in edges:
        adjacency.setdefault(source, []).append(target)
        adjacency.setdefault(target, [])
        if not directed:
            adjacency[target].append(source)
    return adjacency


def get_sample(name):
    """Adjacency mapping for a bundled sample graph."""
    if name not in SAMPLE_GRAPHS:
        raise ValueError(f"\033[31mUnknown sample graph: {name}\033[0m")
    sample = SAMPLE_GRAPHS[name]
    return to_adjacency(sample["edges"], sample["directed"], sample["nodes"])


def build_graph(edges, directed=True, nodes=None, debug=True):
    """
    Build a graph store from labelled edges.

    Labels are numbered in first-seen order (nodes first, then edges).

    Returns:
        (graph state, {label: vertex_id})
    """
    g = graph(debug=debug)
    label_to_id = {}

    def vertex_id_for(label):
        if label not in label_to_id:
            label_to_id[label] = len(label_to_id)
            add_vertex(g, label_to_id[label])
        return label_to_id[label]

    for label in nodes or ():
        vertex_id_for(label)

    for source, target in edges:
        a, b = vertex_id_for(source), vertex_id_for(target)
        add_edge(g, a, b)
        if not directed:
            add_edge(g, b, a)

    return g, label_to_id


def build_sample_graph(name, debug=True):
    """Graph store for a bundled sample graph. Returns (graph state, {label: vertex_id})."""
    if name not in SAMPLE_GRAPHS:
        raise ValueError(f"\033[31mUnknown sample graph: {name}\033[0m")
    sample = SAMPLE_GRAPHS[name]
    return build_graph(sample["edges"], sample["directed"], sample["nodes"], debug=debug)
