"""
Vertex computations for the superstep engine.

Every computation is a record:
    {"type": "VertexComputation", "name": ..., "description": ..., "compute": fn, ...params}

where compute(vertex, incoming, send, superstep) may change the vertex value
and call send(target_id, payload) any number of times. Messages sent in
superstep r are only seen in superstep r + 1.

Select one by name with select_computation(); configuration errors are
raised there, never inside a round.
"""

from .graph_store import as_graph_state, get_vertex, vertex_count


DAMPING = 0.85
EPSILON = 1e-6

DESCRIPTIONS = {
    "bfs": "Breadth-first search: propagates hop distances from the source one superstep at a time.",
    "dfs": "Depth-first search: marks every vertex reachable from the source in a single superstep.",
    "dijkstra": "Dijkstra's algorithm (message-passing demo): unweighted relaxation from the source.",
    "pagerank": "PageRank: iteratively distributes rank along outgoing edges with damping 0.85.",
}


def _relax(vertex, incoming, send):
    """Hop-count relaxation: keep strictly smaller distances and re-broadcast d + 1."""
    for message in incoming:
        distance = message.payload
        if distance < vertex["get_value"]():
            vertex["set_value"](distance)
            for neighbor in vertex["neighbors"]():
                send(neighbor, distance + 1)


def _start_at_source(vertex, send):
    vertex["set_value"](0)
    for neighbor in vertex["neighbors"]():
        send(neighbor, 1)


# =============================================================================
# COMPUTATION CONSTRUCTORS
# =============================================================================

def create_bfs_computation(source_id):
    """
    Breadth-first distance propagation from source_id.

    Quiesces once no vertex finds a shorter hop count; unreachable vertices
    keep +inf.
    """
    def compute(vertex, incoming, send, superstep):
        if superstep == 0 and vertex["id"] == source_id:
            _start_at_source(vertex, send)
        else:
            _relax(vertex, incoming, send)

    return {
        "type": "VertexComputation",
        "name": "bfs",
        "description": DESCRIPTIONS["bfs"],
        "compute": compute,
        "source_id": source_id
    }


def create_dfs_computation(source_id, g):
    """
    Depth-first reachability marking from source_id.

    The whole traversal runs inside the source vertex's call at superstep 0
    and marks every reachable vertex with value 1. Only a notification to the
    source's direct neighbors goes through the message protocol, so the
    traversal itself does not unfold across supersteps.
    """
    g = as_graph_state(g)

    def compute(vertex, incoming, send, superstep):
        if superstep != 0 or vertex["id"] != source_id:
            return

        visited = set()
        stack = [source_id]
        while stack:
            vertex_id = stack.pop()
            current = get_vertex(g, vertex_id)
            if vertex_id in visited or current is None:
                continue
            visited.add(vertex_id)
            current["set_value"](1)
            # Reversed so the first neighbor is explored first
            stack.extend(reversed(current["neighbors"]()))

        for neighbor in vertex["neighbors"]():
            send(neighbor, 1)

    return {
        "type": "VertexComputation",
        "name": "dfs",
        "description": DESCRIPTIONS["dfs"],
        "compute": compute,
        "source_id": source_id
    }


def create_dijkstra_computation(source_id):
    """
    Simplified single-source relaxation. Edges carry no weights and there is
    no priority ordering, so this is the same hop-count relaxation as BFS.
    """
    def compute(vertex, incoming, send, superstep):
        if superstep == 0 and vertex["id"] == source_id:
            _start_at_source(vertex, send)
        else:
            _relax(vertex, incoming, send)

    return {
        "type": "VertexComputation",
        "name": "dijkstra",
        "description": DESCRIPTIONS["dijkstra"],
        "compute": compute,
        "source_id": source_id
    }


def create_pagerank_computation(total_vertices):
    """
    PageRank power iteration.

    Superstep 0 sets every rank to 1/N. Afterwards the rank becomes
    (1 - DAMPING)/N + DAMPING * sum(incoming) when it moves by more than
    EPSILON. Every vertex sends rank / max(1, out_degree) to each neighbor
    every superstep, so traffic never stops on its own.
    """
    def compute(vertex, incoming, send, superstep):
        if superstep == 0:
            vertex["set_value"](1.0 / total_vertices)
        else:
            total = sum(message.payload for message in incoming)
            new_rank = (1 - DAMPING) / total_vertices + DAMPING * total
            if abs(new_rank - vertex["get_value"]()) > EPSILON:
                vertex["set_value"](new_rank)

        contribution = vertex["get_value"]() / max(1, vertex["out_degree"]())
        for neighbor in vertex["neighbors"]():
            send(neighbor, contribution)

    return {
        "type": "VertexComputation",
        "name": "pagerank",
        "description": DESCRIPTIONS["pagerank"],
        "compute": compute,
        "total_vertices": total_vertices
    }


# =============================================================================
# SELECTION
# =============================================================================

ALGORITHMS = {
    "bfs": create_bfs_computation,
    "dfs": create_dfs_computation,
    "dijkstra": create_dijkstra_computation,
    "pagerank": create_pagerank_computation,
}

_SOURCE_ALGORITHMS = ("bfs", "dfs", "dijkstra")


def select_computation(name, source_id=None, total_vertices=None, graph=None):
    """
    Build a computation by name.

    Args:
        name: One of "bfs", "dfs", "dijkstra", "pagerank"
        source_id: Source vertex for bfs/dfs/dijkstra
        total_vertices: N for pagerank, defaults to the graph's vertex count
        graph: Graph state or wrapper; required for dfs, used to validate source_id

    Returns:
        Computation record

    Raises:
        ValueError: for an unknown name or missing/invalid parameters
    """
    if name not in ALGORITHMS:
        raise ValueError(f"\033[31mUnknown algorithm: {name} (expected one of {sorted(ALGORITHMS)})\033[0m")

    g = as_graph_state(graph) if graph is not None else None

    if name in _SOURCE_ALGORITHMS:
        if source_id is None:
            raise ValueError(f"\033[31m{name} requires a source vertex id\033[0m")
        if name == "dfs" and g is None:
            raise ValueError(f"\033[31mdfs requires the graph it traverses\033[0m")
        if g is not None and get_vertex(g, source_id) is None:
            raise ValueError(f"\033[31mSource vertex {source_id} does not exist in the graph\033[0m")
        if name == "dfs":
            return create_dfs_computation(source_id, g)
        return ALGORITHMS[name](source_id)

    if total_vertices is None and g is not None:
        total_vertices = vertex_count(g)
    if not isinstance(total_vertices, int) or isinstance(total_vertices, bool) or total_vertices <= 0:
        raise ValueError(f"\033[31mpagerank requires a positive vertex count, got {total_vertices!r}\033[0m")
    return create_pagerank_computation(total_vertices)


def list_algorithms():
    """(name, description) pairs for every selectable algorithm."""
    return [(name, DESCRIPTIONS[name]) for name in ALGORITHMS]
