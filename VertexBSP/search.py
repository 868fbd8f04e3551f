"""
Point-to-point shortest path search over a label-keyed adjacency mapping
{label: [neighbor labels]}. These run outside the superstep engine.

Both searches return a result dict:
    {"path": [...], "found": bool, "error": str or None, "metrics": {...}}

Bad input and "no path" both give an empty path with an error string; they
never raise. A source equal to the target gives the single-node path.
"""

from collections import deque


def _result(path, error=None, visited_nodes=0, visited_edges=0, complexity=("O(V + E)", "O(V)")):
    return {
        "path": path,
        "found": bool(path),
        "error": error,
        "metrics": {
            "visited_nodes": visited_nodes,
            "visited_edges": visited_edges,
            "path_length": len(path) - 1 if path else None,
            "time_complexity": complexity[0],
            "space_complexity": complexity[1]
        }
    }


def _fail(error, debug, **metrics):
    if debug:
        print(f"\033[31m[ERROR] {error}\033[0m")
    return _result([], error=error, **metrics)


def _validate(graph, source, target, debug):
    """Returns a failure result for invalid input, a trivial result for source == target, else None."""
    if not graph:
        return _fail("Graph is null or empty.", debug)
    if source is None or source not in graph:
        return _fail(f"Source node '{source}' does not exist in the graph.", debug)
    if target is None or target not in graph:
        return _fail(f"Target node '{target}' does not exist in the graph.", debug)
    if source == target:
        return _result([source], visited_nodes=1)
    return None


def _walk_parents(node, parent):
    """Yield node, parent[node], ... up to the root."""
    while node is not None:
        yield node
        node = parent.get(node)


# =============================================================================
# SINGLE-FRONTIER BFS
# =============================================================================

def shortest_path(graph, source, target, debug=True):
    """
    Shortest path by breadth-first search from source.

    Args:
        graph: Mapping of node label to ordered list of neighbor labels
        source: Start label
        target: Goal label
        debug: Print tagged diagnostics

    Returns:
        Result dict; path runs from source to target inclusive
    """
    invalid = _validate(graph, source, target, debug)
    if invalid is not None:
        return invalid

    queue = deque([source])
    visited = {source}
    parent = {source: None}
    visited_edges = 0

    while queue:
        current = queue.popleft()
        for neighbor in graph.get(current, ()):
            visited_edges += 1
            if neighbor in visited:
                continue
            parent[neighbor] = current
            visited.add(neighbor)
            queue.append(neighbor)
            if neighbor == target:
                path = list(_walk_parents(target, parent))
                path.reverse()
                if debug:
                    print(f"\033[32m[FOUND] {' -> '.join(map(str, path))} ({len(path) - 1} edges)\033[0m")
                return _result(path, visited_nodes=len(visited), visited_edges=visited_edges)

    return _fail(f"No path exists between '{source}' and '{target}'.", debug,
                 visited_nodes=len(visited), visited_edges=visited_edges)


# =============================================================================
# BIDIRECTIONAL (MEET-IN-THE-MIDDLE) BFS
# =============================================================================

def _expand_one(graph, side, other_visited):
    """
    Pop one node from this side's queue and visit its unvisited neighbors.

    Returns (meeting_node or None, neighbor entries examined).
    """
    if not side["queue"]:
        return None, 0

    current = side["queue"].popleft()
    examined = 0
    for neighbor in graph.get(current, ()):
        examined += 1
        if neighbor in side["visited"]:
            continue
        side["parent"][neighbor] = current
        side["visited"].add(neighbor)
        side["queue"].append(neighbor)
        if neighbor in other_visited:
            return neighbor, examined
    return None, examined


def _new_side(root):
    return {"queue": deque([root]), "visited": {root}, "parent": {root: None}}


def _join_paths(meeting, source_parent, target_parent):
    """Source-side chain up to the meeting node, then the target-side chain after it."""
    path = list(_walk_parents(meeting, source_parent))
    path.reverse()
    path.extend(_walk_parents(target_parent.get(meeting), target_parent))
    return path


def bidirectional_shortest_path(graph, source, target, debug=True):
    """
    Shortest path by two breadth-first frontiers meeting in the middle.

    Each round expands one node from the source side and then, if the
    frontiers have not met, one node from the target side, for as long as
    both queues are non-empty.

    Args:
        graph: Mapping of node label to ordered list of neighbor labels
        source: Start label
        target: Goal label
        debug: Print tagged diagnostics

    Returns:
        Result dict; path runs from source to target inclusive
    """
    invalid = _validate(graph, source, target, debug)
    if invalid is not None:
        return invalid

    complexity = ("O(b^(d/2))", "O(b^(d/2))")
    forward = _new_side(source)
    backward = _new_side(target)
    visited_edges = 0

    while forward["queue"] and backward["queue"]:
        meeting, examined = _expand_one(graph, forward, backward["visited"])
        visited_edges += examined
        if meeting is None:
            meeting, examined = _expand_one(graph, backward, forward["visited"])
            visited_edges += examined

        if meeting is not None:
            path = _join_paths(meeting, forward["parent"], backward["parent"])
            if debug:
                print(f"\033[32m[FOUND] Searches meet at '{meeting}': {' -> '.join(map(str, path))} ({len(path) - 1} edges)\033[0m")
            return _result(path, visited_nodes=len(forward["visited"] | backward["visited"]),
                           visited_edges=visited_edges, complexity=complexity)

    return _fail(f"No path exists between '{source}' and '{target}'.", debug,
                 visited_nodes=len(forward["visited"] | backward["visited"]),
                 visited_edges=visited_edges, complexity=complexity)
