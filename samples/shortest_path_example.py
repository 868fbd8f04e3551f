"""
Shortest path examples - single-frontier and bidirectional BFS

Runs both point-to-point searches over the bundled sample graphs, then runs
breadth-first distance propagation on the superstep engine for comparison.

Usage:
    python samples/shortest_path_example.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from VertexBSP import (
    get_sample, build_sample_graph, shortest_path, bidirectional_shortest_path,
    SuperstepEngine, select_computation
)


QUERIES = [
    ("Simple Path", "A", "E"),
    ("Simple Path", "A", "A"),
    ("Simple Path", "A", "Z"),
    ("Grid Graph", "1", "9"),
    ("Weighted Graph", "S", "T"),
    ("Disconnected Graph", "A", "Z"),
]


def run_searches():
    print("\033[36m=== POINT-TO-POINT SHORTEST PATH ===\033[0m\n")
    for name, source, target in QUERIES:
        graph = get_sample(name)
        print(f"{name}: {source} -> {target}")
        for search in (shortest_path, bidirectional_shortest_path):
            result = search(graph, source, target, debug=False)
            if result["found"]:
                metrics = result["metrics"]
                print(f"  {search.__name__:28s} {' -> '.join(result['path'])}"
                      f"  (visited {metrics['visited_nodes']} nodes, {metrics['visited_edges']} edges)")
            else:
                print(f"  {search.__name__:28s} \033[31m{result['error']}\033[0m")
        print()


def run_superstep_bfs(name="Grid Graph", source="1"):
    print(f"\033[36m=== SUPERSTEP BFS ON {name.upper()} FROM {source} ===\033[0m\n")
    g, labels = build_sample_graph(name, debug=False)
    eng = SuperstepEngine(g, select_computation("bfs", source_id=labels[source], graph=g), debug=True)
    steps = eng.run_until_quiet()

    values = eng.values
    print(f"\nQuiet after {len(steps)} supersteps:")
    for label, vertex_id in labels.items():
        print(f"  {label}: {values[vertex_id]}")


if __name__ == "__main__":
    run_searches()
    run_superstep_bfs()
