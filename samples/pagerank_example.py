"""
PageRank - superstep engine example

Runs PageRank power iteration over a small web-like graph, one superstep at
a time, and prints the ranks once they stop moving.

Graph structure (6 vertices):
    A -> B, C       (A has 3 incoming: C, E, F)
    B -> C, D       (B has 1 incoming: A)
    C -> A, D       (C has 2 incoming: A, B)
    D -> E          (D has 2 incoming: B, C)
    E -> A, F       (E has 1 incoming: D)
    F -> A          (F has 1 incoming: E)

Usage:
    python samples/pagerank_example.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from VertexBSP import build_graph, select_computation, engine, run_step, get_values, EPSILON


GRAPH = {
    "A": ["B", "C"],
    "B": ["C", "D"],
    "C": ["A", "D"],
    "D": ["E"],
    "E": ["A", "F"],
    "F": ["A"],
}

MAX_SUPERSTEPS = 100


def run_pagerank(debug=False, parallel=True, max_supersteps=MAX_SUPERSTEPS):
    """Run PageRank until no rank changes in a superstep. Returns (ranks by label, supersteps, converged)."""
    print("\033[36m" + "=" * 60 + "\033[0m")
    print("\033[36m    PAGERANK - SUPERSTEP ENGINE\033[0m")
    print("\033[36m" + "=" * 60 + "\033[0m\n")

    print("Graph structure:")
    for v, edges in GRAPH.items():
        print(f"  {v} -> {', '.join(edges)}")
    print()

    edges = [(source, target) for source, targets in GRAPH.items() for target in targets]
    g, labels = build_graph(edges, directed=True, debug=debug)
    e = engine(g, select_computation("pagerank", graph=g), debug=debug,
               parallel=parallel, max_workers=3)

    # PageRank never stops sending, so halt on stable values instead
    converged = False
    previous = None
    while e["superstep"] < max_supersteps:
        e, step_info = run_step(e)
        values = get_values(e)
        if previous is not None and all(abs(values[v] - previous[v]) <= EPSILON for v in values):
            converged = True
            break
        previous = values

    ranks = {label: get_values(e)[vertex_id] for label, vertex_id in labels.items()}

    print("\n\033[36m" + "=" * 60 + "\033[0m")
    print("\033[32m    RESULTS\033[0m")
    print(f"\033[35m    Supersteps: {e['superstep']}\033[0m")
    print(f"\033[35m    Converged: {converged}\033[0m")
    print("\033[36m" + "=" * 60 + "\033[0m")

    print("\nFinal PageRanks:")
    for v in sorted(ranks, key=lambda x: ranks[x], reverse=True):
        bar = "#" * int(ranks[v] * 50)
        print(f"  {v}: {ranks[v]:.4f} {bar}")

    return ranks, e["superstep"], converged


def main():
    ranks, supersteps, converged = run_pagerank()

    print("\n\033[36m--- VERIFICATION ---\033[0m")

    total = sum(ranks.values())
    print(f"[{'OK' if 0.99 < total < 1.01 else 'FAIL'}] Ranks sum to {total:.4f}")

    max_v = max(ranks, key=lambda x: ranks[x])
    print(f"[{'OK' if max_v == 'A' else 'FAIL'}] Highest rank: {max_v} ({ranks[max_v]:.4f})")

    print(f"[{'OK' if converged else 'FAIL'}] Converged: {converged}")


if __name__ == "__main__":
    main()
