import unittest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from VertexBSP import (
    Graph, SuperstepEngine, select_computation, shortest_path, bidirectional_shortest_path,
    get_sample, build_graph, build_sample_graph, SAMPLE_GRAPHS,
    add_edge, graph, remove_vertex, get_edges, engine, run_step, get_values, had_messages
)


class TestIntegration(unittest.TestCase):

    def test_engine_distances_match_search_on_samples(self):
        """Hop counts from BFS supersteps agree with the point-to-point search."""
        for name in SAMPLE_GRAPHS:
            g, labels = build_sample_graph(name, debug=False)
            adjacency = get_sample(name)
            source = SAMPLE_GRAPHS[name]["nodes"][0]

            eng = SuperstepEngine(g, select_computation("bfs", source_id=labels[source], graph=g), debug=False)
            eng.run_until_quiet(max_supersteps=100)
            values = eng.values

            for label, vertex_id in labels.items():
                result = shortest_path(adjacency, source, label, debug=False)
                expected = len(result["path"]) - 1 if result["found"] else float("inf")
                self.assertEqual(values[vertex_id], expected, f"{name}: {source} -> {label}")

    def test_build_graph_numbers_labels_in_first_seen_order(self):
        g, labels = build_graph([("x", "y"), ("y", "z")], directed=False, debug=False)

        self.assertEqual(labels, {"x": 0, "y": 1, "z": 2})
        self.assertEqual(get_edges(g), ((0, 1), (1, 0), (1, 2), (2, 1)))

    def test_unknown_sample(self):
        with self.assertRaises(ValueError):
            get_sample("Nope")
        with self.assertRaises(ValueError):
            build_sample_graph("Nope", debug=False)

    def test_sample_adjacency_includes_every_node(self):
        for name, sample in SAMPLE_GRAPHS.items():
            self.assertEqual(sorted(get_sample(name)), sorted(sample["nodes"]))

    def test_removed_vertex_drops_pending_messages(self):
        g = graph(debug=False)
        add_edge(g, 1, 2)
        add_edge(g, 2, 3)
        add_edge(g, 1, 3)

        sent = []

        def compute(vertex, incoming, send, superstep):
            if superstep == 0:
                for neighbor in vertex["neighbors"]():
                    send(neighbor, vertex["id"])
                    sent.append(neighbor)

        e = engine(g, compute, debug=False)
        run_step(e)
        remove_vertex(g, 3)
        for a, b in get_edges(g):
            self.assertNotEqual(a, 3)
            self.assertNotEqual(b, 3)

        e, info = run_step(e)
        self.assertEqual(info["computed_vertices"], [1, 2])
        self.assertEqual(sent, [2, 3, 3])

    def test_graph_store_to_search_round_trip(self):
        g = Graph(debug=False)
        for a, b in [(1, 2), (2, 1), (2, 3), (3, 2), (3, 4), (4, 3), (1, 5), (5, 1), (5, 4), (4, 5)]:
            g.add_edge(a, b)

        adjacency = g.to_adjacency()
        single = shortest_path(adjacency, 1, 4, debug=False)
        double = bidirectional_shortest_path(adjacency, 1, 4, debug=False)

        self.assertEqual(single["path"], [1, 5, 4])
        self.assertEqual(len(double["path"]), 3)
        for path in (single["path"], double["path"]):
            for a, b in zip(path, path[1:]):
                self.assertTrue(g.has_edge(a, b))

    def test_switching_algorithms_with_reset(self):
        g, labels = build_sample_graph("Simple Path", debug=False)

        pagerank = engine(g, select_computation("pagerank", graph=g), debug=False)
        for _ in range(10):
            run_step(pagerank)
        self.assertTrue(had_messages(pagerank))

        bfs = SuperstepEngine(g, select_computation("bfs", source_id=labels["A"], graph=g), debug=False)
        bfs.reset()
        bfs.run_until_quiet()
        self.assertEqual(get_values(pagerank), bfs.values)
        self.assertEqual(bfs.values[labels["E"]], 3)


if __name__ == "__main__":
    unittest.main()
