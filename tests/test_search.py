import unittest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from VertexBSP.search import shortest_path, bidirectional_shortest_path
from VertexBSP.sample_graphs import get_sample


SCENARIO_GRAPH = {
    "A": ["B", "C"],
    "B": ["A", "D"],
    "C": ["A", "D"],
    "D": ["B", "C", "E"],
    "E": ["D"],
}

SEARCHES = (shortest_path, bidirectional_shortest_path)


def is_walkable(graph, path):
    return all(b in graph[a] for a, b in zip(path, path[1:]))


class TestShortestPathSearches(unittest.TestCase):

    def test_scenario_path_a_to_e(self):
        for search in SEARCHES:
            result = search(SCENARIO_GRAPH, "A", "E", debug=False)

            self.assertTrue(result["found"])
            self.assertIsNone(result["error"])
            self.assertEqual(len(result["path"]), 4)
            self.assertIn(result["path"], (["A", "B", "D", "E"], ["A", "C", "D", "E"]))
            self.assertEqual(result["metrics"]["path_length"], 3)

    def test_exact_paths(self):
        self.assertEqual(shortest_path(SCENARIO_GRAPH, "A", "E", debug=False)["path"], ["A", "B", "D", "E"])
        self.assertEqual(bidirectional_shortest_path(SCENARIO_GRAPH, "A", "E", debug=False)["path"], ["A", "B", "D", "E"])
        self.assertEqual(bidirectional_shortest_path(SCENARIO_GRAPH, "E", "A", debug=False)["path"], ["E", "D", "B", "A"])

    def test_source_equals_target(self):
        for search in SEARCHES:
            result = search(SCENARIO_GRAPH, "A", "A", debug=False)
            self.assertEqual(result["path"], ["A"])
            self.assertTrue(result["found"])
            self.assertIsNone(result["error"])

    def test_missing_target(self):
        for search in SEARCHES:
            result = search(SCENARIO_GRAPH, "A", "Z", debug=False)
            self.assertEqual(result["path"], [])
            self.assertFalse(result["found"])
            self.assertIn("'Z'", result["error"])
            self.assertIn("does not exist", result["error"])

    def test_missing_source(self):
        for search in SEARCHES:
            result = search(SCENARIO_GRAPH, "Q", "A", debug=False)
            self.assertEqual(result["path"], [])
            self.assertIn("'Q'", result["error"])

            result = search(SCENARIO_GRAPH, None, "A", debug=False)
            self.assertEqual(result["path"], [])
            self.assertIsNotNone(result["error"])

    def test_null_or_empty_graph(self):
        for search in SEARCHES:
            for graph in (None, {}):
                result = search(graph, "A", "B", debug=False)
                self.assertEqual(result["path"], [])
                self.assertEqual(result["error"], "Graph is null or empty.")

    def test_no_path(self):
        graph = get_sample("Disconnected Graph")
        for search in SEARCHES:
            result = search(graph, "A", "Z", debug=False)
            self.assertEqual(result["path"], [])
            self.assertFalse(result["found"])
            self.assertEqual(result["error"], "No path exists between 'A' and 'Z'.")
            self.assertGreater(result["metrics"]["visited_nodes"], 0)

    def test_neighbor_without_own_entry(self):
        graph = {"A": ["B"], "C": []}
        for search in SEARCHES:
            result = search(graph, "A", "C", debug=False)
            self.assertEqual(result["path"], [])
            self.assertIsNotNone(result["error"])

    def test_same_length_on_sample_graphs(self):
        cases = [
            ("Simple Path", "A", "E", 4),
            ("Grid Graph", "1", "9", 5),
            ("Weighted Graph", "S", "T", 4),
            ("Disconnected Graph", "X", "Z", 2),
        ]
        for name, source, target, expected in cases:
            graph = get_sample(name)
            single = shortest_path(graph, source, target, debug=False)
            double = bidirectional_shortest_path(graph, source, target, debug=False)

            self.assertEqual(len(single["path"]), expected, name)
            self.assertEqual(len(double["path"]), expected, name)

    def test_paths_replay_as_edges(self):
        cases = [
            (SCENARIO_GRAPH, "A", "E"),
            (get_sample("Grid Graph"), "1", "9"),
            (get_sample("Grid Graph"), "7", "3"),
            (get_sample("Weighted Graph"), "S", "T"),
        ]
        for graph, source, target in cases:
            for search in SEARCHES:
                path = search(graph, source, target, debug=False)["path"]
                self.assertEqual(path[0], source)
                self.assertEqual(path[-1], target)
                self.assertTrue(is_walkable(graph, path), f"{search.__name__}: {path}")
                self.assertEqual(len(path), len(set(path)))

    def test_bidirectional_meeting_node_appears_once(self):
        graph = get_sample("Grid Graph")
        path = bidirectional_shortest_path(graph, "1", "9", debug=False)["path"]
        self.assertEqual(path, ["1", "2", "5", "8", "9"])

    def test_meeting_on_first_contact_can_cost_a_hop(self):
        # The frontiers touch at w before the s-x-y-t route is expanded
        graph = {
            "s": ["a", "b", "x"],
            "a": ["s"],
            "b": ["s", "w"],
            "x": ["s", "y"],
            "t": ["c", "y"],
            "c": ["t", "w"],
            "y": ["t", "x"],
            "w": ["b", "c"],
        }
        self.assertEqual(shortest_path(graph, "s", "t", debug=False)["path"], ["s", "x", "y", "t"])
        self.assertEqual(bidirectional_shortest_path(graph, "s", "t", debug=False)["path"], ["s", "b", "w", "c", "t"])

    def test_metrics(self):
        result = shortest_path(SCENARIO_GRAPH, "A", "E", debug=False)
        metrics = result["metrics"]
        self.assertEqual(metrics["visited_nodes"], 5)
        self.assertEqual(metrics["time_complexity"], "O(V + E)")

        result = bidirectional_shortest_path(SCENARIO_GRAPH, "A", "E", debug=False)
        metrics = result["metrics"]
        # A, B, C from the source side and E, D from the target side
        self.assertEqual(metrics["visited_nodes"], 5)
        self.assertEqual(metrics["visited_edges"], 5)
        self.assertEqual(metrics["path_length"], 3)

    def test_debug_output_does_not_change_result(self):
        quiet = bidirectional_shortest_path(SCENARIO_GRAPH, "A", "Z", debug=False)
        loud = bidirectional_shortest_path(SCENARIO_GRAPH, "A", "Z", debug=True)
        self.assertEqual(quiet, loud)


if __name__ == "__main__":
    unittest.main()
