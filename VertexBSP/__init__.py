__version__ = "0.1.0"

from .vertex import Message, create_vertex
from .graph_store import (
    Graph,
    graph,
    add_vertex,
    add_edge,
    remove_vertex,
    remove_edge,
    reset_values,
    get_vertex,
    get_vertices,
    get_vertex_ids,
    get_edges,
    vertex_count,
    has_edge,
    to_adjacency
)
from .engine import (
    SuperstepEngine,
    engine,
    run_step,
    reset,
    had_messages,
    get_superstep,
    get_history,
    replay,
    get_values,
    run_until_quiet
)
from .algorithms import (
    DAMPING,
    EPSILON,
    ALGORITHMS,
    create_bfs_computation,
    create_dfs_computation,
    create_dijkstra_computation,
    create_pagerank_computation,
    select_computation,
    list_algorithms
)
from .search import shortest_path, bidirectional_shortest_path
from .partitioning import PARTITION_STRATEGIES, assign_partitions, partition_vertices, partition_of
from .sample_graphs import SAMPLE_GRAPHS, get_sample, build_graph, build_sample_graph
