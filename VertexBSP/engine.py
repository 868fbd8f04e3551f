"""
Superstep (BSP) engine over a graph store, in Lisp-like functional style.

One call to run_step() is one superstep:
- every vertex drains its inbox and runs the vertex computation once
- messages sent during the round are buffered in a round-local multimap
- at the barrier, buffered messages are delivered to the target inboxes
- the round's multimap is appended to history and the counter advances

The engine never decides to stop by itself. had_messages() tells the caller
whether the last round emitted anything; run_until_quiet() is a caller-side
loop built on it.

Example:
    g = add_edge(add_edge(graph(debug=False), 1, 2), 2, 3)
    e = engine(g, create_bfs_computation(1), debug=False)
    e, info = run_step(e)
    e, steps = run_until_quiet(e)
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from multiprocessing import cpu_count

from .graph_store import Graph, as_graph_state, get_vertex, get_vertices
from .partitioning import PARTITION_STRATEGIES, partition_vertices
from .vertex import Message


def stringify_truncated(obj, max_len=100):
    """Truncate string representation for display."""
    s = str(obj)
    return s if len(s) <= max_len else s[:max_len] + "..."


def _resolve_compute(computation):
    if isinstance(computation, dict) and callable(computation.get("compute")):
        return computation["compute"], computation.get("name", "custom")
    if callable(computation):
        return computation, getattr(computation, "__name__", "custom")
    raise ValueError(f"\033[31mVertex computation must be callable, got {computation!r}\033[0m")


# =============================================================================
# CORE DATA CONSTRUCTORS
# =============================================================================

def engine(g, computation, debug=True, parallel=False, max_workers=None, partition_strategy="hash"):
    """
    Create a superstep engine bound to a graph and a vertex computation.

    Args:
        g: Graph state or Graph wrapper
        computation: Computation record from algorithms.py, or any callable
            compute(vertex, incoming, send, superstep)
        debug: Print tagged progress lines
        parallel: Compute partitions of vertices on worker threads
        max_workers: Worker count and partition count in parallel mode
        partition_strategy: "hash" or "range"

    Returns:
        Engine state dict
    """
    compute, name = _resolve_compute(computation)
    if partition_strategy not in PARTITION_STRATEGIES:
        raise ValueError(f"\033[31mUnknown partition strategy: {partition_strategy}\033[0m")

    if debug:
        print(f"\033[36m[INIT] Superstep engine initialized (computation={name})\033[0m")
        if parallel:
            print(f"\033[36m[INIT] Parallel mode enabled with {max_workers or cpu_count()} workers ({partition_strategy} partitioning)\033[0m")

    return {
        "type": "SuperstepEngine",
        "graph": as_graph_state(g),
        "computation": computation,
        "compute": compute,
        "name": name,
        "superstep": 0,
        "history": [],
        "last_step": None,
        "debug": debug,
        "parallel": parallel,
        "max_workers": max_workers if max_workers else cpu_count(),
        "partition_strategy": partition_strategy
    }


# =============================================================================
# EXECUTION
# =============================================================================

def _make_sender(outbox):
    """Send capability bound to one vertex's outbox for the current round."""
    def send(target_id, payload):
        message = Message(target_id, payload)
        outbox.append(message)
        return message
    return send


def _compute_vertex(e, vertex):
    """Drain the inbox and run the computation. Returns the messages it sent."""
    incoming = vertex["drain_inbox"]()
    outbox = []

    if e["debug"]:
        print(f"\033[35m[COMPUTE] vertex {vertex['id']}: incoming={stringify_truncated([m.payload for m in incoming])}\033[0m")

    e["compute"](vertex, incoming, _make_sender(outbox), e["superstep"])
    return outbox


def _compute_partition(e, vertices):
    """Worker function: compute every vertex of one partition."""
    return {vertex["id"]: _compute_vertex(e, vertex) for vertex in vertices}


def _compute_vertices_parallel(e, vertices):
    """Compute vertices partition by partition on a thread pool."""
    by_id = {vertex["id"]: vertex for vertex in vertices}
    partitions = partition_vertices(list(by_id), e["partition_strategy"], e["max_workers"])

    tasks = [(index, [by_id[vertex_id] for vertex_id in ids]) for index, ids in enumerate(partitions) if ids]
    outboxes = {}
    partition_stats = {index: {"vertices": len(ids), "messages_sent": 0} for index, ids in enumerate(partitions)}
    if not tasks:
        return outboxes, partition_stats

    with ThreadPoolExecutor(max_workers=min(len(tasks), e["max_workers"])) as executor:
        futures = {}
        for index, partition in tasks:
            future = executor.submit(_compute_partition, e, partition)
            futures[future] = index

        for future in as_completed(futures):
            index = futures[future]
            result = future.result()
            outboxes.update(result)
            partition_stats[index]["messages_sent"] = sum(len(sent) for sent in result.values())

    return outboxes, partition_stats


def _deliver(e, outboxes, order):
    """
    BSP barrier: gather every outbox into the round multimap, then deliver.

    Outboxes are merged in vertex order so the multimap is the same whether
    the round ran sequentially or in parallel.
    """
    round_messages = {}
    for vertex_id in order:
        for message in outboxes.get(vertex_id, ()):
            round_messages.setdefault(message.target, []).append(message)

    dropped = 0
    for target_id, messages in round_messages.items():
        target = get_vertex(e["graph"], target_id)
        if target is None:
            dropped += len(messages)
            if e["debug"]:
                print(f"\033[33m[DROP] {len(messages)} message(s) for missing vertex {target_id}\033[0m")
            continue
        target["receive_messages"](messages)
        if e["debug"]:
            print(f"\033[32m[DELIVER] vertex {target_id} <- {stringify_truncated([m.payload for m in messages])}\033[0m")

    return round_messages, dropped


def run_step(e):
    """
    Execute exactly one superstep. Returns (e, step_info) where step_info contains:
    - superstep: The superstep number that ran
    - computed_vertices: Vertex ids computed, in graph order
    - messages_sent: Number of messages emitted during the round
    - dropped_messages: Messages addressed to ids no longer in the graph
    - active_vertices: Vertex ids whose active flag is set after the round
    - partition_stats: Per-partition vertex/message counts (parallel mode only)
    """
    vertices = get_vertices(e["graph"])
    order = [vertex["id"] for vertex in vertices]

    if e["debug"]:
        print(f"\033[35m[STEP] Superstep {e['superstep']}: vertices={stringify_truncated(order)}\033[0m")

    partition_stats = None
    if e["parallel"] and len(vertices) > 1:
        outboxes, partition_stats = _compute_vertices_parallel(e, vertices)
    else:
        outboxes = {vertex["id"]: _compute_vertex(e, vertex) for vertex in vertices}

    round_messages, dropped = _deliver(e, outboxes, order)
    e["history"].append({"superstep": e["superstep"], "messages": round_messages})

    step_info = {
        "superstep": e["superstep"],
        "computed_vertices": order,
        "messages_sent": sum(len(messages) for messages in round_messages.values()),
        "dropped_messages": dropped,
        "active_vertices": [vertex["id"] for vertex in get_vertices(e["graph"]) if vertex["is_active"]()],
        "partition_stats": partition_stats
    }
    e["last_step"] = step_info
    e["superstep"] += 1

    return e, step_info


def reset(e):
    """
    Return the engine and every vertex to the initial state: superstep 0,
    empty history, values +inf, empty inboxes, all vertices active.
    """
    e["superstep"] = 0
    e["history"] = []
    e["last_step"] = None

    for vertex in get_vertices(e["graph"]):
        vertex["set_value"](float("inf"))
        vertex["drain_inbox"]()
        vertex["set_active"](True)

    if e["debug"]:
        print("\033[36m[RESET] Engine state cleared\033[0m")

    return e


def had_messages(e):
    """True if the most recent superstep emitted at least one message."""
    return e["last_step"] is not None and e["last_step"]["messages_sent"] > 0


# =============================================================================
# STATE ACCESSORS
# =============================================================================

def get_superstep(e):
    """Get current superstep number."""
    return e["superstep"]

def get_history(e):
    """Get a copy of the message-delivery history, one entry per superstep."""
    return [
        {"superstep": entry["superstep"],
         "messages": {target: list(messages) for target, messages in entry["messages"].items()}}
        for entry in e["history"]
    ]

def replay(e, superstep):
    """Get the {target: [messages]} delivered at the end of a superstep, or None."""
    for entry in e["history"]:
        if entry["superstep"] == superstep:
            return {target: list(messages) for target, messages in entry["messages"].items()}
    return None

def get_values(e):
    """Get {vertex_id: value} for every vertex."""
    return {vertex["id"]: vertex["get_value"]() for vertex in get_vertices(e["graph"])}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def run_until_quiet(e, max_supersteps=1000):
    """
    Caller-side loop: run supersteps until one emits no message, or until
    max_supersteps rounds have run. Returns (e, [step_info, ...]).
    """
    steps = []
    while len(steps) < max_supersteps:
        e, step_info = run_step(e)
        steps.append(step_info)
        if not had_messages(e):
            if e["debug"]:
                print(f"\033[33m[QUIET] No messages emitted at superstep {step_info['superstep']}\033[0m")
            break
    return e, steps


# =============================================================================
# OOP WRAPPER CLASS
# =============================================================================

class SuperstepEngine:
    """
    Object-oriented wrapper over the functional engine API:
        eng = SuperstepEngine(graph, select_computation("bfs", source_id=1), debug=False)
        eng.step()
        eng.run_until_quiet()
        eng.values
    """

    def __init__(self, graph, computation, debug=True, parallel=False, max_workers=None, partition_strategy="hash"):
        self._e = engine(graph, computation, debug=debug, parallel=parallel,
                         max_workers=max_workers, partition_strategy=partition_strategy)
        self._graph = graph if isinstance(graph, Graph) else None

    def step(self):
        self._e, step_info = run_step(self._e)
        return step_info

    def run_until_quiet(self, max_supersteps=1000):
        self._e, steps = run_until_quiet(self._e, max_supersteps)
        return steps

    def reset(self):
        self._e = reset(self._e)
        return self

    def had_messages(self):
        return had_messages(self._e)

    def replay(self, superstep):
        return replay(self._e, superstep)

    @property
    def graph(self):
        return self._graph if self._graph is not None else self._e["graph"]

    @property
    def superstep(self):
        return get_superstep(self._e)

    @property
    def history(self):
        return get_history(self._e)

    @property
    def values(self):
        return get_values(self._e)

    @property
    def last_step(self):
        return self._e["last_step"]

    @property
    def parallel(self):
        return self._e["parallel"]

    @property
    def max_workers(self):
        return self._e["max_workers"]
