from collections import namedtuple


Message = namedtuple("Message", ["target", "payload"])
Message.__doc__ = """Immutable message envelope addressed to a vertex id."""


def create_vertex(vertex_id, value=float("inf")):
    """
    Vertex record with BSP-compliant inbox handling.

    Per Pregel BSP model:
    - receive_messages() only ever runs at the barrier, after every vertex computed
    - drain_inbox() empties the inbox and returns its previous contents
    - neighbors only change through the graph store (add_neighbor/remove_neighbor)
    """
    state = {
        "value": value,             # Distance, rank or marker depending on algorithm
        "neighbors": [],            # Outgoing adjacency, duplicates allowed
        "inbox": [],                # Messages delivered since last drain
        "active": True
    }

    def get_value():
        return state["value"]

    def set_value(new_value):
        state["value"] = new_value
        return new_value

    def neighbors():
        return tuple(state["neighbors"])

    def out_degree():
        return len(state["neighbors"])

    def add_neighbor(neighbor_id):
        state["neighbors"].append(neighbor_id)

    def remove_neighbor(neighbor_id):
        # First occurrence only, mirrors single edge removal
        if neighbor_id in state["neighbors"]:
            state["neighbors"].remove(neighbor_id)
            return True
        return False

    def remove_neighbor_all(neighbor_id):
        before = len(state["neighbors"])
        state["neighbors"] = [n for n in state["neighbors"] if n != neighbor_id]
        return before - len(state["neighbors"])

    def receive_messages(messages):
        state["inbox"].extend(messages)

    def drain_inbox():
        drained = state["inbox"]
        state["inbox"] = []
        return drained

    def peek_inbox_size():
        return len(state["inbox"])

    def is_active():
        return state["active"]

    def set_active(active):
        state["active"] = bool(active)

    def get_state():
        return {
            "id": vertex_id,
            "value": state["value"],
            "neighbors": list(state["neighbors"]),
            "inbox": list(state["inbox"]),
            "active": state["active"]
        }

    return {
        "id": vertex_id,
        "get_value": get_value,
        "set_value": set_value,
        "neighbors": neighbors,
        "out_degree": out_degree,
        "add_neighbor": add_neighbor,
        "remove_neighbor": remove_neighbor,
        "remove_neighbor_all": remove_neighbor_all,
        "receive_messages": receive_messages,
        "drain_inbox": drain_inbox,
        "peek_inbox_size": peek_inbox_size,
        "is_active": is_active,
        "set_active": set_active,
        "get_state": get_state,
        "type": "Vertex"
    }
