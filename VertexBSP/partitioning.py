"""Assignment of vertices to worker partitions for parallel supersteps."""

import math


PARTITION_STRATEGIES = ("hash", "range")


def hash_id(vertex_id):
    """31-based string hash of the id, folded to a signed 32-bit integer."""
    h = 0
    for ch in str(vertex_id):
        h = ((h << 5) - h + ord(ch)) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def _sort_key(vertex_id):
    # Mixed id types still need a total order for range partitioning
    return (0, vertex_id, "") if isinstance(vertex_id, (int, float)) else (1, 0, str(vertex_id))


def assign_partitions(vertex_ids, strategy="hash", num_partitions=1):
    """
    Map each vertex id to a partition index.

    Args:
        vertex_ids: Iterable of vertex ids
        strategy: "hash" (hash of the id) or "range" (sorted ids split evenly)
        num_partitions: Number of partitions, values <= 1 give a single partition

    Returns:
        Dict mapping vertex id to partition index
    """
    if strategy not in PARTITION_STRATEGIES:
        raise ValueError(f"\033[31mUnknown partition strategy: {strategy}\033[0m")

    vertex_ids = list(vertex_ids)
    if num_partitions <= 1 or not vertex_ids:
        return {vertex_id: 0 for vertex_id in vertex_ids}

    if strategy == "hash":
        return {vertex_id: abs(hash_id(vertex_id)) % num_partitions for vertex_id in vertex_ids}

    ordered = sorted(vertex_ids, key=_sort_key)
    chunk_size = math.ceil(len(ordered) / num_partitions)
    return {vertex_id: index // chunk_size for index, vertex_id in enumerate(ordered)}


def partition_vertices(vertex_ids, strategy="hash", num_partitions=1):
    """
    Split vertex ids into partitions.

    Returns a list of num_partitions lists (some may be empty). Each list keeps
    the order the ids were given in.
    """
    vertex_ids = list(vertex_ids)
    assignment = assign_partitions(vertex_ids, strategy, num_partitions)
    partitions = [[] for _ in range(max(1, num_partitions))]
    for vertex_id in vertex_ids:
        partitions[assignment[vertex_id]].append(vertex_id)
    return partitions


def partition_of(vertex_id, vertex_ids, strategy="hash", num_partitions=1):
    """Partition index of one vertex, or None if it is not among vertex_ids."""
    return assign_partitions(vertex_ids, strategy, num_partitions).get(vertex_id)
