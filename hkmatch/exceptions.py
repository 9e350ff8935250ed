__all__ = ['InvalidInputError']


class InvalidInputError(ValueError):
    """
    Input graph, partition or matching is not admissible for the requested algorithm,
    e.g., a non-bipartite graph passed to the Hopcroft-Karp algorithm.
    """
    pass
