"""
Run the Hopcroft-Karp algorithm on random sparse bipartite graphs of increasing size,
and numerically investigate the number of phases (bounded by O(sqrt(n)))
and the overall runtime (bounded by O(m sqrt(n))).

The matching cardinality is cross-checked against scipy's implementation.

Reference:
    J. E. Hopcroft, R. M. Karp
    An n^{5/2} algorithm for maximum matchings in bipartite graphs
    SIAM J. Comput. 2, 225-231 (1973)
"""

import time
import numpy as np
from scipy import sparse
from scipy.sparse.csgraph import maximum_bipartite_matching
import matplotlib.pyplot as plt
import hkmatch


def main():

    rng = np.random.default_rng(42)

    # average vertex degree
    deg = 3

    # number of vertices on each side
    nlist = 2**np.arange(6, 15)
    num_phases = np.zeros(len(nlist), dtype=int)
    runtime = np.zeros(len(nlist))

    for i, n in enumerate(nlist):
        print('n:', n)

        # random sparse biadjacency matrix
        b = sparse.random(n, n, density=deg/n, format='csr', random_state=rng)
        graph = hkmatch.Graph.from_biadjacency(b)

        hk = hkmatch.HopcroftKarp(graph)
        start = time.perf_counter()
        matching = hk()
        runtime[i] = time.perf_counter() - start
        num_phases[i] = hk.num_phases

        # reference cardinality
        perm = maximum_bipartite_matching(b, perm_type='column')
        print('matching size:', len(matching) // 2, ', reference:', np.count_nonzero(perm != -1))
        print('phases:', num_phases[i], ', runtime:', runtime[i])

    plt.loglog(nlist, num_phases, '.-', label='phases')
    # show square root scaling for comparison
    plt.loglog(nlist, np.sqrt(nlist), '--', label='sqrt(n)')
    plt.xlabel('n')
    plt.legend()
    plt.title('Hopcroft-Karp number of phases for random bipartite graphs (average degree {:g})'.format(deg))
    plt.savefig('matching_scaling_phases.pdf')
    plt.show()

    m = deg * nlist
    plt.loglog(nlist, runtime, '.-', label='runtime')
    plt.loglog(nlist, runtime[-1] * (m * np.sqrt(nlist)) / (m[-1] * np.sqrt(nlist[-1])), '--', label='m sqrt(n)')
    plt.xlabel('n')
    plt.ylabel('runtime (s)')
    plt.legend()
    plt.title('Hopcroft-Karp runtime for random bipartite graphs')
    plt.savefig('matching_scaling_runtime.pdf')
    plt.show()


if __name__ == '__main__':
    main()
