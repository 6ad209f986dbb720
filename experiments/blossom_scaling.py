"""
Numerically investigate the runtime of the blossom algorithm and the number of
contracted blossoms on random cubic graphs, and the number of cycle merges
required by the Hamiltonian cycle construction.
"""

import time
import logging
import numpy as np
import matplotlib.pyplot as plt
import pyblossom as pbl


def random_cubic_graph(rng: np.random.Generator, num_nodes: int) -> pbl.Graph:
    """
    Generate a random Hamiltonian cubic graph: a cycle through all nodes
    together with a random perfect matching of chords.
    """
    while True:
        graph = pbl.Graph([(i, (i + 1) % num_nodes) for i in range(num_nodes)])
        perm = rng.permutation(num_nodes).tolist()
        chords = list(zip(perm[0::2], perm[1::2]))
        if all(not graph.has_edge(u, v) for (u, v) in chords):
            for (u, v) in chords:
                graph.add_edge(u, v)
            return graph


class BlossomCounter(logging.Handler):
    """
    Count the blossom contractions reported by the matching algorithm.
    """
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.count = 0

    def emit(self, record: logging.LogRecord):
        if record.getMessage().startswith('contracting blossom'):
            self.count += 1


def main():

    rng = np.random.default_rng(42)

    # blossom contractions are logged at debug level
    counter = BlossomCounter()
    logger = logging.getLogger('pyblossom.blossom')
    logger.addHandler(counter)
    logger.setLevel(logging.DEBUG)

    # number of graph nodes
    sizes = np.array([10, 20, 40, 60, 80, 100])
    # number of random samples per size
    nsamples = 5

    runtime = np.zeros(len(sizes))
    nblossoms = np.zeros(len(sizes))
    nmerges = np.zeros(len(sizes))
    for i, n in enumerate(sizes):
        print('n:', n)
        for _ in range(nsamples):
            dual = random_cubic_graph(rng, int(n))
            counter.count = 0
            start = time.perf_counter()
            matching = pbl.maximum_matching(dual)
            runtime[i] += (time.perf_counter() - start) / nsamples
            nblossoms[i] += counter.count / nsamples
            assert 2*matching.num_edges == n
            _, subdivisions = pbl.solve_hamiltonian_cycle(dual)
            nmerges[i] += len(subdivisions) / nsamples
        print('average runtime:', runtime[i])
        print('average number of blossoms:', nblossoms[i])
        print('average number of cycle merges:', nmerges[i])

    fig, ax = plt.subplots(1, 2, figsize=(10, 4))
    ax[0].loglog(sizes, runtime, '.-')
    ax[0].set_xlabel('number of nodes')
    ax[0].set_ylabel('runtime (s)')
    ax[0].set_title('maximum matching of random cubic graphs')
    ax[1].plot(sizes, nblossoms, '.-', label='contracted blossoms')
    ax[1].plot(sizes, nmerges, '.-', label='cycle merges')
    ax[1].set_xlabel('number of nodes')
    ax[1].legend()
    plt.savefig('blossom_scaling.pdf')
    plt.show()


if __name__ == '__main__':
    main()
