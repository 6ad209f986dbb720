"""
PyBlossom
=========

Python implementation of Edmonds' blossom algorithm for maximum-cardinality
matchings in general graphs, and of a Hamiltonian cycle construction
for cubic graphs based on it.

"""

from .graph             import *
from .forest            import *
from .blossom           import *
from .hamiltonian       import *
from .edgelist          import *
