"""
hkmatch
=======

Maximum-cardinality matching of bipartite graphs via the Hopcroft-Karp algorithm.

"""

from .exceptions    import *
from .graph         import *
from .bipartite     import *
from .hopcroft_karp import *
from .matching      import *
from .cover         import *
