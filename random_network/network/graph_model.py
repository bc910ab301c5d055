"""
Network graph model holding node values and undirected links.
"""

import logging
import operator
import numpy as np
import networkx as nx
from typing import List, Dict, Optional, Sequence, Set, Tuple

from ..core.base_models import RandomService
from ..core.random_service import NumpyRandomService

logger = logging.getLogger(__name__)


class NodeIndexError(IndexError):
    """Raised when a query names a node outside [0, size)."""

    def __init__(self, node: int, size: int):
        self.node = node
        self.size = size
        super().__init__(f"Node {node} out of range for network of {size} nodes")


class Network:
    """
    Undirected, unweighted, loop-free network of real-valued nodes.

    Node identity is the position in the value array. Links are stored as a
    mapping from node index to the set of its neighbors and are always kept
    symmetric.
    """

    def __init__(self, random_service: Optional[RandomService] = None):
        """
        Initialize an empty network.

        Args:
            random_service: Source of random samples (defaults to an
                unseeded NumpyRandomService)
        """
        if random_service is None:
            random_service = NumpyRandomService()
        self.random_service = random_service
        self.values = np.zeros(0)
        self._links: Dict[int, Set[int]] = {}

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"Network(nodes={self.size()}, links={self.n_links()})"

    def _check_node(self, n: int) -> int:
        # Raises TypeError for non-integer indices
        n = operator.index(n)
        if not 0 <= n < self.size():
            raise NodeIndexError(n, self.size())
        return n

    # ============================================================================
    # Sizing and values
    # ============================================================================

    def resize(self, size: int):
        """
        Resize the network and redraw every node value from N(0, 1).

        All links are removed as well, so no link can reference a node
        that no longer exists.

        Args:
            size: New number of nodes
        """
        if size < 0:
            raise ValueError(f"Network size must be non-negative, got {size}")
        self.values = np.asarray(self.random_service.normal(size, 0.0, 1.0), dtype=float)
        self._links.clear()
        logger.debug(f"Resized network to {size} nodes")

    def set_values(self, new_values: Sequence[float]) -> int:
        """
        Overwrite node values position by position.

        Only the first min(size, len(new_values)) values are replaced; the
        node count never changes.

        Args:
            new_values: Replacement values

        Returns:
            Number of nodes in the network
        """
        new_values = np.asarray(new_values, dtype=float)
        n = min(self.size(), len(new_values))
        self.values[:n] = new_values[:n]
        return self.size()

    def size(self) -> int:
        """Number of nodes."""
        return len(self.values)

    def value(self, n: int) -> float:
        """Value of node *n*."""
        n = self._check_node(n)
        return float(self.values[n])

    def sorted_values(self) -> np.ndarray:
        """All node values in descending order; the network is left unchanged."""
        return np.sort(self.values)[::-1].copy()

    # ============================================================================
    # Links
    # ============================================================================

    def add_link(self, a: int, b: int) -> bool:
        """
        Add an undirected link between nodes *a* and *b*.

        Args:
            a, b: Node indices

        Returns:
            True if the link was inserted, False for self-loops, non-integer
            or unknown nodes, or links that already exist
        """
        try:
            a, b = operator.index(a), operator.index(b)
        except TypeError:
            return False
        n_nodes = self.size()
        if a == b or not (0 <= a < n_nodes and 0 <= b < n_nodes):
            return False
        if b in self._links.get(a, ()):
            return False
        self._links.setdefault(a, set()).add(b)
        self._links.setdefault(b, set()).add(a)
        return True

    def degree(self, n: int) -> int:
        """Number of links of node *n*."""
        n = self._check_node(n)
        return len(self._links.get(n, ()))

    def neighbors(self, n: int) -> List[int]:
        """All nodes linked to node *n* (unordered)."""
        n = self._check_node(n)
        return list(self._links.get(n, ()))

    def random_connect(self, mean_degree: float) -> int:
        """
        Replace all links with random ones.

        Each node draws a Poisson(mean_degree) number of uniformly chosen
        candidates and tries to link to each of them. Self-loops and
        duplicates are rejected without retry, so realized degrees are
        usually below the drawn ones.

        Args:
            mean_degree: Mean of the Poisson degree distribution

        Returns:
            Number of links created
        """
        self._links.clear()
        n_nodes = self.size()
        created = 0
        for i in range(n_nodes):
            degree = self.random_service.poisson(mean_degree)
            candidates = self.random_service.uniform_int(degree, 0, n_nodes - 1)
            for candidate in candidates:
                if self.add_link(i, int(candidate)):
                    created += 1
        logger.debug(f"random_connect(mean_degree={mean_degree}) created {created} links "
                     f"over {n_nodes} nodes")
        return created

    # ============================================================================
    # Export
    # ============================================================================

    def n_links(self) -> int:
        """Number of undirected links."""
        return sum(len(nbrs) for nbrs in self._links.values()) // 2

    def links(self) -> List[Tuple[int, int]]:
        """All links as (a, b) pairs with a < b, sorted."""
        return sorted((a, b) for a, nbrs in self._links.items() for b in nbrs if a < b)

    def adjacency_matrix(self) -> np.ndarray:
        """
        Get the dense adjacency matrix.

        Returns:
            Symmetric (size x size) float matrix with 1.0 where nodes are linked
        """
        n = self.size()
        A = np.zeros((n, n))
        for a, b in self.links():
            A[a, b] = A[b, a] = 1.0
        return A

    def to_networkx(self) -> nx.Graph:
        """
        Convert to a NetworkX graph.

        Returns:
            Graph with nodes 0..size-1 carrying a 'value' attribute
        """
        G = nx.Graph()
        G.add_nodes_from((i, {"value": float(v)}) for i, v in enumerate(self.values))
        G.add_edges_from(self.links())
        return G
