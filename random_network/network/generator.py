"""
Network generator and summary statistics.
"""

import logging
import numpy as np
import networkx as nx
from typing import Dict, Any, Optional

from ..core.base_models import RandomService
from ..core.random_service import NumpyRandomService
from .graph_model import Network

logger = logging.getLogger(__name__)


def create_network(n_nodes: int, mean_degree: float, random_seed: Optional[int] = None,
                   random_service: Optional[RandomService] = None) -> Network:
    """
    Create a Network with random values and Poisson-degree random links.

    Args:
        n_nodes: Number of nodes
        mean_degree: Mean of the Poisson degree distribution
        random_seed: Random seed for reproducibility (ignored if
            random_service is given)
        random_service: Explicit random service to use

    Returns:
        Network instance with resized values and random links
    """
    if random_service is None:
        random_service = NumpyRandomService(random_seed)
    network = Network(random_service)
    network.resize(n_nodes)
    n_links = network.random_connect(mean_degree)
    logger.info(f"Created network with {n_nodes} nodes and {n_links} links "
                f"(mean_degree={mean_degree}, seed={random_seed})")
    return network


def create_network_from_config(config_manager) -> Network:
    """Create a Network from the network.* parameters of a ConfigManager."""
    params = config_manager.get_network_params()
    return create_network(params["n_nodes"], params["mean_degree"], params["random_seed"])


def get_network_info(network: Network) -> Dict[str, Any]:
    """
    Get information about a network.

    Args:
        network: Network to summarize

    Returns:
        Dictionary with network statistics
    """
    n_nodes = network.size()
    if n_nodes == 0:
        return {
            "n_nodes": 0,
            "total_links": 0,
            "density": 0.0,
            "average_degree": 0.0,
            "max_degree": 0,
            "min_degree": 0,
            "isolated_nodes": 0,
            "n_components": 0,
            "largest_component_size": 0,
            "mean_value": 0.0,
            "std_value": 0.0
        }

    degrees = np.array([network.degree(n) for n in range(n_nodes)])
    total_links = network.n_links()
    max_possible_links = n_nodes * (n_nodes - 1) / 2
    density = total_links / max_possible_links if max_possible_links > 0 else 0.0
    components = list(nx.connected_components(network.to_networkx()))

    return {
        "n_nodes": n_nodes,
        "total_links": total_links,
        "density": float(density),
        "average_degree": float(np.mean(degrees)),
        "max_degree": int(np.max(degrees)),
        "min_degree": int(np.min(degrees)),
        "isolated_nodes": int(np.sum(degrees == 0)),
        "n_components": len(components),
        "largest_component_size": max(len(c) for c in components),
        "mean_value": float(np.mean(network.values)),
        "std_value": float(np.std(network.values))
    }
