"""
Network model and generation helpers.
"""

from .graph_model import Network, NodeIndexError
from .generator import create_network, create_network_from_config, get_network_info

__all__ = [
    "Network",
    "NodeIndexError",
    "create_network",
    "create_network_from_config",
    "get_network_info"
]
