from .network.graph_model import Network, NodeIndexError
from .network.generator import create_network, create_network_from_config, get_network_info
from .core.base_models import RandomService
from .core.random_service import NumpyRandomService
from .config.config_manager import ConfigManager

__all__ = [
    "Network",
    "NodeIndexError",
    "RandomService",
    "NumpyRandomService",
    "ConfigManager",
    "create_network",
    "create_network_from_config",
    "get_network_info"
]
