"""
Configuration manager for random network generation.
"""

import json
import logging
from typing import Dict, Any, Optional
from pathlib import Path

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Manages configuration for network generation.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file (JSON)
        """
        self.config_path = config_path or "config.json"
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r') as f:
            return json.load(f)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Nested sections are addressed with dots, e.g. 'network.n_nodes',
        'network.mean_degree', 'network.random_seed' or 'logging.level'.

        Args:
            key: Dotted configuration key
            default: Value returned when any part of the key is missing

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_network_params(self) -> Dict[str, Any]:
        """
        Get network generation parameters.

        Returns:
            Dictionary of network parameters
        """
        random_seed = self.get('network.random_seed')
        return {
            'n_nodes': int(self.get('network.n_nodes', 100)),
            'mean_degree': float(self.get('network.mean_degree', 4.0)),
            'random_seed': int(random_seed) if random_seed is not None else None
        }

    def get_logging_level(self) -> Optional[str]:
        """Configured logging level name, if any."""
        level = self.get('logging.level')
        return str(level) if level is not None else None

    def validate_config(self) -> bool:
        """
        Validate configuration.

        Returns:
            True if configuration is valid
        """
        try:
            params = self.get_network_params()
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid network parameter: {e}")
            return False

        return validate_network_params(params)


def validate_network_params(params: Dict[str, Any]) -> bool:
    """
    Validate network generation parameters.

    Args:
        params: Dictionary shaped like ConfigManager.get_network_params()

    Returns:
        True if the parameters can build a network
    """
    if params['n_nodes'] < 0:
        logger.error(f"n_nodes must be non-negative, got {params['n_nodes']}")
        return False

    if params['mean_degree'] < 0:
        logger.error(f"mean_degree must be non-negative, got {params['mean_degree']}")
        return False

    return True
