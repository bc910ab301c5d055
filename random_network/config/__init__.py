"""
Configuration loading for random network generation.
"""

from .config_manager import ConfigManager, validate_network_params

__all__ = ['ConfigManager', 'validate_network_params']
