"""
Build a random network from a configuration file and report its statistics.
"""

import argparse
import json
import logging
from typing import Optional

from random_network.config.config_manager import ConfigManager, validate_network_params
from random_network.network.generator import create_network, get_network_info

logger = logging.getLogger(__name__)


def _resolve_logging_level(level_str: Optional[str], verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    if not level_str:
        return logging.INFO
    mapping = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL,
    }
    return mapping.get(level_str.upper(), logging.INFO)


def configure_logging(level: int) -> None:
    """Configure global logging."""
    logging.basicConfig(level=level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def main():
    """Main function with configuration-driven interface."""
    parser = argparse.ArgumentParser(description="Random network generation")
    parser.add_argument("--config", default="config.json", help="Configuration file path")
    parser.add_argument("--n-nodes", type=int, help="Override number of nodes")
    parser.add_argument("--mean-degree", type=float, help="Override mean Poisson degree")
    parser.add_argument("--seed", type=int, help="Override random seed")
    parser.add_argument("--top", type=int, default=5, help="Number of top node values to report")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    try:
        config = ConfigManager(args.config)
    except FileNotFoundError:
        configure_logging(logging.INFO)
        logger.error(f"Configuration file '{args.config}' not found")
        return 1
    except json.JSONDecodeError as e:
        configure_logging(logging.INFO)
        logger.error(f"Invalid JSON in configuration file: {e}")
        return 1

    configure_logging(_resolve_logging_level(config.get_logging_level(), args.verbose))

    try:
        params = config.get_network_params()
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid network parameter: {e}")
        return 1

    if args.n_nodes is not None:
        params['n_nodes'] = args.n_nodes
    if args.mean_degree is not None:
        params['mean_degree'] = args.mean_degree
    if args.seed is not None:
        params['random_seed'] = args.seed

    # Overrides are validated together with the file values
    if not validate_network_params(params):
        return 1

    network = create_network(params['n_nodes'], params['mean_degree'], params['random_seed'])
    info = get_network_info(network)

    logger.info("=" * 50)
    logger.info("RANDOM NETWORK")
    logger.info("=" * 50)
    for key, value in info.items():
        if isinstance(value, float):
            logger.info(f"{key}: {value:.4f}")
        else:
            logger.info(f"{key}: {value}")

    top_values = network.sorted_values()[:args.top]
    logger.info(f"Top {len(top_values)} node values: {[f'{v:.3f}' for v in top_values]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
