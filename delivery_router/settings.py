import os
import logging

from delivery_router.core.constants import (
    DEFAULT_SHORTEST_PATH_ALGORITHM,
    DEFAULT_UNREACHABLE_POLICY,
    UNREACHABLE_POLICIES,
    ALGORITHM_DIJKSTRA,
    ALGORITHM_FLOYD_WARSHALL,
)
from delivery_router.utils.env_loader import load_env_from_file

logger = logging.getLogger(__name__)

APP_DIR = os.path.dirname(os.path.abspath(__file__))
BASE_DIR = os.path.dirname(APP_DIR)

# Try different possible locations for the env file
env_paths = [
    os.path.join(APP_DIR, 'env_var.env'),  # App directory
    os.path.join(BASE_DIR, 'env_var.env'),  # Root directory
]

for path in env_paths:
    if load_env_from_file(path):
        break


def _data_file(env_name, default_name):
    # Relative paths are resolved against the repository root
    value = os.getenv(env_name, os.path.join('data', default_name))
    return value if os.path.isabs(value) else os.path.join(BASE_DIR, value)


# Graph data files
ROUTER_GRAPH_FILE = _data_file('ROUTER_GRAPH_FILE', 'graph.txt')
ROUTER_CITY_NAMES_FILE = _data_file('ROUTER_CITY_NAMES_FILE', 'city_names.txt')

# Shortest path strategy
ROUTER_SHORTEST_PATH_ALGORITHM = os.getenv(
    'ROUTER_SHORTEST_PATH_ALGORITHM', DEFAULT_SHORTEST_PATH_ALGORITHM
).strip().lower()
if ROUTER_SHORTEST_PATH_ALGORITHM not in (ALGORITHM_FLOYD_WARSHALL, ALGORITHM_DIJKSTRA):
    logger.warning(
        f"Unknown ROUTER_SHORTEST_PATH_ALGORITHM '{ROUTER_SHORTEST_PATH_ALGORITHM}', "
        f"using '{DEFAULT_SHORTEST_PATH_ALGORITHM}'."
    )
    ROUTER_SHORTEST_PATH_ALGORITHM = DEFAULT_SHORTEST_PATH_ALGORITHM

# How tours with unreachable hops are reported
ROUTER_UNREACHABLE_POLICY = os.getenv('ROUTER_UNREACHABLE_POLICY', DEFAULT_UNREACHABLE_POLICY).strip().lower()
if ROUTER_UNREACHABLE_POLICY not in UNREACHABLE_POLICIES:
    logger.warning(
        f"Unknown ROUTER_UNREACHABLE_POLICY '{ROUTER_UNREACHABLE_POLICY}', "
        f"using '{DEFAULT_UNREACHABLE_POLICY}'."
    )
    ROUTER_UNREACHABLE_POLICY = DEFAULT_UNREACHABLE_POLICY


def get_router_setting(name):
    """
    Look up a router setting, preferring the Django settings when they define it.
    """
    from django.conf import settings as django_settings

    if django_settings.configured and hasattr(django_settings, name):
        return getattr(django_settings, name)
    return globals()[name]
