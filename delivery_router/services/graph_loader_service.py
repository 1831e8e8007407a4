"""
Loading of graph and city-name data files.
"""
import logging
from typing import Dict

from delivery_router.core.graph import Graph, GraphBuilder, normalize_node_id
from delivery_router.utils.helpers import detect_isolated_nodes

logger = logging.getLogger(__name__)


class GraphLoaderService:
    """
    Service for reading the city graph and the optional naming layer from disk.
    """

    @staticmethod
    def load_graph(file_path: str) -> Graph:
        """
        Read an edge-list file ("cityA cityB weight" per line) into a graph.

        Raises:
            FileNotFoundError: If the file does not exist.
            GraphFormatError: If a line is malformed.
            OSError, UnicodeDecodeError: If the file cannot be read as UTF-8 text.
        """
        with open(file_path, 'r', encoding='utf-8') as f:
            graph = GraphBuilder.parse_edge_list(f.read())

        isolated = detect_isolated_nodes(graph)
        if isolated:
            logger.warning(f"Graph {file_path} contains isolated nodes: {isolated}")

        logger.info(f"Loaded graph with {len(graph)} nodes from {file_path}")
        return graph

    @staticmethod
    def parse_city_names(text: str) -> Dict[str, str]:
        """
        Parse "id name" lines, splitting at the first whitespace.

        Lines without a name are skipped; names may contain spaces.
        """
        names = {}
        for line in text.strip().splitlines():
            parts = line.strip().split(None, 1)
            if len(parts) != 2:
                continue
            node_id, name = parts
            names[normalize_node_id(node_id)] = name.strip()
        return names

    @staticmethod
    def load_city_names(file_path: str) -> Dict[str, str]:
        """
        Read the city-names file. A missing or unreadable file yields an empty mapping.
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                names = GraphLoaderService.parse_city_names(f.read())
        except FileNotFoundError:
            logger.warning(f"City names file not found: {file_path}. Node IDs will be shown instead.")
            return {}
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read city names file {file_path}: {e}. Node IDs will be shown instead.")
            return {}

        logger.info(f"Loaded {len(names)} city names from {file_path}")
        return names
