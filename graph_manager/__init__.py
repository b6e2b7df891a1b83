"""Graph management modules for the road network."""

from .graph_model import (
    NetworkGraph,
    GraphNode,
    GraphEdge,
    GraphError,
    GraphConstructionError,
    GraphLookupError,
    NodeNotFoundError,
    EdgeNotFoundError,
    NegativeCostError,
    format_edge_id
)
from .graph_utils import (
    build_network,
    build_kachi_dham_network,
    load_network_file,
    graph_to_dict,
    export_graph_to_json,
    export_graph_to_graphml
)

__all__ = [
    'NetworkGraph',
    'GraphNode',
    'GraphEdge',
    'GraphError',
    'GraphConstructionError',
    'GraphLookupError',
    'NodeNotFoundError',
    'EdgeNotFoundError',
    'NegativeCostError',
    'format_edge_id',
    'build_network',
    'build_kachi_dham_network',
    'load_network_file',
    'graph_to_dict',
    'export_graph_to_json',
    'export_graph_to_graphml'
]
