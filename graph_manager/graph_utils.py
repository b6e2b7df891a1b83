"""Road network construction and export utilities."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Union

import networkx as nx
from pydantic import ValidationError

from .graph_model import GraphConstructionError, GraphEdge, GraphNode, NetworkGraph
from .network_data import KACHI_DHAM_EDGES, KACHI_DHAM_NODES
from api.data_schemas import EdgeRecord, NetworkDefinition, NodeRecord

logger = logging.getLogger(__name__)


def build_network(nodes: Iterable[Union[Mapping[str, Any], NodeRecord]],
                  edges: Iterable[Union[Mapping[str, Any], EdgeRecord]]) -> NetworkGraph:
    """
    Build a road network from node and edge records.

    Records are validated against the input schemas and inserted in the
    order given. Edges are bidirectional unless a record sets
    ``bidirectional`` to False.

    Args:
        nodes: Node records ({id, name, category, latitude, longitude,
            is_destination_of_interest})
        edges: Edge records ({from, to, distance, travel_time, capacity,
            speed_limit, road_class, bidirectional})

    Returns:
        Populated NetworkGraph

    Raises:
        GraphConstructionError: If a record is invalid or an edge references
            a missing node
    """
    graph = NetworkGraph()

    for raw in nodes:
        record = _validate(NodeRecord, raw)
        graph.add_node(
            record.id,
            name=record.name or record.id,
            category=record.category,
            latitude=record.latitude,
            longitude=record.longitude,
            is_destination_of_interest=record.is_destination_of_interest
        )

    for raw in edges:
        record = _validate(EdgeRecord, raw)
        graph.add_edge(record.from_node, record.to_node, **record.edge_attributes())

    logger.info(f"Road network initialized with {graph.node_count()} nodes "
                f"and {graph.edge_count()} edges")
    return graph


def build_kachi_dham_network() -> NetworkGraph:
    """Build the bundled Kachi Dham road network."""
    return build_network(KACHI_DHAM_NODES, KACHI_DHAM_EDGES)


def load_network_file(filepath: Union[str, Path]) -> NetworkGraph:
    """
    Build a road network from a JSON file with "nodes" and "edges" lists.

    Args:
        filepath: Path to the network definition

    Returns:
        Populated NetworkGraph
    """
    with open(filepath, 'r') as f:
        raw = json.load(f)

    definition = _validate(NetworkDefinition, raw)
    logger.info(f"Loaded network definition from {filepath}")
    return build_network(definition.nodes, definition.edges)


def _validate(schema, raw):
    if isinstance(raw, schema):
        return raw
    try:
        return schema.model_validate(raw)
    except ValidationError as e:
        raise GraphConstructionError(f"Invalid {schema.__name__}: {e}") from e


def node_to_dict(node: GraphNode) -> Dict[str, Any]:
    """Serialize a node, listing its outgoing neighbours."""
    return {
        'id': node.node_id,
        'name': node.name,
        'category': node.category,
        'latitude': node.latitude,
        'longitude': node.longitude,
        'is_destination_of_interest': node.is_destination_of_interest,
        'neighbors': sorted(node.neighbors)
    }


def edge_to_dict(edge: GraphEdge) -> Dict[str, Any]:
    """Serialize an edge with its current congestion state."""
    return {
        'id': edge.edge_id,
        'from': edge.from_node,
        'to': edge.to_node,
        'distance': edge.distance,
        'travel_time': edge.travel_time,
        'current_travel_time': edge.current_travel_time,
        'capacity': edge.capacity,
        'current_load': edge.current_load,
        'load_percentage': edge.load_percentage,
        'speed_limit': edge.speed_limit,
        'road_class': edge.road_class
    }


def graph_to_dict(graph: NetworkGraph) -> Dict[str, Any]:
    """
    Serialize the full node and edge collections.

    Args:
        graph: Road network

    Returns:
        Dict with 'nodes', 'edges' and 'metadata'
    """
    nodes = graph.nodes
    edges = graph.edges

    return {
        'nodes': [node_to_dict(node) for node in nodes.values()],
        'edges': [edge_to_dict(edge) for edge in edges.values()],
        'metadata': {
            'total_nodes': len(nodes),
            'total_edges': len(edges),
            'destinations': [n.node_id for n in nodes.values() if n.is_destination_of_interest]
        }
    }


def export_graph_to_json(graph: NetworkGraph, filepath: Union[str, Path]) -> None:
    """
    Export road network to JSON format.

    Args:
        graph: Road network to export
        filepath: Output file path
    """
    with open(filepath, 'w') as f:
        json.dump(graph_to_dict(graph), f, indent=2)

    logger.info(f"Graph exported to {filepath}")


def export_graph_to_graphml(graph: NetworkGraph, filepath: Union[str, Path]) -> None:
    """
    Export road network to GraphML format (NetworkX compatible).

    Args:
        graph: Road network to export
        filepath: Output file path
    """
    nx_graph = nx.DiGraph()

    for node in graph.nodes.values():
        nx_graph.add_node(
            node.node_id,
            name=node.name,
            category=node.category,
            latitude=node.latitude,
            longitude=node.longitude,
            is_destination_of_interest=node.is_destination_of_interest
        )

    for edge in graph.edges.values():
        nx_graph.add_edge(
            edge.from_node,
            edge.to_node,
            id=edge.edge_id,
            distance=float(edge.distance),
            travel_time=float(edge.travel_time),
            current_travel_time=float(edge.current_travel_time),
            capacity=float(edge.capacity),
            current_load=float(edge.current_load),
            speed_limit=float(edge.speed_limit),
            road_class=edge.road_class
        )

    nx.write_graphml(nx_graph, str(filepath))
    logger.info(f"Graph exported to GraphML: {filepath}")
