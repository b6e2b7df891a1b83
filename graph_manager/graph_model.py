"""Road network graph data structure and runtime model."""

import copy
import logging
import math
from dataclasses import dataclass, field, replace
from threading import Lock
from typing import Dict, FrozenSet, List, Optional, Tuple

import networkx as nx

logger = logging.getLogger(__name__)


NODE_CATEGORIES = ('entry', 'intersection', 'destination')

# Defaults applied to edge attributes that are not supplied
DEFAULT_DISTANCE = 1.0
DEFAULT_CAPACITY = 100.0
DEFAULT_SPEED_LIMIT = 50.0
DEFAULT_ROAD_CLASS = 'main'


class GraphError(Exception):
    """Base class for road network errors."""


class GraphConstructionError(GraphError, ValueError):
    """Raised when a node or edge cannot be inserted."""


class GraphLookupError(GraphError, LookupError):
    """Raised when an operation references a missing node or edge."""


class NodeNotFoundError(GraphLookupError):
    """Raised when a node id is not part of the graph."""

    def __init__(self, node_id: str):
        super().__init__(f"Node does not exist: {node_id}")
        self.node_id = node_id


class EdgeNotFoundError(GraphLookupError):
    """Raised when no directed edge joins two nodes."""

    def __init__(self, from_node: str, to_node: str):
        super().__init__(f"Edge does not exist: {format_edge_id(from_node, to_node)}")
        self.from_node = from_node
        self.to_node = to_node


class NegativeCostError(GraphError, ValueError):
    """Raised when a cost function yields a negative edge cost."""


def format_edge_id(from_node: str, to_node: str) -> str:
    """Derive the edge identifier "<from>-<to>"."""
    return f"{from_node}-{to_node}"


def _value_or(value, default):
    return default if value is None else value


def _is_positive(value) -> bool:
    return math.isfinite(value) and value > 0


def congested_travel_time(travel_time: float, load: float, capacity: float) -> float:
    """Travel time grows linearly with the load-to-capacity ratio."""
    return travel_time * (1 + load / capacity)


@dataclass(frozen=True)
class GraphEdge:
    """Represents a directed road segment in the network."""

    from_node: str
    to_node: str

    # Static attributes
    distance: float = DEFAULT_DISTANCE  # km
    travel_time: float = DEFAULT_DISTANCE  # minutes at zero load
    capacity: float = DEFAULT_CAPACITY  # vehicles
    speed_limit: float = DEFAULT_SPEED_LIMIT  # km/h
    road_class: str = DEFAULT_ROAD_CLASS

    # Dynamic attributes (replaced by update_edge_load)
    current_load: float = 0.0
    current_travel_time: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self,
            'current_travel_time',
            congested_travel_time(self.travel_time, self.current_load, self.capacity)
        )

    @property
    def edge_id(self) -> str:
        return format_edge_id(self.from_node, self.to_node)

    @property
    def load_factor(self) -> float:
        return self.current_load / self.capacity

    @property
    def load_percentage(self) -> float:
        return self.load_factor * 100

    def with_load(self, load: float) -> 'GraphEdge':
        """Return a copy carrying a new load and recomputed travel time."""
        return replace(self, current_load=load)

    def reversed(self) -> 'GraphEdge':
        """Return the opposite direction with the same base metrics."""
        return replace(self, from_node=self.to_node, to_node=self.from_node)


@dataclass(frozen=True)
class GraphNode:
    """Represents an entry point, intersection or destination."""

    node_id: str
    name: str = ''
    category: str = 'intersection'

    # Location
    latitude: float = 0.0
    longitude: float = 0.0

    # Temple gates and other destinations of interest
    is_destination_of_interest: bool = False

    # Outgoing neighbour ids, maintained by NetworkGraph.add_edge
    neighbors: FrozenSet[str] = field(default_factory=frozenset)


class NetworkGraph:
    """
    Runtime model of the road network as a directed graph G = (V, E).

    Nodes and edges are immutable records; every change swaps the record
    under the graph lock, so concurrent readers see either the old or the
    new edge state and never a mix of both.
    """

    def __init__(self):
        """Initialize empty road network."""
        self._nodes: Dict[str, GraphNode] = {}
        # Keyed by endpoint pair; edge_id is display only and may collide
        # when node ids contain '-'
        self._edges: Dict[Tuple[str, str], GraphEdge] = {}
        self._lock = Lock()

    @property
    def nodes(self) -> Dict[str, GraphNode]:
        """Snapshot of node_id -> node."""
        with self._lock:
            return dict(self._nodes)

    @property
    def edges(self) -> Dict[Tuple[str, str], GraphEdge]:
        """Snapshot of (from_node, to_node) -> edge."""
        with self._lock:
            return dict(self._edges)

    def add_node(self, node_id: str, **attributes) -> GraphNode:
        """Insert or overwrite a node, keeping its edge-derived neighbours."""
        attributes.pop('neighbors', None)
        category = attributes.get('category', 'intersection')
        if category not in NODE_CATEGORIES:
            raise GraphConstructionError(f"Unknown category for node {node_id}: {category}")

        with self._lock:
            existing = self._nodes.get(node_id)
            neighbors = existing.neighbors if existing else frozenset()
            try:
                node = GraphNode(node_id=node_id, neighbors=neighbors, **attributes)
            except TypeError as e:
                raise GraphConstructionError(f"Invalid attributes for node {node_id}: {e}") from e
            self._nodes[node_id] = node

        logger.debug(f"Added node: {node_id}")
        return node

    def add_edge(self, from_node: str, to_node: str, bidirectional: bool = False,
                 **attributes) -> GraphEdge:
        """
        Add a directed road edge, and its reverse when bidirectional.

        Args:
            from_node: Source node ID
            to_node: Target node ID
            bidirectional: Also insert to_node -> from_node with its own load
            **attributes: distance, travel_time, capacity, current_load,
                speed_limit, road_class

        Returns:
            The forward edge

        Raises:
            GraphConstructionError: If an endpoint is missing or a metric is invalid
        """
        edge = self._build_edge(from_node, to_node, attributes)

        with self._lock:
            missing = [n for n in (from_node, to_node) if n not in self._nodes]
            if missing:
                raise GraphConstructionError(
                    f"Cannot create edge between non-existent nodes: {from_node}, {to_node}"
                )

            self._insert_edge_locked(edge)
            if bidirectional:
                self._insert_edge_locked(edge.reversed())

        logger.debug(f"Added edge: {from_node} -> {to_node}"
                     f"{' (bidirectional)' if bidirectional else ''}")
        return edge

    def update_edge_load(self, from_node: str, to_node: str, load: float) -> GraphEdge:
        """
        Replace the traffic load on an edge and recompute its travel time.

        Raises:
            EdgeNotFoundError: If the edge does not exist
            ValueError: If the load is negative or not finite
        """
        if not math.isfinite(load) or load < 0:
            raise ValueError(f"Edge load must be a finite non-negative number, got {load}")

        key = (from_node, to_node)
        with self._lock:
            edge = self._edges.get(key)
            if edge is None:
                raise EdgeNotFoundError(from_node, to_node)
            updated = edge.with_load(load)
            self._edges[key] = updated

        logger.info(f"Edge {updated.edge_id} load set to {load} "
                    f"({updated.load_percentage:.1f}% of capacity, "
                    f"travel time {updated.current_travel_time:.2f})")
        return updated

    def has_node(self, node_id: str) -> bool:
        """Check if node exists in graph."""
        with self._lock:
            return node_id in self._nodes

    def has_edge(self, from_node: str, to_node: str) -> bool:
        """Check if edge exists in graph."""
        with self._lock:
            return (from_node, to_node) in self._edges

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        """Get node by ID."""
        with self._lock:
            return self._nodes.get(node_id)

    def get_edge(self, from_node: str, to_node: str) -> Optional[GraphEdge]:
        """Get edge by its endpoint IDs."""
        with self._lock:
            return self._edges.get((from_node, to_node))

    def get_neighbors(self, node_id: str) -> List[str]:
        """Get neighbor nodes connected by outgoing edges."""
        node = self.get_node(node_id)
        if not node:
            return []
        return sorted(node.neighbors)

    def get_destination_nodes(self) -> List[GraphNode]:
        """Get all nodes flagged as destinations of interest."""
        with self._lock:
            return [node for node in self._nodes.values() if node.is_destination_of_interest]

    def node_count(self) -> int:
        with self._lock:
            return len(self._nodes)

    def edge_count(self) -> int:
        with self._lock:
            return len(self._edges)

    def copy(self) -> 'NetworkGraph':
        """Return a fully independent deep copy of the graph."""
        clone = NetworkGraph()
        with self._lock:
            clone._nodes = copy.deepcopy(self._nodes)
            clone._edges = copy.deepcopy(self._edges)
        return clone

    def to_networkx(self) -> nx.DiGraph:
        """
        Build a consistent NetworkX snapshot of the current graph state.

        Each edge carries its GraphEdge record under 'edge' and the current
        travel time under 'weight'. Nodes and edges are added in insertion
        order so searches over the snapshot are deterministic.
        """
        with self._lock:
            nodes = list(self._nodes.values())
            edges = list(self._edges.values())

        nx_graph = nx.DiGraph()
        for node in nodes:
            nx_graph.add_node(node.node_id, node=node)
        for edge in edges:
            nx_graph.add_edge(
                edge.from_node,
                edge.to_node,
                edge=edge,
                weight=edge.current_travel_time
            )
        return nx_graph

    def _build_edge(self, from_node: str, to_node: str, attributes: Dict) -> GraphEdge:
        attributes = {key: value for key, value in attributes.items() if value is not None}
        distance = _value_or(attributes.pop('distance', None), DEFAULT_DISTANCE)
        travel_time = _value_or(attributes.pop('travel_time', None), distance)
        capacity = _value_or(attributes.pop('capacity', None), DEFAULT_CAPACITY)
        current_load = _value_or(attributes.pop('current_load', None), 0.0)

        if not all(_is_positive(value) for value in (distance, travel_time, capacity)):
            raise GraphConstructionError(
                f"Edge {format_edge_id(from_node, to_node)} needs finite positive distance, "
                f"travel time and capacity"
            )
        if not math.isfinite(current_load) or current_load < 0:
            raise GraphConstructionError(
                f"Edge {format_edge_id(from_node, to_node)} has invalid load {current_load}"
            )

        try:
            return GraphEdge(
                from_node=from_node,
                to_node=to_node,
                distance=distance,
                travel_time=travel_time,
                capacity=capacity,
                current_load=current_load,
                **attributes
            )
        except TypeError as e:
            raise GraphConstructionError(
                f"Invalid attributes for edge {format_edge_id(from_node, to_node)}: {e}"
            ) from e

    def _insert_edge_locked(self, edge: GraphEdge) -> None:
        # Caller must hold _lock.
        self._edges[(edge.from_node, edge.to_node)] = edge
        source = self._nodes[edge.from_node]
        self._nodes[edge.from_node] = replace(source, neighbors=source.neighbors | {edge.to_node})

    def __repr__(self) -> str:
        return f"NetworkGraph(nodes={len(self._nodes)}, edges={len(self._edges)})"
