"""Shortest and alternative route search over the road network."""

import logging
from typing import Callable, List, Optional, Sequence

import networkx as nx

from config.routing import RoutingConfig
from graph_manager.graph_model import (
    GraphEdge,
    NegativeCostError,
    NetworkGraph,
    NodeNotFoundError,
)
from .models import PathResult, RoutePath

logger = logging.getLogger(__name__)


CostFunction = Callable[[GraphEdge], float]


def current_travel_time(edge: GraphEdge) -> float:
    """Default edge cost: congestion-adjusted travel time."""
    return edge.current_travel_time


class PathFinder:
    """
    Route queries against a NetworkGraph.

    Every query works on its own NetworkX snapshot of the graph, so path
    totals always reflect the loads at query time and concurrent load
    updates never affect a search that is already running.
    """

    def __init__(self, graph: NetworkGraph, config: Optional[RoutingConfig] = None):
        """
        Initialize path finder.

        Args:
            graph: Road network to search
            config: Routing defaults
        """
        self.graph = graph
        self.config = config or RoutingConfig()

    def find_shortest_path(self, start_id: str, end_id: str,
                           cost_fn: Optional[CostFunction] = None) -> PathResult:
        """
        Find the cheapest route with Dijkstra's algorithm.

        The search stops as soon as the destination is settled. Nodes that
        cannot be reached simply yield a not-found result.

        Args:
            start_id: Start node ID
            end_id: End node ID
            cost_fn: Edge cost, defaults to current travel time

        Returns:
            PathResult, with found=False when no route exists

        Raises:
            NodeNotFoundError: If either endpoint is not in the graph
            NegativeCostError: If cost_fn returns a negative value
        """
        snapshot = self.graph.to_networkx()
        _require_nodes(snapshot, start_id, end_id)
        return _dijkstra(snapshot, start_id, end_id, cost_fn)

    def find_alternative_paths(self, start_id: str, end_id: str,
                               k: Optional[int] = None) -> List[RoutePath]:
        """
        Find up to k distinct routes by greedy edge suppression.

        Starting from the shortest route, each round walks the edges of the
        most recently accepted route in order, hides one edge at a time and
        re-runs the shortest path search. The first route whose node
        sequence has not been seen yet is accepted. When no single
        suppression gives a new route the search stops, so fewer than k
        routes is a normal outcome.

        This is a best-effort diversity heuristic, not a k-shortest loopless
        paths algorithm: it can miss routes that only appear when two or
        more edges are avoided together.

        Args:
            start_id: Start node ID
            end_id: End node ID
            k: Maximum number of routes, defaults to config.default_alternatives

        Returns:
            Routes in discovery order, shortest first; empty if none exists
        """
        if k is None:
            k = self.config.default_alternatives
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")

        working = self.graph.to_networkx()
        _require_nodes(working, start_id, end_id)

        initial = _dijkstra(working, start_id, end_id)
        if not initial.found:
            return []

        paths = [initial.path]
        while len(paths) < k:
            alternative = _next_alternative(working, start_id, end_id, paths)
            if alternative is None:
                logger.debug(f"No further alternatives from {start_id} to {end_id} "
                             f"after {len(paths)} route(s)")
                break
            paths.append(alternative)

        logger.debug(f"Found {len(paths)} alternative route(s) from {start_id} to {end_id}")
        return paths

    def find_nearest_destination(self, start_id: str) -> PathResult:
        """
        Find the quickest route to any destination of interest (temple gate).

        Ties are broken by node insertion order.

        Args:
            start_id: Start node ID

        Returns:
            PathResult for the nearest reachable destination
        """
        snapshot = self.graph.to_networkx()
        _require_nodes(snapshot, start_id)

        destinations = [node.node_id for node in self.graph.get_destination_nodes()]
        if not destinations:
            return PathResult.not_found("No destinations of interest in the network")

        costs, routes = nx.single_source_dijkstra(
            snapshot, start_id, weight=_weight_function(None)
        )
        reachable = [node_id for node_id in destinations if node_id in costs]
        if not reachable:
            return PathResult.not_found(f"No destination of interest reachable from {start_id}")

        nearest = min(reachable, key=lambda node_id: costs[node_id])
        logger.debug(f"Nearest destination from {start_id}: {nearest} ({costs[nearest]:.2f})")
        return PathResult(found=True, path=_build_route(snapshot, routes[nearest], costs[nearest]))


def _require_nodes(snapshot: nx.DiGraph, *node_ids: str) -> None:
    for node_id in node_ids:
        if node_id not in snapshot:
            raise NodeNotFoundError(node_id)


def _weight_function(cost_fn: Optional[CostFunction]):
    cost_of = cost_fn or current_travel_time

    def weight(u, v, data):
        cost = cost_of(data['edge'])
        if cost < 0:
            raise NegativeCostError(f"Negative cost {cost} on edge {u}-{v}")
        return cost

    return weight


def _dijkstra(snapshot: nx.DiGraph, start_id: str, end_id: str,
              cost_fn: Optional[CostFunction] = None) -> PathResult:
    try:
        cost, nodes = nx.single_source_dijkstra(
            snapshot, start_id, target=end_id, weight=_weight_function(cost_fn)
        )
    except nx.NetworkXNoPath:
        return PathResult.not_found(f"No path found from {start_id} to {end_id}")
    return PathResult(found=True, path=_build_route(snapshot, nodes, cost))


def _next_alternative(working: nx.DiGraph, start_id: str, end_id: str,
                      accepted: Sequence[RoutePath]) -> Optional[RoutePath]:
    seen = {path.nodes for path in accepted}
    previous = accepted[-1]

    for from_node, to_node in zip(previous.nodes, previous.nodes[1:]):
        # Hide one edge; the working snapshot itself is never modified.
        reduced = nx.restricted_view(working, [], [(from_node, to_node)])
        result = _dijkstra(reduced, start_id, end_id)
        if result.found and result.path.nodes not in seen:
            return result.path

    return None


def _build_route(snapshot: nx.DiGraph, nodes: Sequence[str], cost: float) -> RoutePath:
    edges = tuple(snapshot.edges[u, v]['edge'] for u, v in zip(nodes, nodes[1:]))
    return RoutePath(
        nodes=tuple(nodes),
        edges=edges,
        distance=sum(edge.distance for edge in edges),
        travel_time=sum(edge.current_travel_time for edge in edges),
        cost=cost,
    )
