"""Split a batch of vehicles across alternative routes."""

import logging
from numbers import Integral
from typing import Optional, Sequence

import numpy as np

from config.routing import RoutingConfig
from graph_manager.graph_model import NetworkGraph
from .models import DistributionPlan, RouteAllocation, RoutePath
from .path_finder import PathFinder

logger = logging.getLogger(__name__)


def route_weights(paths: Sequence[RoutePath]) -> np.ndarray:
    """
    Weight each route by the reciprocal of its travel time.

    A zero travel time only occurs for the trivial start == end route;
    such routes share all the weight and every other route gets none.
    """
    travel_times = np.array([path.travel_time for path in paths], dtype=float)
    instant = travel_times == 0
    if instant.any():
        return instant.astype(float)
    return 1.0 / travel_times


def allocate_vehicles(weights: np.ndarray, total_vehicles: int) -> np.ndarray:
    """
    Floor each proportional share and give the rounding remainder to the
    first route, so the counts always sum to total_vehicles.
    """
    shares = total_vehicles * (weights / weights.sum())
    counts = np.floor(shares).astype(int)
    counts[0] += total_vehicles - int(counts.sum())
    return counts


class TrafficAllocator:
    """Distributes vehicles over alternative routes, favouring faster ones."""

    def __init__(self, graph: NetworkGraph, config: Optional[RoutingConfig] = None,
                 path_finder: Optional[PathFinder] = None):
        self.config = config or RoutingConfig()
        self.path_finder = path_finder or PathFinder(graph, self.config)

    def distribute_traffic(self, start_id: str, end_id: str, total_vehicles: int,
                           num_paths: Optional[int] = None) -> DistributionPlan:
        """
        Build a distribution plan for vehicles travelling start_id -> end_id.

        Args:
            start_id: Start node ID
            end_id: End node ID
            total_vehicles: Number of vehicles to distribute (>= 0)
            num_paths: Maximum candidate routes, defaults to
                config.default_distribution_paths

        Returns:
            DistributionPlan; success=False when no route exists

        Raises:
            ValueError: If total_vehicles is not a non-negative integer or
                num_paths < 1
            NodeNotFoundError: If either endpoint is not in the graph
        """
        if isinstance(total_vehicles, bool) or not isinstance(total_vehicles, Integral):
            raise ValueError(f"total_vehicles must be an integer, got {total_vehicles!r}")
        if total_vehicles < 0:
            raise ValueError(f"total_vehicles must be non-negative, got {total_vehicles}")
        if num_paths is None:
            num_paths = self.config.default_distribution_paths

        paths = self.path_finder.find_alternative_paths(start_id, end_id, num_paths)
        if not paths:
            logger.info(f"No paths found from {start_id} to {end_id}; nothing to distribute")
            return DistributionPlan(
                success=False,
                total_vehicles=int(total_vehicles),
                message="No paths found",
            )

        weights = route_weights(paths)
        counts = allocate_vehicles(weights, int(total_vehicles))

        distribution = [
            RouteAllocation(path=path, weight=float(weight), vehicle_count=int(count))
            for path, weight, count in zip(paths, weights, counts)
        ]

        logger.info(f"Distributed {total_vehicles} vehicles from {start_id} to {end_id} "
                    f"over {len(distribution)} route(s): "
                    f"{[route.vehicle_count for route in distribution]}")
        return DistributionPlan(
            success=True,
            total_vehicles=int(total_vehicles),
            distribution=distribution,
        )
