from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from graph_manager.graph_model import GraphEdge


def _edge_summary(edge: GraphEdge) -> Dict[str, Any]:
    return {
        "id": edge.edge_id,
        "from": edge.from_node,
        "to": edge.to_node,
        "distance": edge.distance,
        "travel_time": edge.travel_time,
        "current_travel_time": edge.current_travel_time,
        "current_load": edge.current_load,
        "capacity": edge.capacity,
    }


@dataclass(frozen=True)
class RoutePath:
    """A found route with totals evaluated at query time."""

    nodes: Tuple[str, ...]
    edges: Tuple[GraphEdge, ...]
    distance: float
    travel_time: float
    cost: float

    @property
    def edge_ids(self) -> List[str]:
        return [edge.edge_id for edge in self.edges]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": list(self.nodes),
            "edges": [_edge_summary(edge) for edge in self.edges],
            "distance": self.distance,
            "travel_time": self.travel_time,
            "cost": self.cost,
        }


@dataclass(frozen=True)
class PathResult:
    found: bool
    path: Optional[RoutePath] = None
    reason: Optional[str] = None

    @classmethod
    def not_found(cls, reason: str) -> "PathResult":
        return cls(found=False, path=None, reason=reason)

    @property
    def nodes(self) -> List[str]:
        return list(self.path.nodes) if self.path else []

    @property
    def distance(self) -> float:
        return self.path.distance if self.path else math.inf

    @property
    def travel_time(self) -> float:
        return self.path.travel_time if self.path else math.inf

    def to_dict(self) -> Dict[str, Any]:
        if self.path is None:
            return {"found": False, "path": [], "distance": None, "message": self.reason}
        return {"found": True, **self.path.to_dict()}


@dataclass(frozen=True)
class RouteAllocation:
    path: RoutePath
    weight: float
    vehicle_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.path.to_dict(),
            "weight": self.weight,
            "vehicle_count": self.vehicle_count,
        }


@dataclass(frozen=True)
class DistributionPlan:
    success: bool
    total_vehicles: int
    distribution: List[RouteAllocation] = field(default_factory=list)
    message: Optional[str] = None

    @property
    def allocated_vehicles(self) -> int:
        return sum(route.vehicle_count for route in self.distribution)

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "message": self.message}
        return {
            "success": True,
            "total_vehicles": self.total_vehicles,
            "distribution": [route.to_dict() for route in self.distribution],
        }
