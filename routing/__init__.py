"""Route search and traffic distribution."""

from .models import RoutePath, PathResult, RouteAllocation, DistributionPlan
from .path_finder import PathFinder, CostFunction, current_travel_time
from .traffic_allocator import TrafficAllocator, route_weights, allocate_vehicles

__all__ = [
    'RoutePath',
    'PathResult',
    'RouteAllocation',
    'DistributionPlan',
    'PathFinder',
    'CostFunction',
    'current_travel_time',
    'TrafficAllocator',
    'route_weights',
    'allocate_vehicles'
]
