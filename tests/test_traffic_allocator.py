"""Tests for traffic distribution across alternative routes."""

import numpy as np
import pytest

from config.routing import RoutingConfig
from graph_manager.graph_model import NetworkGraph, NodeNotFoundError
from graph_manager.graph_utils import build_kachi_dham_network
from routing.traffic_allocator import TrafficAllocator, allocate_vehicles


def create_triangle_network() -> NetworkGraph:
    graph = NetworkGraph()
    for node_id in ('A', 'B', 'C'):
        graph.add_node(node_id)
    graph.add_edge('A', 'B', travel_time=5, capacity=100)
    graph.add_edge('B', 'C', travel_time=5, capacity=100)
    graph.add_edge('A', 'C', travel_time=20, capacity=100)
    return graph


def test_distribution_favours_faster_route():
    allocator = TrafficAllocator(create_triangle_network())

    plan = allocator.distribute_traffic('A', 'C', 100, 2)

    assert plan.success
    assert plan.total_vehicles == 100
    assert [route.path.nodes for route in plan.distribution] == [('A', 'B', 'C'), ('A', 'C')]
    assert [route.weight for route in plan.distribution] == pytest.approx([1 / 10, 1 / 20])
    # floor(66.67) = 66 and floor(33.33) = 33; the leftover vehicle goes first
    assert [route.vehicle_count for route in plan.distribution] == [67, 33]


@pytest.mark.parametrize('total_vehicles', [0, 1, 2, 3, 7, 99, 100, 101, 1000, 12345])
@pytest.mark.parametrize('num_paths', [1, 2, 3, 5])
def test_distribution_preserves_vehicle_total(total_vehicles, num_paths):
    graph = build_kachi_dham_network()
    graph.update_edge_load('market_square', 'river_crossing', 300)
    allocator = TrafficAllocator(graph)

    plan = allocator.distribute_traffic('city_center', 'temple_east', total_vehicles, num_paths)

    assert plan.success
    assert 1 <= len(plan.distribution) <= num_paths
    assert plan.allocated_vehicles == total_vehicles
    assert all(route.vehicle_count >= 0 for route in plan.distribution)
    assert all(isinstance(route.vehicle_count, int) for route in plan.distribution)


def test_distribution_without_route_fails_softly():
    graph = create_triangle_network()
    allocator = TrafficAllocator(graph)

    plan = allocator.distribute_traffic('C', 'A', 50)

    assert not plan.success
    assert plan.message == 'No paths found'
    assert plan.distribution == []
    assert plan.to_dict() == {'success': False, 'message': 'No paths found'}


def test_distribution_to_same_node():
    allocator = TrafficAllocator(create_triangle_network())

    plan = allocator.distribute_traffic('A', 'A', 40)

    assert plan.success
    assert len(plan.distribution) == 1
    assert plan.distribution[0].vehicle_count == 40


def test_distribution_default_num_paths_from_config():
    allocator = TrafficAllocator(create_triangle_network(), RoutingConfig(default_distribution_paths=1))

    plan = allocator.distribute_traffic('A', 'C', 10)

    assert [route.vehicle_count for route in plan.distribution] == [10]


@pytest.mark.parametrize('total_vehicles', [-1, 2.5, True, '10'])
def test_distribution_rejects_invalid_totals(total_vehicles):
    allocator = TrafficAllocator(create_triangle_network())

    with pytest.raises(ValueError):
        allocator.distribute_traffic('A', 'C', total_vehicles)


def test_distribution_rejects_invalid_num_paths():
    allocator = TrafficAllocator(create_triangle_network())

    with pytest.raises(ValueError):
        allocator.distribute_traffic('A', 'C', 10, 0)


def test_distribution_unknown_node():
    allocator = TrafficAllocator(create_triangle_network())

    with pytest.raises(NodeNotFoundError):
        allocator.distribute_traffic('A', 'nowhere', 10)


def test_allocate_vehicles_assigns_remainder_to_first_route():
    weights = np.array([1.0, 1.0, 1.0])

    counts = allocate_vehicles(weights, 10)

    assert counts.tolist() == [4, 3, 3]


def test_plan_serialization():
    allocator = TrafficAllocator(create_triangle_network())

    data = allocator.distribute_traffic('A', 'C', 100, 2).to_dict()

    assert data['success'] is True
    assert data['total_vehicles'] == 100
    first = data['distribution'][0]
    assert first['path'] == ['A', 'B', 'C']
    assert [edge['id'] for edge in first['edges']] == ['A-B', 'B-C']
    assert first['travel_time'] == 10
    assert first['vehicle_count'] == 67
