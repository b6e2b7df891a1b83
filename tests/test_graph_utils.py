"""Tests for network construction, input validation and export."""

import json

import networkx as nx
import pytest

from api.data_schemas import EdgeRecord, NodeRecord
from graph_manager.graph_model import GraphConstructionError
from graph_manager.graph_utils import (
    build_kachi_dham_network,
    build_network,
    export_graph_to_graphml,
    export_graph_to_json,
    graph_to_dict,
    load_network_file,
)
from graph_manager.network_data import KACHI_DHAM_EDGES, KACHI_DHAM_NODES


@pytest.fixture
def small_network_records():
    nodes = [
        {'id': 'gate', 'name': 'Main Gate', 'type': 'entry', 'latitude': 30.73, 'longitude': 79.06},
        {'id': 'square', 'name': 'Square', 'category': 'intersection'},
        {'id': 'temple', 'name': 'Temple', 'type': 'destination', 'isTemple': True},
    ]
    edges = [
        {'from': 'gate', 'to': 'square', 'distance': 1.2, 'travelTime': 10, 'capacity': 500,
         'speedLimit': 40, 'roadType': 'main'},
        {'from': 'square', 'to': 'temple', 'distance': 0.5, 'travel_time': 6, 'capacity': 300,
         'bidirectional': False},
    ]
    return nodes, edges


def test_build_network_from_records(small_network_records):
    graph = build_network(*small_network_records)

    assert graph.node_count() == 3
    assert graph.edge_count() == 3  # gate-square both ways, square-temple one way

    gate = graph.get_node('gate')
    assert gate.category == 'entry'
    assert gate.latitude == 30.73
    assert graph.get_node('temple').is_destination_of_interest

    edge = graph.get_edge('gate', 'square')
    assert edge.travel_time == 10
    assert edge.speed_limit == 40
    assert edge.road_class == 'main'
    assert graph.get_edge('square', 'gate').travel_time == 10
    assert not graph.has_edge('temple', 'square')


def test_build_network_rejects_edge_to_unknown_node(small_network_records):
    nodes, edges = small_network_records
    edges.append({'from': 'gate', 'to': 'temple_north', 'distance': 0.7})

    with pytest.raises(GraphConstructionError):
        build_network(nodes, edges)


def test_build_network_rejects_invalid_record(small_network_records):
    nodes, edges = small_network_records
    edges[0]['capacity'] = 0

    with pytest.raises(GraphConstructionError):
        build_network(nodes, edges)


def test_node_name_defaults_to_id():
    graph = build_network([{'id': 'junction'}], [])

    assert graph.get_node('junction').name == 'junction'


def test_edge_record_attributes_omit_unset_values():
    record = EdgeRecord.model_validate({'from': 'a', 'to': 'b', 'distance': 2})

    assert record.edge_attributes() == {'distance': 2.0, 'bidirectional': True}


def test_node_record_rejects_unknown_category():
    with pytest.raises(ValueError):
        NodeRecord.model_validate({'id': 'x', 'category': 'parking'})


def test_kachi_dham_network():
    graph = build_kachi_dham_network()

    assert graph.node_count() == len(KACHI_DHAM_NODES)
    assert graph.edge_count() == 2 * len(KACHI_DHAM_EDGES)
    assert {n.node_id for n in graph.get_destination_nodes()} == {
        'temple_main', 'temple_east', 'temple_west'
    }


def test_load_network_file(tmp_path, small_network_records):
    nodes, edges = small_network_records
    filepath = tmp_path / 'network.json'
    filepath.write_text(json.dumps({'nodes': nodes, 'edges': edges}))

    graph = load_network_file(filepath)

    assert graph.edge_count() == 3


def test_load_network_file_requires_edges(tmp_path):
    filepath = tmp_path / 'network.json'
    filepath.write_text(json.dumps({'nodes': []}))

    with pytest.raises(GraphConstructionError):
        load_network_file(filepath)


def test_graph_to_dict(small_network_records):
    graph = build_network(*small_network_records)
    graph.update_edge_load('gate', 'square', 250)

    data = graph_to_dict(graph)

    assert data['metadata'] == {'total_nodes': 3, 'total_edges': 3, 'destinations': ['temple']}
    gate = next(n for n in data['nodes'] if n['id'] == 'gate')
    assert gate['neighbors'] == ['square']
    edge = next(e for e in data['edges'] if e['id'] == 'gate-square')
    assert edge['current_travel_time'] == pytest.approx(15.0)
    assert edge['load_percentage'] == pytest.approx(50.0)


def test_export_graph_to_json(tmp_path, small_network_records):
    graph = build_network(*small_network_records)
    filepath = tmp_path / 'graph.json'

    export_graph_to_json(graph, filepath)

    with open(filepath, 'r') as f:
        data = json.load(f)
    assert len(data['nodes']) == 3
    assert {e['id'] for e in data['edges']} == {'gate-square', 'square-gate', 'square-temple'}


def test_export_graph_to_graphml(tmp_path, small_network_records):
    graph = build_network(*small_network_records)
    filepath = tmp_path / 'graph.graphml'

    export_graph_to_graphml(graph, filepath)

    loaded = nx.read_graphml(filepath)
    assert loaded.is_directed()
    assert loaded.number_of_nodes() == 3
    assert loaded.number_of_edges() == 3
    assert loaded.edges['gate', 'square']['id'] == 'gate-square'
    assert loaded.nodes['temple']['is_destination_of_interest'] is True
