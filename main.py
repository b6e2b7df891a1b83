#!/usr/bin/env python3
"""
Kachi Dham Router - command line front end for the road network routing engine.

Builds the network once, applies the requested query and prints the result
as JSON on stdout.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from config import RoutingConfig, get_settings
from graph_manager import (
    GraphError,
    NetworkGraph,
    build_kachi_dham_network,
    export_graph_to_graphml,
    export_graph_to_json,
    load_network_file,
)
from graph_manager.graph_utils import edge_to_dict, node_to_dict
from routing import PathFinder, TrafficAllocator
from utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Kachi Dham Router - congestion-aware routing and traffic distribution'
    )
    parser.add_argument(
        '--network',
        type=str,
        default=None,
        help='JSON network definition with "nodes" and "edges" (default: bundled Kachi Dham network)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (default: ROUTING_LOG_LEVEL or INFO)'
    )
    parser.add_argument(
        '--load',
        nargs=3,
        action='append',
        metavar=('FROM', 'TO', 'LOAD'),
        default=[],
        help='Apply a traffic load to an edge before running the command (repeatable)'
    )

    commands = parser.add_subparsers(dest='command', required=True)

    path = commands.add_parser('path', help='Fastest route between two nodes')
    path.add_argument('start')
    path.add_argument('end')

    alternatives = commands.add_parser('alternatives', help='Distinct alternative routes')
    alternatives.add_argument('start')
    alternatives.add_argument('end')
    alternatives.add_argument('-k', type=int, default=None, help='Maximum number of routes')

    distribute = commands.add_parser('distribute', help='Split vehicles across alternative routes')
    distribute.add_argument('start')
    distribute.add_argument('end')
    distribute.add_argument('vehicles', type=int)
    distribute.add_argument('-n', '--num-paths', type=int, default=None, help='Candidate routes')

    nearest = commands.add_parser('nearest', help='Fastest route to the nearest temple gate')
    nearest.add_argument('start')

    nodes = commands.add_parser('nodes', help='List nodes with their outgoing connections')
    nodes.add_argument('--destinations', action='store_true', help='Only temple gates and other destinations')

    edges = commands.add_parser('edges', help='List edges with their current congestion')
    edges.add_argument('--from-node', default=None, help='Only edges leaving this node')

    export = commands.add_parser('export', help='Export the network to .json or .graphml')
    export.add_argument('output')

    return parser


def run(args: argparse.Namespace, graph: NetworkGraph, config: RoutingConfig) -> dict:
    """Execute one command against the graph and return its JSON payload."""
    for from_node, to_node, load in args.load:
        graph.update_edge_load(from_node, to_node, float(load))

    finder = PathFinder(graph, config)

    if args.command == 'path':
        return finder.find_shortest_path(args.start, args.end).to_dict()

    if args.command == 'alternatives':
        paths = finder.find_alternative_paths(args.start, args.end, args.k)
        return {'count': len(paths), 'paths': [path.to_dict() for path in paths]}

    if args.command == 'distribute':
        allocator = TrafficAllocator(graph, config, path_finder=finder)
        return allocator.distribute_traffic(args.start, args.end, args.vehicles, args.num_paths).to_dict()

    if args.command == 'nearest':
        return finder.find_nearest_destination(args.start).to_dict()

    if args.command == 'nodes':
        nodes = [
            node_to_dict(node) for node in graph.nodes.values()
            if not args.destinations or node.is_destination_of_interest
        ]
        return {'count': len(nodes), 'nodes': nodes}

    if args.command == 'edges':
        edges = [
            edge_to_dict(edge) for edge in graph.edges.values()
            if args.from_node is None or edge.from_node == args.from_node
        ]
        return {'count': len(edges), 'edges': edges}

    if args.command == 'export':
        if args.output.endswith('.graphml'):
            export_graph_to_graphml(graph, args.output)
        else:
            export_graph_to_json(graph, args.output)
        return {'exported': args.output}

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the routing CLI."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(args.log_level or settings.log_level, settings.log_dir)

    try:
        network_file = args.network or settings.network_file
        graph = load_network_file(network_file) if network_file else build_kachi_dham_network()
        result = run(args, graph, settings.routing_config())
    except GraphError as e:
        logger.error(f"Routing failed: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid request: {e}")
        return 2
    except OSError as e:
        logger.error(f"File access failed: {e}")
        return 2

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
