"""
Kachi Dham Router Test Suite

Test Organization:
- test_graph_model.py: NetworkGraph nodes, edges and congestion updates
- test_graph_utils.py: Network construction, input schemas and export
- test_path_finder.py: Shortest, alternative and nearest-destination routes
- test_traffic_allocator.py: Vehicle distribution plans
- test_main.py: Command line front end and settings

To run all tests:
    python -m pytest tests/
"""
