"""Kachi Dham road network: entry points, intersections and temple gates."""

# Nodes represent entry points, intersections and destinations
KACHI_DHAM_NODES = [
    # City entry points
    {'id': 'city_center', 'name': 'City Center', 'category': 'entry', 'latitude': 30.7333, 'longitude': 79.0667},
    {'id': 'north_gate', 'name': 'Northern Gate', 'category': 'entry', 'latitude': 30.7400, 'longitude': 79.0600},
    {'id': 'south_colony', 'name': 'South Colony', 'category': 'entry', 'latitude': 30.7200, 'longitude': 79.0650},
    {'id': 'east_entrance', 'name': 'Eastern Entrance', 'category': 'entry', 'latitude': 30.7350, 'longitude': 79.0750},
    {'id': 'west_junction', 'name': 'Western Junction', 'category': 'entry', 'latitude': 30.7300, 'longitude': 79.0600},

    # Major intersections
    {'id': 'market_square', 'name': 'Market Square', 'category': 'intersection', 'latitude': 30.7350, 'longitude': 79.0670},
    {'id': 'river_crossing', 'name': 'River Crossing', 'category': 'intersection', 'latitude': 30.7360, 'longitude': 79.0690},
    {'id': 'hill_view', 'name': 'Hill View Junction', 'category': 'intersection', 'latitude': 30.7400, 'longitude': 79.0700},
    {'id': 'forest_path', 'name': 'Forest Path Junction', 'category': 'intersection', 'latitude': 30.7380, 'longitude': 79.0720},
    {'id': 'lake_view', 'name': 'Lake View Junction', 'category': 'intersection', 'latitude': 30.7200, 'longitude': 79.0650},
    {'id': 'old_bridge', 'name': 'Old Bridge Junction', 'category': 'intersection', 'latitude': 30.7250, 'longitude': 79.0670},

    # Destinations
    {'id': 'temple_main', 'name': 'Kachi Dham Temple Main Entrance', 'category': 'destination',
     'latitude': 30.7370, 'longitude': 79.0710, 'is_destination_of_interest': True},
    {'id': 'temple_east', 'name': 'Kachi Dham Temple East Gate', 'category': 'destination',
     'latitude': 30.7375, 'longitude': 79.0730, 'is_destination_of_interest': True},
    {'id': 'temple_west', 'name': 'Kachi Dham Temple West Gate', 'category': 'destination',
     'latitude': 30.7365, 'longitude': 79.0700, 'is_destination_of_interest': True},
    {'id': 'industrial_area', 'name': 'Industrial Area', 'category': 'destination', 'latitude': 30.7250, 'longitude': 79.0600},
    {'id': 'bus_terminal', 'name': 'Bus Terminal', 'category': 'destination', 'latitude': 30.7320, 'longitude': 79.0680},
]

# Road segments (bidirectional unless stated otherwise)
KACHI_DHAM_EDGES = [
    # City Center routes
    {'from': 'city_center', 'to': 'market_square', 'distance': 1.2, 'travel_time': 10, 'capacity': 500, 'speed_limit': 40, 'road_class': 'main'},
    {'from': 'city_center', 'to': 'west_junction', 'distance': 0.8, 'travel_time': 7, 'capacity': 600, 'speed_limit': 50, 'road_class': 'main'},

    # Northern routes
    {'from': 'north_gate', 'to': 'hill_view', 'distance': 1.5, 'travel_time': 12, 'capacity': 400, 'speed_limit': 40, 'road_class': 'main'},
    {'from': 'hill_view', 'to': 'forest_path', 'distance': 1.0, 'travel_time': 8, 'capacity': 350, 'speed_limit': 35, 'road_class': 'secondary'},

    # Southern routes
    {'from': 'south_colony', 'to': 'lake_view', 'distance': 0.9, 'travel_time': 7, 'capacity': 450, 'speed_limit': 45, 'road_class': 'main'},
    {'from': 'lake_view', 'to': 'old_bridge', 'distance': 1.1, 'travel_time': 9, 'capacity': 400, 'speed_limit': 40, 'road_class': 'secondary'},

    # Eastern routes
    {'from': 'east_entrance', 'to': 'forest_path', 'distance': 1.3, 'travel_time': 11, 'capacity': 350, 'speed_limit': 35, 'road_class': 'secondary'},

    # Western routes
    {'from': 'west_junction', 'to': 'industrial_area', 'distance': 1.4, 'travel_time': 12, 'capacity': 600, 'speed_limit': 50, 'road_class': 'main'},

    # Internal connections
    {'from': 'market_square', 'to': 'river_crossing', 'distance': 0.6, 'travel_time': 5, 'capacity': 450, 'speed_limit': 40, 'road_class': 'main'},
    {'from': 'river_crossing', 'to': 'temple_west', 'distance': 0.5, 'travel_time': 6, 'capacity': 300, 'speed_limit': 30, 'road_class': 'temple'},
    {'from': 'forest_path', 'to': 'temple_east', 'distance': 0.4, 'travel_time': 5, 'capacity': 250, 'speed_limit': 25, 'road_class': 'temple'},
    {'from': 'old_bridge', 'to': 'market_square', 'distance': 1.0, 'travel_time': 9, 'capacity': 400, 'speed_limit': 35, 'road_class': 'secondary'},

    # Temple interconnections
    {'from': 'temple_main', 'to': 'temple_east', 'distance': 0.3, 'travel_time': 4, 'capacity': 200, 'speed_limit': 20, 'road_class': 'temple'},
    {'from': 'temple_main', 'to': 'temple_west', 'distance': 0.3, 'travel_time': 4, 'capacity': 200, 'speed_limit': 20, 'road_class': 'temple'},

    # Additional connections
    {'from': 'market_square', 'to': 'bus_terminal', 'distance': 0.5, 'travel_time': 5, 'capacity': 500, 'speed_limit': 40, 'road_class': 'main'},
    {'from': 'west_junction', 'to': 'market_square', 'distance': 0.9, 'travel_time': 8, 'capacity': 450, 'speed_limit': 40, 'road_class': 'main'},
    {'from': 'river_crossing', 'to': 'hill_view', 'distance': 0.8, 'travel_time': 7, 'capacity': 350, 'speed_limit': 35, 'road_class': 'secondary'},
    {'from': 'forest_path', 'to': 'river_crossing', 'distance': 0.7, 'travel_time': 6, 'capacity': 300, 'speed_limit': 30, 'road_class': 'secondary'},
]
