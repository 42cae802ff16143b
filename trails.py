"""Fixed reference list of trails shown on the dashboard."""

TRAILS = [
    {'name': 'Mt. Tamalpais', 'lat': 37.9061, 'lon': -122.5957},
    {'name': 'Ford Ord', 'lat': 36.676, 'lon': -121.8223},
    {'name': 'Rockville Hills Regional Park', 'lat': 38.2939, 'lon': -122.0328},
    {'name': 'China Camp State Park', 'lat': 38.0258, 'lon': -122.4861},
    {'name': 'Joaquin Miller Park', 'lat': 37.8297, 'lon': -122.2042},
    {'name': 'Pacifica', 'lat': 37.6127, 'lon': -122.5065},
    {'name': 'Tamarancho', 'lat': 38.0195, 'lon': -122.6347},
    {'name': 'John Nicolas', 'lat': 37.2061, 'lon': -122.0376},
    {'name': 'Soquel Demonstration Forest', 'lat': 37.082, 'lon': -121.8505},
    {'name': 'Briones', 'lat': 37.9305, 'lon': -122.1512},
    {'name': 'Lime Ridge', 'lat': 37.9692, 'lon': -122.0009},
    {'name': 'Crockett Hills Regional Park', 'lat': 38.048, 'lon': -122.2905},
]

TRAIL_NAMES = [t['name'] for t in TRAILS]


def validate_trail(trail):
    """Raise ValueError unless trail has a name and a valid lat/lon."""
    name = (trail.get('name') or '').strip()
    if not name:
        raise ValueError('Trail name is required')
    try:
        lat = float(trail['lat'])
        lon = float(trail['lon'])
    except (KeyError, TypeError, ValueError):
        raise ValueError(f'Invalid coordinates for {name}')
    if not -90 <= lat <= 90 or not -180 <= lon <= 180:
        raise ValueError(f'Coordinates out of range for {name}: {lat},{lon}')
    return trail


def trail_bounds(trails):
    """Bounding box [[south, west], [north, east]] around all trails."""
    if not trails:
        return None
    lats = [t['lat'] for t in trails]
    lons = [t['lon'] for t in trails]
    return [[min(lats), min(lons)], [max(lats), max(lons)]]
