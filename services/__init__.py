import requests

# Reuse HTTP connections to external APIs (connection pooling)
http_session = requests.Session()
http_session.headers.update({'User-Agent': 'TrailRideability/1.0'})
