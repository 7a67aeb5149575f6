"""
Constants for Google Places API client.
"""

VERSION = "0.1.0"

API_BASE_URL = "https://maps.googleapis.com/maps/api/place"
AUTOCOMPLETE_PATH = "autocomplete/json"

# Timeouts (in seconds)
DEFAULT_TIMEOUT = 10

# Radius limits (in meters)
MIN_RADIUS = 1
MAX_RADIUS = 50000

CONTENT_TYPE_JSON = "application/json"

# Left unescaped in query strings, the API expects them literally
QUERY_SAFE_CHARS = ",:|@"

CANCELLED_MESSAGE = "The operation was canceled."
