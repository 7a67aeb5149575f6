"""
gplaces - typed Google Places API client.
"""

__version__ = "0.1.0"
