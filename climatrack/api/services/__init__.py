"""
External services used by ClimaTrack.

├── NASAPowerClient  - NASA POWER daily point API (T2M, PRECTOTCORR, WS10M)
└── CityGeocoder     - Fixed city table, free text -> coordinate

ATTRIBUTION:
"Data obtained from NASA Langley Research Center POWER Project
funded through the NASA Earth Science Directorate Applied Science Program."
"""

from .geocoding import CityGeocoder
from .nasa_power import NASAPowerClient, NASAPowerConfig

__all__ = ["CityGeocoder", "NASAPowerClient", "NASAPowerConfig"]
