"""NASA POWER API Client."""

from .nasa_power_client import NASAPowerClient, NASAPowerConfig

__all__ = ["NASAPowerClient", "NASAPowerConfig"]
