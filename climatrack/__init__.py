"""ClimaTrack: NASA POWER daily point data with day-stepping fallback."""

__version__ = "1.0.0"
