"""High Level Video landing page backend: brief relay and adaptive media presenter."""

__version__ = "1.0.0"
