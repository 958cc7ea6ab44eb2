"""HTTP status simulator with multi-destination log dispatch."""

__version__ = "0.1.0"
