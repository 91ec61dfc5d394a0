"""checkherald: alert annotation formatter for Graphite threshold checks."""

__version__ = "0.3.0"
