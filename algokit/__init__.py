"""Classic graph, string, geometry and data-structure algorithms."""

__version__ = "0.1.0"