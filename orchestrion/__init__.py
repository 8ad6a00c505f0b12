"""Command-line options and external device primitives for Orchestrion."""

__version__ = "1.0.0"