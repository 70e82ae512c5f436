"""Frontend awareness scanner: component inventory and structure snapshots."""

__version__ = "0.1.0"
