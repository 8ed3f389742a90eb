"""Data synchronization client for the bus fleet-operations backend."""

__version__ = "0.1.0"
