"""Data models and rules for an SSIX wallet front end: nodes, address book, connections, outputs, optimization and dialog helpers."""

__version__ = "0.1.0"