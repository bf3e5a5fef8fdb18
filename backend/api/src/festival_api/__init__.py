"""REST API for festival seat reservations."""

__version__ = "0.1.0"
