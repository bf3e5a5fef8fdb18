"""Shared models, services and utilities for the festival reservation API."""

__version__ = "0.1.0"
