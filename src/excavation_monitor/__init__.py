"""Excavation pit monitoring layout validation (GB 50497-2019)."""

__version__ = "0.1.0"
