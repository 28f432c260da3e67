"""Periodic interest payments into an on-chain vault."""

__version__ = "1.0.0"
