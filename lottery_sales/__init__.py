"""Lottery Sales — weekly ticket-sales collection, reporting and export."""

__version__ = "1.0.0"
