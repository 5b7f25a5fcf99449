"""Lansky Ledger: bookkeeping for resale businesses."""

__version__ = "1.0.0"
