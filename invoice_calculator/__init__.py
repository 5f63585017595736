"""Fetch invoices, total their line items and publish the result as UI state."""

__version__ = "1.0.0"
