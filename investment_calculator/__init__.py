"""Compound-growth investment projections and the API that serves them."""

__version__ = "0.1.0"
