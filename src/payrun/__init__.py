"""Periodic pay run engine: pay dates, gross pay and pay dispatch."""

__version__ = "1.0.0"
