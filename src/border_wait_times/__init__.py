"""Border wait times: live feed extraction and historical aggregation."""

__version__ = "0.1.0"
