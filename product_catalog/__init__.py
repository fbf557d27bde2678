"""
Product Catalog API

In-memory product catalog served over HTTP with FastAPI.
"""

__version__ = "1.0.0"
