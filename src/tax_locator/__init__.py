"""
Tax Locator - Sales Tax Lookup by Location

A small CLI tool and library that resolves a coordinate or a place name to
the applicable sales-tax rate by chaining a geocoding API with a sales-tax
API, falling back to a readable area description when no rate is available.
"""

__version__ = "0.1.0"

# Import main modules for CLI functionality
from . import lookup
from . import utils

__all__ = ["lookup", "utils"]
