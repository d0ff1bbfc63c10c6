"""Lookup module entry point: geocoding, sales-tax clients and the resolver."""

from .errors import ConfigError, NetworkError, NotFoundError, TaxLookupError
from .models import (
    AddressComponents,
    Coordinate,
    ResolutionFailure,
    ResolutionResult,
    ResolutionSuccess,
    ResolvedLocation,
    TaxRecord,
)
from .geocoder import GeocoderClient
from .tax_client import SalesTaxClient
from .resolver import DEFAULT_STRATEGIES, LocationResolver, LookupStrategy

__all__ = [
    "AddressComponents",
    "ConfigError",
    "Coordinate",
    "DEFAULT_STRATEGIES",
    "GeocoderClient",
    "LocationResolver",
    "LookupStrategy",
    "NetworkError",
    "NotFoundError",
    "ResolutionFailure",
    "ResolutionResult",
    "ResolutionSuccess",
    "ResolvedLocation",
    "SalesTaxClient",
    "TaxLookupError",
    "TaxRecord",
]
