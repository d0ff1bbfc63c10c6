"""Error types raised by the geocoding and sales-tax lookups."""


class TaxLookupError(Exception):
    """Base class for all lookup failures surfaced to the caller."""


class ConfigError(TaxLookupError):
    """Required settings (usually API credentials) are missing or invalid."""


class NetworkError(TaxLookupError):
    """An HTTP request did not succeed or returned an unusable body."""


class NotFoundError(TaxLookupError):
    """The geocoder returned no results for the requested location."""
