"""Resolve a coordinate to the sales tax that applies there.

The resolver chains the geocoder and the sales-tax service:

1. Reverse-geocode the coordinate (errors propagate to the caller).
2. Take address components from the first result and the first postcode
   found across all results.
3. Try each lookup strategy in order until one yields a tax record.
4. Merge the record with the address, or describe the area when no tier
   produced data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Sequence, Tuple

import requests

from ..utils.logging import get_logger
from .geocoder import DEFAULT_GEOCODER_URL, GeocoderClient, extract_components, find_postcode
from .models import (
    AddressComponents,
    Coordinate,
    ResolutionFailure,
    ResolutionResult,
    ResolutionSuccess,
    ResolvedLocation,
    TaxRecord,
)
from .tax_client import DEFAULT_SALES_TAX_URL, SalesTaxClient

if TYPE_CHECKING:
    from ..utils.config import Config

logger = get_logger(__name__)


@dataclass(frozen=True)
class LookupContext:
    """What the geocoder told us about the location."""

    address: AddressComponents
    zip_code: Optional[str]


@dataclass(frozen=True)
class LookupStrategy:
    """One fallback tier.

    ``applies`` gates the tier on the data available; ``lookup`` returns the
    record found (if any) together with the ZIP code to report alongside it.
    """

    name: str
    applies: Callable[[LookupContext], bool]
    lookup: Callable[[SalesTaxClient, LookupContext], Tuple[Optional[TaxRecord], Optional[str]]]


def _lookup_zip(client: SalesTaxClient, ctx: LookupContext) -> Tuple[Optional[TaxRecord], Optional[str]]:
    return client.lookup_by_zip(ctx.zip_code), ctx.zip_code


def _lookup_city_state(client: SalesTaxClient, ctx: LookupContext) -> Tuple[Optional[TaxRecord], Optional[str]]:
    record = client.lookup_by_city_state(ctx.address.city, ctx.address.state)
    return record, record.zip_code if record else None


ZIP_CODE_STRATEGY = LookupStrategy(
    name="zip_code",
    applies=lambda ctx: bool(ctx.zip_code),
    lookup=_lookup_zip,
)

CITY_STATE_STRATEGY = LookupStrategy(
    name="city_state",
    applies=lambda ctx: bool(ctx.address.city and ctx.address.state),
    lookup=_lookup_city_state,
)

DEFAULT_STRATEGIES: Tuple[LookupStrategy, ...] = (ZIP_CODE_STRATEGY, CITY_STATE_STRATEGY)


class LocationResolver:
    """Turn coordinates (or a place search) into a ResolutionResult."""

    def __init__(
        self,
        geocoder: GeocoderClient,
        tax_client: SalesTaxClient,
        strategies: Sequence[LookupStrategy] = DEFAULT_STRATEGIES,
    ) -> None:
        self.geocoder = geocoder
        self.tax_client = tax_client
        self.strategies = tuple(strategies)

    @classmethod
    def from_config(cls, config: "Config", session: Optional[requests.Session] = None) -> "LocationResolver":
        """Build a resolver from validated configuration.

        Credentials are checked here, once, so a missing key fails before any
        request is issued.
        """
        config.validate()
        session = session or requests.Session()
        timeout = config.get("http_timeout", 10.0)
        geocoder = GeocoderClient(
            config["geocoder_api_key"],
            base_url=config.get("geocoder_base_url") or DEFAULT_GEOCODER_URL,
            timeout_seconds=timeout,
            session=session,
        )
        tax_client = SalesTaxClient(
            config["tax_api_key"],
            base_url=config.get("tax_base_url") or DEFAULT_SALES_TAX_URL,
            timeout_seconds=timeout,
            session=session,
        )
        return cls(geocoder, tax_client)

    def resolve(self, coord: Coordinate) -> ResolutionResult:
        results = self.geocoder.reverse_geocode(coord)
        ctx = LookupContext(
            address=extract_components(results[0]),
            zip_code=find_postcode(results),
        )

        for strategy in self.strategies:
            if not strategy.applies(ctx):
                logger.debug(f"Skipping {strategy.name} lookup: not enough address data")
                continue
            record, zip_code = strategy.lookup(self.tax_client, ctx)
            if record is not None:
                logger.info(f"Sales tax found via {strategy.name} lookup for {coord.as_query()}")
                return ResolutionSuccess(
                    ResolvedLocation.merge(ctx.address, record, zip_code, source=strategy.name),
                    coordinate=coord,
                )

        fallback = ctx.address.describe()
        logger.info(f"No sales tax data for {coord.as_query()}; falling back to '{fallback}'")
        return ResolutionFailure(fallback, coordinate=coord)

    def search(self, query: str) -> Optional[ResolutionResult]:
        """Forward-geocode ``query`` and resolve the match, or None if nothing matched."""
        coord = self.geocoder.forward_geocode(query)
        if coord is None:
            return None
        return self.resolve(coord)
