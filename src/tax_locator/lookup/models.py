"""Value objects passed between the geocoder, the tax client and the resolver."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Union

UNIDENTIFIABLE_AREA = "an unidentifiable area"

# Geocoder component keys that may carry the locality name, most specific first.
CITY_KEYS = ("city", "town", "village", "hamlet")


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def as_query(self) -> str:
        """Render the coordinate as a geocoder query.

        Fixed-point with a space separator; the space is form-encoded to ``+``
        so the geocoder receives ``lat+lng``.
        """
        return f"{self.latitude:.7f} {self.longitude:.7f}"


@dataclass(frozen=True)
class AddressComponents:
    city: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postcode: Optional[str] = None

    @classmethod
    def from_components(cls, components: Mapping[str, Any]) -> "AddressComponents":
        """Build from the ``components`` mapping of a single geocoder result."""
        city = next((components[k] for k in CITY_KEYS if components.get(k)), None)
        country = components.get("country")
        if not country and components.get("country_code"):
            country = str(components["country_code"]).upper()
        postcode = components.get("postcode")
        return cls(
            city=city,
            county=components.get("county") or None,
            state=components.get("state") or None,
            country=country or None,
            postcode=str(postcode) if postcode else None,
        )

    def describe(self) -> str:
        """Comma-joined description of the known region fields.

        Fields are taken in the order city, county, state, country. Missing
        fields are skipped without leaving empty separators.
        """
        parts = [p for p in (self.city, self.county, self.state, self.country) if p]
        return ", ".join(parts) or UNIDENTIFIABLE_AREA


def _to_rate(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class TaxRecord:
    state_rate: float
    total_rate: Optional[float] = None
    city_rate: Optional[float] = None
    county_rate: Optional[float] = None
    zip_code: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "TaxRecord":
        """Parse one element of the sales-tax API response array."""
        state_rate = _to_rate(payload.get("state_rate"))
        zip_code = payload.get("zip_code")
        return cls(
            state_rate=state_rate if state_rate is not None else 0.0,
            total_rate=_to_rate(payload.get("total_rate")),
            city_rate=_to_rate(payload.get("city_rate")),
            county_rate=_to_rate(payload.get("county_rate")),
            zip_code=str(zip_code) if zip_code else None,
        )

    @property
    def effective_total_rate(self) -> float:
        """The record's own total rate, or the state rate when none was supplied."""
        if self.total_rate is not None:
            return self.total_rate
        return self.state_rate


@dataclass(frozen=True)
class ResolvedLocation:
    """Address components merged with the tax rates found for them."""

    city: Optional[str]
    county: Optional[str]
    state: Optional[str]
    country: Optional[str]
    zip_code: Optional[str]
    state_rate: float
    total_rate: float
    city_rate: Optional[float] = None
    county_rate: Optional[float] = None
    source: Optional[str] = None

    @classmethod
    def merge(
        cls,
        address: AddressComponents,
        record: TaxRecord,
        zip_code: Optional[str],
        source: Optional[str] = None,
    ) -> "ResolvedLocation":
        return cls(
            city=address.city,
            county=address.county,
            state=address.state,
            country=address.country,
            zip_code=zip_code,
            state_rate=record.state_rate,
            total_rate=record.effective_total_rate,
            city_rate=record.city_rate,
            county_rate=record.county_rate,
            source=source,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ResolutionSuccess:
    data: ResolvedLocation
    coordinate: Optional[Coordinate] = None

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"success": True, "data": self.data.to_dict()}


@dataclass(frozen=True)
class ResolutionFailure:
    fallback_location: str
    coordinate: Optional[Coordinate] = None

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "fallbackLocation": self.fallback_location}


ResolutionResult = Union[ResolutionSuccess, ResolutionFailure]
