"""OpenCage geocoding client (reverse and forward lookups)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from ..utils.logging import get_logger
from .errors import ConfigError, NotFoundError
from .http import get_json
from .models import AddressComponents, Coordinate

logger = get_logger(__name__)

DEFAULT_GEOCODER_URL = "https://api.opencagedata.com/geocode/v1/json"


class GeocoderClient:
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_GEOCODER_URL,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    def _require_key(self) -> str:
        if not self._api_key:
            raise ConfigError("Geocoder API key is missing (OPENCAGE_API_KEY)")
        return self._api_key

    def _query(self, q: str, description: str) -> List[Dict[str, Any]]:
        key = self._require_key()
        payload = get_json(
            self._session,
            self._base_url,
            params={"q": q, "key": key},
            timeout=self._timeout_seconds,
            description=description,
        )
        if not isinstance(payload, dict):
            return []
        return payload.get("results") or []

    def reverse_geocode(self, coord: Coordinate) -> List[Dict[str, Any]]:
        """Return every candidate result for ``coord``, most precise first.

        Raises NotFoundError when the geocoder has nothing for the location.
        """
        results = self._query(coord.as_query(), "Reverse geocoding request")
        if not results:
            raise NotFoundError("Could not identify the selected location.")
        logger.debug(f"Reverse geocoding {coord.as_query()} returned {len(results)} result(s)")
        return results

    def forward_geocode(self, query: str) -> Optional[Coordinate]:
        """Resolve a free-text place name to the coordinate of its best match."""
        # Credentials are checked before the blank-query short circuit.
        self._require_key()
        if not query or not query.strip():
            return None

        results = self._query(query.strip(), "Forward geocoding request")
        for result in results:
            geometry = result.get("geometry") or {}
            try:
                return Coordinate(float(geometry["lat"]), float(geometry["lng"]))
            except (KeyError, TypeError, ValueError):
                continue

        logger.info(f"No geocoder match for '{query}'")
        return None


def extract_components(result: Dict[str, Any]) -> AddressComponents:
    return AddressComponents.from_components(result.get("components") or {})


def find_postcode(results: List[Dict[str, Any]]) -> Optional[str]:
    """First postcode carried by any result.

    The most precise result does not always carry a postal code, so every
    candidate is scanned in order.
    """
    for result in results:
        postcode = (result.get("components") or {}).get("postcode")
        if postcode:
            return str(postcode)
    return None
