"""API Ninjas sales-tax client."""

from __future__ import annotations

from typing import Dict, Optional

import requests

from ..utils.logging import get_logger
from .errors import ConfigError
from .http import get_json
from .models import TaxRecord

logger = get_logger(__name__)

DEFAULT_SALES_TAX_URL = "https://api.api-ninjas.com/v1/salestax"


class SalesTaxClient:
    """Look up sales-tax rates by ZIP code or by city and state.

    An empty response is a normal outcome and yields ``None``. Only transport
    and HTTP failures raise.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_SALES_TAX_URL,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    def _lookup(self, params: Dict[str, str], description: str) -> Optional[TaxRecord]:
        if not self._api_key:
            raise ConfigError("Sales tax API key is missing (API_NINJAS_KEY)")

        payload = get_json(
            self._session,
            self._base_url,
            params=params,
            headers={"X-Api-Key": self._api_key},
            timeout=self._timeout_seconds,
            description=description,
        )
        if not isinstance(payload, list) or not payload:
            logger.debug(f"{description}: no records")
            return None
        return TaxRecord.from_api(payload[0])

    def lookup_by_zip(self, zip_code: str) -> Optional[TaxRecord]:
        return self._lookup(
            {"zip_code": zip_code},
            f"Sales tax request for ZIP {zip_code}",
        )

    def lookup_by_city_state(self, city: str, state: str) -> Optional[TaxRecord]:
        return self._lookup(
            {"city": city, "state": state},
            f"Sales tax request for {city}, {state}",
        )
