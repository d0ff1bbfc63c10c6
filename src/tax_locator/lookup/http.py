"""Shared GET-and-decode helper for the third-party API clients."""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from ..utils.logging import get_logger
from .errors import NetworkError

logger = get_logger(__name__)


def get_json(
    session: requests.Session,
    url: str,
    *,
    params: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 10.0,
    description: str = "request",
) -> Any:
    """Issue a GET and return the decoded JSON body.

    Transport failures, timeouts, HTTP errors and non-JSON bodies all raise
    NetworkError. ``description`` names the call in error messages; callers
    must keep credentials out of it.
    """
    logger.debug(f"GET {url} ({description})")
    try:
        resp = session.get(url, params=params, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise NetworkError(f"{description} failed: {e}") from e

    if not 200 <= resp.status_code < 300:
        raise NetworkError(f"{description} failed: HTTP {resp.status_code}")

    try:
        return resp.json()
    except ValueError as e:
        raise NetworkError(f"{description} returned an invalid JSON body") from e
