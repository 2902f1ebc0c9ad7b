"""Fetch degree-days for a design region from the weather API, retrying server errors."""

import json
import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, TypeVar
from urllib.parse import quote, urlencode

import requests

from heatquote.config import DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAY, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Fixed-delay retry of server-side (5xx) failures."""

    max_retries: int = DEFAULT_MAX_RETRIES
    delay: float = DEFAULT_RETRY_DELAY

    def is_retryable(self, error: Exception) -> bool:
        if not isinstance(error, requests.HTTPError) or error.response is None:
            return False
        return 500 <= error.response.status_code < 600


def with_retry(
    request_fn: Callable[[], T],
    policy: RetryPolicy,
    *,
    label: str = "request",
    sleep: Callable[[float], None] = time.sleep,
) -> Callable[[], T]:
    """
    Wrap `request_fn` so retryable errors are retried up to `policy.max_retries`
    times, waiting `policy.delay` seconds before each retry. Non-retryable errors,
    and the last error once retries run out, are re-raised.
    """

    def attempt(retries_left: int) -> T:
        try:
            return request_fn()
        except Exception as e:
            if retries_left <= 0 or not policy.is_retryable(e):
                raise
        retry_number = policy.max_retries - retries_left + 1
        logger.info(
            "Retrying request to %s (attempt %d/%d)", label, retry_number, policy.max_retries
        )
        sleep(policy.delay)
        return attempt(retries_left - 1)

    return lambda: attempt(policy.max_retries)


def _raw_degree_days(payload: Any) -> Any:
    location = payload.get("location") if isinstance(payload, dict) else None
    return location.get("degreeDays") if isinstance(location, dict) else None


def parse_degree_days(payload: Any) -> float | None:
    """
    Pull `location.degreeDays` out of an untrusted payload. Numbers and numeric
    strings are accepted; the result must be finite and > 0, otherwise None.
    """
    raw = _raw_degree_days(payload)
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    elif isinstance(raw, (int, float)):
        value = float(raw)
    else:
        return None

    if not math.isfinite(value) or value <= 0:
        return None
    return value


def weather_url(base_url: str, location: str) -> str:
    """GET url for a location, spaces encoded as %20 rather than '+'."""
    query = urlencode({"location": location}, quote_via=quote, safe="()!*'~")
    return f"{base_url}?{query}"


def fetch_degree_days(
    location: str,
    session: requests.Session,
    *,
    base_url: str,
    policy: RetryPolicy | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    sleep: Callable[[float], None] = time.sleep,
) -> float | None:
    """
    Degree-days for `location`. Returns None when the API cannot be reached, answers
    with an error (5xx after retries, 4xx at once) or sends an unusable degreeDays.
    """
    policy = policy or RetryPolicy()
    url = weather_url(base_url, location)

    def get_weather() -> Any:
        r = session.get(url, timeout=timeout)
        r.raise_for_status()
        return r.json()

    try:
        payload = with_retry(get_weather, policy, label=url, sleep=sleep)()
    except Exception as e:
        logger.error("Error fetching weather data for %s: %s", location, e)
        return None

    degree_days = parse_degree_days(payload)
    if degree_days is None:
        logger.warning(
            "Invalid or missing degreeDays for %s: %r\n%s",
            location,
            _raw_degree_days(payload),
            json.dumps(payload, indent=2, default=str),
        )
        return None

    logger.debug("degreeDays for %s: %s", location, degree_days)
    return degree_days
