"""HeatQuote: heat pump quotes per house. Composes config, catalog, weather, quotes and format."""

import time
from typing import Callable

import requests

from heatquote.catalog import load_heat_pumps, load_houses
from heatquote.config import Settings, load_settings
from heatquote.format import format_quotes
from heatquote.http_client import build_session
from heatquote.models import HeatPump, House, Quote
from heatquote.quotes import generate_quotes
from heatquote.weather import RetryPolicy, fetch_degree_days


class HeatQuote:
    """Quote generator for the configured house and heat pump tables."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            settings: Optional. Defaults to load_settings() (environment + .env).
            session: Optional. HTTP session for the weather API; one carrying the
                configured API key is built when omitted.
            sleep: Optional. Called with the retry delay between weather retries.
        """
        self.settings = settings or load_settings()
        self.session = session or build_session(self.settings.api_key)
        self.policy = RetryPolicy(
            max_retries=self.settings.max_retries, delay=self.settings.retry_delay
        )
        self._sleep = sleep

    def degree_days(self, location: str) -> float | None:
        return fetch_degree_days(
            location,
            self.session,
            base_url=self.settings.api_url,
            policy=self.policy,
            timeout=self.settings.timeout,
            sleep=self._sleep,
        )

    def generate(
        self,
        houses: list[House] | None = None,
        pumps: list[HeatPump] | None = None,
    ) -> list[Quote]:
        """Quotes for `houses` (default: the houses file) against `pumps` (default: the pumps file)."""
        if houses is None:
            houses = load_houses(self.settings.houses_file)
        if pumps is None:
            pumps = load_heat_pumps(self.settings.heat_pumps_file)
        return generate_quotes(houses, pumps, self.degree_days, vat_rate=self.settings.vat_rate)

    def print_display(self, quotes: list[Quote]) -> None:
        """Print rendered quotes to stdout."""
        print(format_quotes(quotes))
