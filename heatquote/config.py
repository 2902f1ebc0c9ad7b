"""Process configuration read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"

DEFAULT_API_URL = "https://063qqrtqth.execute-api.eu-west-2.amazonaws.com/v1/weather"
DEFAULT_VAT_RATE = 0.05
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 1.0  # seconds
DEFAULT_TIMEOUT = 10.0  # seconds

# Used as estimated heat loss when no weather data could be fetched
DEFAULT_HEAT_LOSS = 29710.8


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    api_key: str = ""
    vat_rate: float = DEFAULT_VAT_RATE
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    timeout: float = DEFAULT_TIMEOUT
    houses_file: Path = DATA_DIR / "houses.json"
    heat_pumps_file: Path = DATA_DIR / "heat-pumps.json"


def _number(env: dict, name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if not value >= 0:
        raise ConfigError(f"{name} must not be negative, got {raw!r}")
    return value


def load_settings(env: dict | None = None) -> Settings:
    """Build Settings from `env`, defaulting to os.environ (run.py loads .env into it)."""
    if env is None:
        env = dict(os.environ)

    return Settings(
        api_url=env.get("WEATHER_API_URL") or DEFAULT_API_URL,
        api_key=env.get("WEATHER_API_KEY") or env.get("API_KEY") or "",
        vat_rate=_number(env, "VAT_RATE", DEFAULT_VAT_RATE, float),
        max_retries=_number(env, "WEATHER_MAX_RETRIES", DEFAULT_MAX_RETRIES, int),
        retry_delay=_number(env, "WEATHER_RETRY_DELAY", DEFAULT_RETRY_DELAY, float),
        timeout=_number(env, "WEATHER_TIMEOUT", DEFAULT_TIMEOUT, float),
        houses_file=Path(env["HOUSES_FILE"]) if env.get("HOUSES_FILE") else DATA_DIR / "houses.json",
        heat_pumps_file=(
            Path(env["HEAT_PUMPS_FILE"])
            if env.get("HEAT_PUMPS_FILE")
            else DATA_DIR / "heat-pumps.json"
        ),
    )
