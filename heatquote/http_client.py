"""Shared HTTP client: one session carrying the weather API key header."""

import requests


def build_session(api_key: str) -> requests.Session:
    """Session reused for every weather request; the key goes out as `x-api-key`."""
    session = requests.Session()
    session.headers.update({"x-api-key": api_key, "Accept": "application/json"})
    return session
