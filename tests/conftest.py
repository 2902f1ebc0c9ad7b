import json
from http import HTTPStatus

import pytest
import requests

from heatquote.models import CostItem, HeatPump, House

API_URL = "https://weather.test/v1/weather"


def make_response(status: int, payload=None, *, body: bytes | None = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    try:
        r.reason = HTTPStatus(status).phrase
    except ValueError:
        r.reason = "Unknown"
    r.url = API_URL
    if body is None:
        body = json.dumps(payload).encode() if payload is not None else b""
    r._content = body
    r.headers["Content-Type"] = "application/json"
    return r


class FakeSession:
    """Stands in for requests.Session; hands out queued responses or raises queued errors."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class Sleeper:
    def __init__(self):
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture
def sleeper():
    return Sleeper()


def _pump(capacity: int, design_cost: int) -> HeatPump:
    return HeatPump(
        label=f"{capacity}kW Package",
        output_capacity=capacity,
        costs=(
            CostItem(
                f"Design & Supply of your Air Source Heat Pump System Components ({capacity}kW)",
                design_cost,
            ),
            CostItem("Installation of your Air Source Heat Pump and Hot Water Cylinder", 2900),
            CostItem("Supply & Installation of your Homely Smart Thermostat", 150),
            CostItem("Supply & Installation of a new Consumer Unit", 300),
            CostItem("MCS System Commissioning & HIES Insurance-backed Warranty", 1648),
        ),
    )


@pytest.fixture
def pumps():
    return [_pump(5, 3947), _pump(8, 4216), _pump(12, 5138), _pump(16, 5421)]


@pytest.fixture
def houses():
    return [
        House("4cb3820a-7bf6-47f9-8afc-3adcac8752cd", 125, 101, 1.3, "Severn Valley (Filton)"),
        House("e21a3149-b88c-40e9-86fd-c94a6b93cb78", 92, 88, 1.1, "W Pennines (Ringway)"),
        House("2191bf41-ce1e-427d-85c3-88d5a44680ae", 126, 131, 1.8, "North-Eastern (Leeming)"),
        House("3d8f19b0-3886-452d-a335-f3a2e7d9f5a5", 109, 90, 1.2, "Thames Valley (Heathrow)"),
        House("b0ec94b6-ca15-4fb2-9ec7-7017f43080f4", 163, 111, 1.7, "W Scotland (Abbotsinch)"),
    ]
