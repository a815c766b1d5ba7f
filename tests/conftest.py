from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pytest


class FakeApiClient:
    """
    Stand-in for AdvertsApiClient. Each queued response is either a payload
    (returned), an exception instance (raised) or a zero-argument callable
    whose result is returned; callables let a test run code while the
    request is still "on the wire".
    """

    def __init__(self, *responses: Any):
        self.responses: List[Any] = list(responses)
        self.calls: List[Tuple[str, str, Optional[str]]] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def _next(self, method: str, path: str, auth_token: Optional[str]) -> Any:
        self.calls.append((method, path, auth_token))
        if not self.responses:
            raise AssertionError(f"Unexpected {method} {path}")
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        if callable(resp):
            return resp()
        return resp

    def check(self, path: str, auth_token: Optional[str] = None) -> None:
        self._next("check", path, auth_token)

    def get(self, path: str, auth_token: Optional[str] = None) -> Any:
        return self._next("get", path, auth_token)


@pytest.fixture
def fake_client():
    return FakeApiClient()


@pytest.fixture
def adverts():
    return [
        {
            "title": "VW Golf 1.6 TDI",
            "brand": "VW",
            "fuelType": "Diesel",
            "gearbox": "Manual",
            "year": 2018,
            "price": 10000,
            "minPrice": 9500,
            "maxPrice": 12000,
            "diffPriceMinPrice": 500,
            "advertId": "a1",
            "lastDifference": 0,
            "minPrice20Below": 7600,
            "minPrice25Below": 7125,
            "minPrice30Below": 6650,
            "advertCreatedAt": "2024-05-01T10:00:00Z",
        },
        {
            "title": "Audi A3 Sportback",
            "brand": "Audi",
            "fuelType": "Petrol",
            "gearbox": "Automatic",
            "year": 2020,
            "price": 18000,
            "minPrice": 18500,
            "diffPriceMinPrice": -500,
            "advertCreatedAt": "2024-05-03T08:30:00Z",
        },
        {
            "title": "Renault Clio",
            "brand": "Renault",
            "fuelType": "Petrol",
            "gearbox": "Manual",
            "year": None,
            "price": "7000",
            "advertCreatedAt": "2024-04-28T18:45:00Z",
        },
    ]
