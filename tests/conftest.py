from __future__ import annotations

import pytest

from ticker.pairs import UNISWAP_V2
from ticker.quote_engine import QuoteEngine


class _Call:
    def __init__(self, router: "FakeRouter", amount_in: int, path: list[str]):
        self._router = router
        self._amount_in = amount_in
        self._path = path

    def call(self):
        return self._router.respond(self._amount_in, self._path)


class _Functions:
    def __init__(self, router: "FakeRouter"):
        self._router = router

    def getAmountsOut(self, amount_in: int, path: list[str]) -> _Call:
        return _Call(self._router, amount_in, path)


class FakeRouter:
    """Stands in for a web3 contract: router.functions.getAmountsOut(...).call()"""

    def __init__(self, responses=None, clock: "FakeClock | None" = None):
        # keyed by (token_in, token_out) address; value is a list or an exception
        self.responses = dict(responses or {})
        self.clock = clock
        self.calls: list[tuple[int, list[str]]] = []
        self.call_times: list[float] = []
        self.functions = _Functions(self)

    def respond(self, amount_in: int, path: list[str]):
        self.calls.append((amount_in, list(path)))
        if self.clock is not None:
            self.call_times.append(self.clock.now)
        result = self.responses.get((path[0], path[-1]), [amount_in, 1, amount_in])
        if isinstance(result, Exception):
            raise result
        return result


class FakeClock:
    """sleep() advances time; stops start() after max_sleeps"""

    def __init__(self, max_sleeps: int):
        self.now = 0.0
        self.sleeps: list[float] = []
        self.max_sleeps = max_sleeps

    def sleep(self, seconds: float) -> None:
        if len(self.sleeps) >= self.max_sleeps:
            raise StopPolling()
        self.sleeps.append(seconds)
        self.now += seconds


class StopPolling(Exception):
    pass


@pytest.fixture
def fake_router() -> FakeRouter:
    return FakeRouter()


@pytest.fixture
def engine(fake_router: FakeRouter) -> QuoteEngine:
    return QuoteEngine(fake_router, UNISWAP_V2)
