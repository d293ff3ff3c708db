from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import pytest

from isspass._transport import HttpResponse
from isspass.config import IssPassConfig


@dataclass
class FakeServices:
    """Transport double answering by URL prefix and recording every call."""

    routes: dict[str, HttpResponse | Exception] = field(default_factory=dict)
    calls: list[tuple[str, dict[str, str]]] = field(default_factory=list)

    def reply(self, prefix: str, status: int, text: str) -> None:
        self.routes[prefix] = HttpResponse(status=status, text=text)

    def fail(self, prefix: str, error: Exception) -> None:
        self.routes[prefix] = error

    def called(self, prefix: str) -> int:
        return sum(1 for url, _ in self.calls if url.startswith(prefix))

    async def get(self, url: str, params: Mapping[str, str] | None = None) -> HttpResponse:
        self.calls.append((url, dict(params or {})))
        for prefix, outcome in self.routes.items():
            if url.startswith(prefix):
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        raise AssertionError(f"unexpected request to {url}")


@pytest.fixture
def services() -> FakeServices:
    return FakeServices()


@pytest.fixture
def config() -> IssPassConfig:
    return IssPassConfig()
