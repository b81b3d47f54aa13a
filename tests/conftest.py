# tests/conftest.py
from __future__ import annotations

import copy
import json
import pathlib
from typing import Any, Callable

import httpx
import pytest

from pokelookup.core.config import AppSettings
from pokelookup.core.domain.models import CreatureCard, CreatureRecord
from pokelookup.core.interfaces.surface import Element

FIXTURES = pathlib.Path(__file__).parent / "fixtures"
BASE_URL = "https://pokeapi.test/api/v2/pokemon"


class RecordingSurface:
    """DisplaySurface that keeps element state and a log of every call."""

    def __init__(self, text: str = "") -> None:
        self.texts: dict[Element, str] = {Element.INPUT: text}
        self.visible: set[Element] = {Element.INPUT, Element.SUBMIT}
        self.disabled: set[Element] = set()
        self.card: CreatureCard | None = None
        self.calls: list[tuple[str, Any]] = []

    def get_text(self, element: Element) -> str:
        self.calls.append(("get_text", element))
        return self.texts.get(element, "")

    def set_text(self, element: Element, text: str) -> None:
        self.calls.append(("set_text", (element, text)))
        self.texts[element] = text

    def show(self, element: Element) -> None:
        self.calls.append(("show", element))
        self.visible.add(element)

    def hide(self, element: Element) -> None:
        self.calls.append(("hide", element))
        self.visible.discard(element)
        if element is Element.RESULTS:
            self.card = None

    def set_enabled(self, element: Element, enabled: bool) -> None:
        self.calls.append(("set_enabled", (element, enabled)))
        if enabled:
            self.disabled.discard(element)
        else:
            self.disabled.add(element)

    def render_card(self, card: CreatureCard) -> None:
        self.calls.append(("render_card", card.name))
        self.card = card


@pytest.fixture
def pikachu_payload() -> dict[str, Any]:
    return json.loads((FIXTURES / "pikachu.json").read_text(encoding="utf-8"))


@pytest.fixture
def pikachu_record(pikachu_payload: dict[str, Any]) -> CreatureRecord:
    return CreatureRecord.model_validate(pikachu_payload)


@pytest.fixture
def make_payload(pikachu_payload: dict[str, Any]) -> Callable[..., dict[str, Any]]:
    """Copy of the pikachu payload with top-level fields overridden."""

    def _make(**overrides: Any) -> dict[str, Any]:
        data = copy.deepcopy(pikachu_payload)
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(base_url=BASE_URL, http_timeout_seconds=5.0)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


class FakeApi:
    """Routes `<BASE_URL>/<query>` to canned responses and records requests."""

    def __init__(self) -> None:
        self.routes: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []

    def route(self, query: str, status: int = 200, **body: Any) -> "FakeApi":
        # body: json=..., text=... or content=... (passed to httpx.Response)
        self.routes[query] = {"status_code": status, **body}
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        query = request.url.path.rsplit("/", 1)[-1]
        canned = self.routes.get(query)
        if canned is None:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(**canned)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def fake_api(pikachu_payload: dict[str, Any]) -> FakeApi:
    return FakeApi().route("pikachu", json=pikachu_payload).route("25", json=pikachu_payload)
