from __future__ import annotations

import asyncio

import pytest

from conftest import RecordingSurface
from pokelookup.adapters.pokeapi import PokeApiClient
from pokelookup.core.domain.errors import (
    EMPTY_INPUT_MESSAGE,
    FETCH_FAILED_MESSAGE,
    NOT_FOUND_MESSAGE,
    EmptyInput,
)
from pokelookup.core.domain.models import UIPhase, UIState
from pokelookup.core.interfaces.surface import Element
from pokelookup.core.services.input_controller import InputController, normalize
from pokelookup.core.services.lookup_pipeline import LookupPipeline


def _controller(settings, fake_api, text: str) -> tuple[InputController, RecordingSurface]:
    surface = RecordingSurface(text)
    pipeline = LookupPipeline(source=PokeApiClient(settings, transport=fake_api.transport), surface=surface)
    return InputController(pipeline=pipeline), surface


@pytest.mark.parametrize(("raw", "expected"), [("  PiKaChu ", "pikachu"), ("25", "25"), ("\t\n", "")])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize("text", ["", "   ", "\t"])
def test_empty_input_never_hits_network(settings, fake_api, text):
    controller, surface = _controller(settings, fake_api, text)

    outcome = asyncio.run(controller.submit_search())

    assert isinstance(outcome.error, EmptyInput)
    assert fake_api.requests == []
    assert controller.pipeline.state == UIState.error(EMPTY_INPUT_MESSAGE)
    assert surface.texts[Element.ERROR] == "Please enter a name or ID"
    assert Element.ERROR in surface.visible


def test_query_is_normalized_before_lookup(settings, fake_api):
    controller, surface = _controller(settings, fake_api, "  PIKACHU  ")

    outcome = asyncio.run(controller.submit_search())

    assert outcome.ok
    assert outcome.query == "pikachu"
    assert fake_api.requests[0].url.path.endswith("/pikachu")
    assert surface.card.name == "Pikachu"
    assert surface.card.number == "025"


def test_unknown_name_shows_not_found(settings, fake_api):
    controller, surface = _controller(settings, fake_api, "notapokemon")

    asyncio.run(controller.submit_search())

    assert controller.pipeline.state.phase is UIPhase.ERROR
    assert surface.texts[Element.ERROR] == NOT_FOUND_MESSAGE


def test_confirm_key_submits_and_other_keys_do_not(settings, fake_api):
    controller, _ = _controller(settings, fake_api, "25")

    assert asyncio.run(controller.handle_key("a")) is None
    assert fake_api.requests == []

    outcome = asyncio.run(controller.handle_key("Enter"))
    assert outcome is not None and outcome.ok
    assert len(fake_api.requests) == 1


def test_repeated_submit_issues_a_request_each_time(settings, fake_api):
    controller, _ = _controller(settings, fake_api, "pikachu")

    asyncio.run(controller.submit_search())
    asyncio.run(controller.submit_search())

    assert len(fake_api.requests) == 2


def test_control_character_query_shows_generic_error(settings, fake_api):
    controller, surface = _controller(settings, fake_api, "pika\x01chu")

    outcome = asyncio.run(controller.submit_search())

    assert not outcome.ok
    assert controller.pipeline.state == UIState.error(FETCH_FAILED_MESSAGE)
    assert Element.SUBMIT not in surface.disabled
    assert fake_api.requests == []
