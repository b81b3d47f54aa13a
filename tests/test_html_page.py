from __future__ import annotations

from pokelookup.adapters.html_page import NEUTRAL_TYPE_COLOR, HtmlPageSurface, render_card_html
from pokelookup.core.domain.errors import NOT_FOUND_MESSAGE
from pokelookup.core.domain.models import CreatureCard, StatBar, TypeBadge, UIState
from pokelookup.core.interfaces.surface import Element
from pokelookup.core.services.card_builder import CardBuilder
from pokelookup.core.services.state_renderer import render_state


def _card(**overrides) -> CreatureCard:
    data = dict(
        name="Pikachu",
        number="025",
        image_url="https://img.test/25.png",
        types=[TypeBadge(raw="electric", label="Electric", color="#F8D030")],
        abilities=["Static"],
        height_m="0.4",
        weight_kg="6.0",
        base_experience=112,
        stats=[StatBar(key="hp", label="HP", value=300, percentage=300 / 255 * 100)],
    )
    data.update(overrides)
    return CreatureCard(**data)


def test_card_fragment_contains_formatted_fields(pikachu_record):
    html = render_card_html(CardBuilder().build(pikachu_record))

    assert '<h2 class="pokemon-name">Pikachu</h2>' in html
    assert '<span class="pokemon-id">#025</span>' in html
    assert "0.4 m" in html
    assert "6.0 kg" in html
    assert "Sp. Attack" in html
    assert "background-color: #F8D030" in html
    assert "official-artwork/25.png" in html


def test_unclamped_percentage_is_rendered_as_is():
    html = render_card_html(_card())
    assert "width: 117.64705882352" in html


def test_unknown_type_gets_neutral_color_and_missing_image_placeholder():
    html = render_card_html(
        _card(types=[TypeBadge(raw="shadow", label="Shadow")], image_url=None, base_experience=None)
    )
    assert f"background-color: {NEUTRAL_TYPE_COLOR}" in html
    assert "No image" in html
    assert "N/A" in html


def test_card_text_is_escaped():
    html = render_card_html(_card(name="<script>alert(1)</script>"))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_page_reflects_result_state():
    page = HtmlPageSurface(initial_query="pikachu")
    render_state(UIState.result(_card()), page)

    html = page.render_page()

    assert 'id="resultsContainer" class="results-container"' in html
    assert 'id="loading" class="loading hidden"' in html
    assert 'id="errorMessage" class="error-message hidden"' in html
    assert 'value="pikachu"' in html
    assert '<h2 class="pokemon-name">Pikachu</h2>' in html


def test_page_reflects_loading_and_error_states(tmp_path):
    page = HtmlPageSurface(initial_query="notapokemon")

    render_state(UIState.loading(), page)
    assert page.element(Element.SUBMIT).disabled
    assert 'id="searchBtn" disabled' in page.render_page()

    render_state(UIState.error(NOT_FOUND_MESSAGE), page)
    assert not page.element(Element.SUBMIT).disabled
    assert page.results_html == ""

    out = page.export_html(tmp_path / "out" / "page.html")
    html = out.read_text(encoding="utf-8")
    assert "entity not found, check the name or ID" in html
    assert 'id="resultsContainer" class="results-container hidden"' in html
