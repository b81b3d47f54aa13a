"""Lookup-and-render orchestration.

One `lookup()` call is one user search: reset the view, show the loading
indicator, fetch once, then land in either ERROR or RESULT. Failures from the
source are caught here and never escape to the caller.

Concurrent calls are allowed (nothing stops a second search while one is in
flight). Each call takes a sequence token and only the outcome carrying the
latest token is applied to the view; older outcomes are returned to the
caller with `applied=False`.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable

from pokelookup.core.domain.errors import LookupFailure
from pokelookup.core.domain.models import CreatureCard, UIState
from pokelookup.core.interfaces.source import CreatureSource
from pokelookup.core.interfaces.surface import DisplaySurface
from pokelookup.core.services.card_builder import CardBuilder
from pokelookup.core.services.state_renderer import render_state

log = logging.getLogger("pokelookup.pipeline")


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (tracing, progress)."""

    state_changed: Callable[[UIState], None] | None = None


@dataclass(frozen=True)
class LookupOutcome:
    """Result-or-error value of a single search."""

    token: int
    query: str
    card: CreatureCard | None = None
    error: LookupFailure | None = None
    applied: bool = True

    @property
    def ok(self) -> bool:
        return self.error is None and self.card is not None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error is not None else None


@dataclass
class LookupPipeline:
    source: CreatureSource
    surface: DisplaySurface
    builder: CardBuilder = field(default_factory=CardBuilder)
    hooks: PipelineHooks = field(default_factory=PipelineHooks)

    def __post_init__(self) -> None:
        self._tokens = itertools.count(1)
        self._latest = 0
        self._state = UIState.idle()

    @property
    def state(self) -> UIState:
        return self._state

    @property
    def latest_token(self) -> int:
        return self._latest

    def _issue_token(self) -> int:
        self._latest = next(self._tokens)
        return self._latest

    def _apply(self, state: UIState) -> None:
        self._state = state
        render_state(state, self.surface)
        if self.hooks.state_changed:
            self.hooks.state_changed(state)

    def reset(self) -> None:
        """Back to IDLE; any in-flight lookup becomes stale."""

        self._issue_token()
        self._apply(UIState.idle())

    def fail(self, error: LookupFailure, *, query: str = "") -> LookupOutcome:
        """Surface a failure that happened before any network call."""

        token = self._issue_token()
        self._apply(UIState.error(error.message))
        return LookupOutcome(token=token, query=query, error=error)

    async def lookup(self, query: str) -> LookupOutcome:
        token = self._issue_token()
        self._apply(UIState.loading())

        try:
            record = await self.source.fetch(query)
            card = self.builder.build(record)
        except LookupFailure as exc:
            log.warning("Lookup for %r failed: %s", query, exc)
            outcome = LookupOutcome(token=token, query=query, error=exc)
        else:
            outcome = LookupOutcome(token=token, query=query, card=card)

        if token != self._latest:
            log.debug("Discarding stale outcome for %r (token %d < %d)", query, token, self._latest)
            return LookupOutcome(
                token=outcome.token,
                query=outcome.query,
                card=outcome.card,
                error=outcome.error,
                applied=False,
            )

        if outcome.card is not None:
            self._apply(UIState.result(outcome.card))
        else:
            assert outcome.error is not None
            self._apply(UIState.error(outcome.error.message))
        return outcome
