"""Input handling for the search field.

The controller reads the field, normalizes it and hands the query to the
pipeline. Click and confirm-key both end up in `submit_search()`; there is
no debouncing and no double-submit guard.
"""

from __future__ import annotations

from dataclasses import dataclass

from pokelookup.core.domain.errors import EmptyInput
from pokelookup.core.interfaces.surface import Element
from pokelookup.core.services.lookup_pipeline import LookupOutcome, LookupPipeline


def normalize(text: str) -> str:
    return text.strip().lower()


@dataclass
class InputController:
    pipeline: LookupPipeline
    confirm_key: str = "Enter"

    async def submit_search(self) -> LookupOutcome:
        query = normalize(self.pipeline.surface.get_text(Element.INPUT))
        if not query:
            return self.pipeline.fail(EmptyInput())
        return await self.pipeline.lookup(query)

    async def handle_key(self, key: str) -> LookupOutcome | None:
        """Keypress on the input field; only the confirm key submits."""

        if key != self.confirm_key:
            return None
        return await self.submit_search()
