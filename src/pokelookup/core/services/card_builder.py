"""Record-to-card transformation.

Everything here is pure and synchronous: the pipeline hands over a validated
`CreatureRecord` and gets back a `CreatureCard` with every value already
formatted for display. Lookup tables come from `DisplayTables` so the render
layers never hard-code colors or stat names.
"""

from __future__ import annotations

from pokelookup.core.domain.display_tables import DisplayTables
from pokelookup.core.domain.models import (
    CreatureCard,
    CreatureRecord,
    StatBar,
    TypeBadge,
)


def capitalize_first(value: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""

    return value[:1].upper() + value[1:]


def pad_identifier(identifier: int) -> str:
    """Left-pad with zeros to three characters. Longer values are kept whole."""

    return str(identifier).rjust(3, "0")


def format_tenths(raw: int) -> str:
    return f"{raw / 10:.1f}"


def pick_image(record: CreatureRecord) -> str | None:
    artwork = record.sprites.other.official_artwork
    if artwork is not None and artwork.front_default:
        return artwork.front_default
    return record.sprites.front_default or None


class CardBuilder:
    """Builds display cards using a fixed set of lookup tables."""

    def __init__(self, tables: DisplayTables | None = None) -> None:
        self._tables = tables or DisplayTables()

    @property
    def tables(self) -> DisplayTables:
        return self._tables

    def stat_label(self, key: str) -> str:
        return self._tables.stat_labels.get(key) or capitalize_first(key)

    def stat_percentage(self, value: int) -> float:
        # Unclamped: values outside 0..max_stat give percentages outside 0..100.
        return value / self._tables.max_stat * 100

    def type_badge(self, raw: str) -> TypeBadge:
        return TypeBadge(
            raw=raw,
            label=capitalize_first(raw),
            color=self._tables.type_colors.get(raw),
        )

    def build(self, record: CreatureRecord) -> CreatureCard:
        return CreatureCard(
            name=capitalize_first(record.name),
            number=pad_identifier(record.id),
            image_url=pick_image(record),
            types=[self.type_badge(slot.type.name) for slot in record.types],
            abilities=[capitalize_first(slot.ability.name) for slot in record.abilities],
            height_m=format_tenths(record.height),
            weight_kg=format_tenths(record.weight),
            base_experience=record.base_experience,
            stats=[
                StatBar(
                    key=entry.stat.name,
                    label=self.stat_label(entry.stat.name),
                    value=entry.base_stat,
                    percentage=self.stat_percentage(entry.base_stat),
                )
                for entry in record.stats
            ],
        )
