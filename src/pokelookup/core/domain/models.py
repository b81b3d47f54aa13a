"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validamos el payload externo en el borde: si la API devuelve algo que no
  encaja con `CreatureRecord`, lo sabemos antes de renderizar nada.
- Los modelos son inmutables (frozen): el registro pertenece al servicio
  externo y la tarjeta es una vista derivada.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class NamedResource(_ApiModel):
    """Referencia `{name, url}` tal como la expone la API."""

    name: str = Field(..., min_length=1)
    url: str | None = None


class SpriteSet(_ApiModel):
    front_default: str | None = None


class OtherSprites(_ApiModel):
    official_artwork: SpriteSet | None = Field(
        default=None,
        alias="official-artwork",
        description="Artwork oficial (imagen preferida para la tarjeta).",
    )


class Sprites(_ApiModel):
    front_default: str | None = Field(
        default=None,
        description="Sprite frontal básico; fallback cuando no hay artwork oficial.",
    )
    other: OtherSprites = Field(default_factory=OtherSprites)


class TypeSlot(_ApiModel):
    slot: int | None = None
    type: NamedResource


class AbilitySlot(_ApiModel):
    slot: int | None = None
    is_hidden: bool = False
    ability: NamedResource


class StatEntry(_ApiModel):
    base_stat: int
    effort: int | None = None
    stat: NamedResource


class CreatureRecord(_ApiModel):
    """Respuesta del servicio externo para una criatura.

    Solo se declaran los campos que consume la tarjeta; el resto se ignora.
    """

    id: int = Field(..., description="Identificador numérico (positivo).")
    name: str = Field(..., min_length=1)
    sprites: Sprites = Field(default_factory=Sprites)
    types: list[TypeSlot] = Field(default_factory=list)
    abilities: list[AbilitySlot] = Field(default_factory=list)
    height: int = Field(..., description="Altura en decímetros.")
    weight: int = Field(..., description="Peso en hectogramos.")
    base_experience: int | None = None
    stats: list[StatEntry] = Field(default_factory=list)


class TypeBadge(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: str
    label: str
    color: str | None = Field(
        default=None,
        description="Color de la etiqueta; None si el tipo no está en la tabla.",
    )


class StatBar(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    value: int
    percentage: float = Field(
        ...,
        description="value / 255 * 100, sin recortar a 0..100.",
    )


class CreatureCard(BaseModel):
    """Tarjeta lista para presentar (valores ya formateados)."""

    model_config = ConfigDict(frozen=True)

    name: str
    number: str = Field(..., description="Identificador con padding a 3 dígitos.")
    image_url: str | None = None
    types: list[TypeBadge] = Field(default_factory=list)
    abilities: list[str] = Field(default_factory=list)
    height_m: str
    weight_kg: str
    base_experience: int | None = None
    stats: list[StatBar] = Field(default_factory=list)


class UIPhase(str, Enum):
    """Modos de presentación mutuamente excluyentes."""

    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    RESULT = "result"


class UIState(BaseModel):
    """Estado de la vista: exactamente una fase a la vez.

    Usar los constructores (`idle`, `loading`, `error`, `result`) en vez de
    instanciar a mano; el validador rechaza combinaciones incoherentes.
    """

    model_config = ConfigDict(frozen=True)

    phase: UIPhase = UIPhase.IDLE
    message: str | None = None
    card: CreatureCard | None = None

    @model_validator(mode="after")
    def _check_payload(self) -> "UIState":
        if (self.phase is UIPhase.ERROR) != (self.message is not None):
            raise ValueError("message is required for ERROR and forbidden otherwise")
        if (self.phase is UIPhase.RESULT) != (self.card is not None):
            raise ValueError("card is required for RESULT and forbidden otherwise")
        return self

    @classmethod
    def idle(cls) -> "UIState":
        return cls(phase=UIPhase.IDLE)

    @classmethod
    def loading(cls) -> "UIState":
        return cls(phase=UIPhase.LOADING)

    @classmethod
    def error(cls, message: str) -> "UIState":
        return cls(phase=UIPhase.ERROR, message=message)

    @classmethod
    def result(cls, card: CreatureCard) -> "UIState":
        return cls(phase=UIPhase.RESULT, card=card)
