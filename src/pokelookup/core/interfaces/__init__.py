"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from pokelookup.core.interfaces.source import CreatureSource
from pokelookup.core.interfaces.surface import DisplaySurface, Element

__all__ = ["CreatureSource", "DisplaySurface", "Element"]
