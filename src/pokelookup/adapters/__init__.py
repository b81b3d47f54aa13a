"""Adaptadores de infraestructura (HTTP, HTML).

Cada módulo implementa un contrato de `core.interfaces`.
"""

from pokelookup.adapters.html_page import HtmlPageSurface
from pokelookup.adapters.pokeapi import PokeApiClient

__all__ = ["HtmlPageSurface", "PokeApiClient"]
