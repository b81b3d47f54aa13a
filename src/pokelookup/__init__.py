"""pokelookup: búsqueda de Pokémon por nombre o id con tarjeta de resumen."""

__version__ = "0.1.0"
