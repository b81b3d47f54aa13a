"""Core de la aplicación.

Por qué:
- Dominio, contratos y servicios sin dependencias de UI concreta.
- Los adaptadores (HTTP/HTML) y la CLI dependen del Core, nunca al revés.
"""
