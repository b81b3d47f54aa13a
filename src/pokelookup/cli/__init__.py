"""CLI (Typer + Rich): la superficie de terminal del buscador."""
