from __future__ import annotations

import logging


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure global logging for the whole application.
    The CLI passes `AppSettings.log_level`; unknown names fall back to WARNING.
    """
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    logging.basicConfig(
        level=resolved,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from overly chatty libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
