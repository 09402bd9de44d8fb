"""
Logging-Konfiguration.

setup_logging richtet den Root-Logger genau einmal ein:
- Konsole (stderr), damit die Ausgabe der Shell auf stdout sauber bleibt
- optional eine Datei
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional


def setup_logging(level: str = "WARNING", logfile: Optional[str] = None) -> None:
    """
    Konfiguriert den Root-Logger.

    Hat der Root-Logger schon Handler (z.B. in Tests), passiert nichts.

    - level: Name des Levels, Groß/Klein egal. Unbekannt -> WARNING.
    - logfile: Pfad zur Log-Datei, relativ zum aktuellen Verzeichnis.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Datei zuerst öffnen. Schlägt das fehl, bleibt der Root-Logger unverändert.
    handlers: List[logging.Handler] = []
    if logfile:
        log_path = Path(logfile).resolve()
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    handlers.insert(0, logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
