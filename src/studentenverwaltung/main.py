"""
Entry point für die Studentenverwaltung.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .config import Settings
from .controller import ShellController
from .logging_config import setup_logging
from .store import StudentStore
from .view import ConsoleStudentView

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Optionen lesen
    - Logging einrichten
    - Komponenten erstellen
    - Controller starten
    """
    settings = Settings.from_args(argv)

    try:
        setup_logging(settings.log_level, settings.log_file)

        # Bausteine der App erstellen.
        store = StudentStore(strict_age=settings.strict_age)
        view = ConsoleStudentView()
        controller = ShellController(store, view)

        logger.info("Studentenverwaltung gestartet (strict_age=%s)", settings.strict_age)
        controller.starte_app()

    except KeyboardInterrupt:
        # Sauberer Abbruch per Strg+C.
        print("\nAnwendung beendet.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.debug("Unerwarteter Fehler", exc_info=True)
        print(f"\nFEHLER: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
