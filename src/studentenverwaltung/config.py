"""
Startoptionen der Anwendung.

Die Studentenverwaltung liest keine Umgebungsvariablen und keine Dateien.
Die wenigen Einstellungen kommen als Kommandozeilen-Optionen:
- --log-level: Log-Level (Standard WARNING, damit die Konsole ruhig bleibt)
- --log-file: zusätzlich in eine Datei loggen
- --strict-age: Alter muss komplett eine Ganzzahl sein
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class Settings:
    """Einstellungen für einen Programmlauf."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    strict_age: bool = False

    @classmethod
    def from_args(cls, argv: Optional[Sequence[str]] = None) -> Settings:
        """
        Baut die Settings aus Kommandozeilen-Argumenten.
        - argv None bedeutet sys.argv[1:]
        - Ungültige Optionen beenden das Programm (argparse, Exit-Code 2)
        """
        ap = argparse.ArgumentParser(
            prog="studentenverwaltung",
            description="Interaktive Studentenverwaltung (nur im Speicher).",
        )
        ap.add_argument(
            "--log-level",
            default="WARNING",
            type=str.upper,
            choices=LOG_LEVELS,
            help="Log-Level (Standard: WARNING)",
        )
        ap.add_argument("--log-file", default=None, help="Optionale Log-Datei")
        ap.add_argument(
            "--strict-age",
            action="store_true",
            help="Alter nur als vollständige Ganzzahl akzeptieren ('20abc' wird abgelehnt)",
        )
        args = ap.parse_args(argv)
        return cls(log_level=args.log_level, log_file=args.log_file, strict_age=args.strict_age)
