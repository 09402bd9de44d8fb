"""
UI layer für die Console

Diese View zeigt Menü, Meldungen und Datensätze in der Konsole.
- Text formatieren und ausgeben
- Liste als ASCII-Tabelle bauen
- Eingaben lesen
"""

from __future__ import annotations

import shutil
from typing import List, Sequence

from .domain import Student


class ConsoleStudentView:
    """
    View für die Konsole.

    Die Breite wird automatisch ermittelt anhand der Breite des aktuellen Fensters.
    """

    def __init__(self, width: int | None = None) -> None:
        """
        Erstellt die View.
        - Wenn width None ist, wird die Terminal-Breite genutzt.
        - Es gibt eine Mindestbreite.
        """
        if width is None:
            width = shutil.get_terminal_size(fallback=(100, 24)).columns

        self._width = max(80, width)

    def render_menue(self) -> None:
        """Zeigt das Hauptmenü."""
        print()
        print("╔═══════════════════════════════════════╗")
        print("║       STUDENTENVERWALTUNG             ║")
        print("╠═══════════════════════════════════════╣")
        print("║  1) Student hinzufügen                ║")
        print("║  2) Student abfragen                  ║")
        print("║  3) Student ändern                    ║")
        print("║  4) Student löschen                   ║")
        print("║  5) Alle Studenten anzeigen           ║")
        print("║  6) Beenden                           ║")
        print("╚═══════════════════════════════════════╝")

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        EOFError wird an den Aufrufer weitergegeben.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def render_student(self, student: Student, titel: str = "Studentendaten") -> None:
        """Zeigt einen einzelnen Datensatz."""
        print(f"{titel}: {self.format_student(student)}")

    def render_liste(self, students: Sequence[Student]) -> None:
        """
        Zeigt alle Datensätze.
        Leere Liste ist kein Fehler, es gibt dann nur einen Hinweis.
        """
        if not students:
            print("Noch keine Studenten vorhanden.")
            return

        print("Alle Studenten:")
        print(self._build_table(students))

    def format_student(self, student: Student) -> str:
        """Eine Zeile pro Datensatz."""
        return (
            f"Name: {student.name}, Matrikelnummer: {student.id}, "
            f"Alter: {student.age}, Studiengang: {student.major}"
        )

    def _build_table(self, students: Sequence[Student]) -> str:
        """
        Baut die Tabelle als Text.

        Spalten:
        - Name
        - Matrikelnummer
        - Alter
        - Studiengang
        """
        cols = [
            ("Name", 20),
            ("Matrikelnummer", 14),
            ("Alter", 5),
            ("Studiengang", 20)
        ]

        sep_eq = "+" + "═" * (self._width - 2) + "+"
        header = " │ ".join(name.ljust(width) for name, width in cols)
        lines: List[str] = [sep_eq, self._row(header)]

        # Trennlinie zwischen Kopf und Daten
        lines.append(self._row("─┼─".join("─" * width for _, width in cols)))

        for s in students:
            name_str = self._cut(s.name, cols[0][1]).ljust(cols[0][1])
            id_str = self._cut(s.id, cols[1][1]).ljust(cols[1][1])
            age_str = str(s.age).rjust(cols[2][1])
            major_str = self._cut(s.major, cols[3][1]).ljust(cols[3][1])
            lines.append(self._row(f"{name_str} │ {id_str} │ {age_str} │ {major_str}"))

        lines.append(sep_eq)
        lines.append(f"Anzahl: {len(students)}")
        return "\n".join(lines)

    def _row(self, text: str) -> str:
        """
        Baut eine Zeile mit Rahmen.
        - Zu langer Text wird gekürzt.
        - Zu kurzer Text wird aufgefüllt.
        """
        inner = self._width - 2
        content = text[:inner].ljust(inner)
        return "│" + content + "│"

    def _cut(self, value: object, width: int) -> str:
        """Kürzt zu lange Werte mit '…'."""
        s = str(value)
        if len(s) <= width:
            return s
        return s[:width - 1] + "…"
