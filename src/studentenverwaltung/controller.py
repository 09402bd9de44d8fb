"""
Controller layer

Der ShellController steuert die interaktive Konsole. Er verbindet Store und View.

Die Menü-Schleife ist ein Zustandsautomat:
- MENU -> Auswahl lesen
- COLLECT_ADD_FIELDS -> Name, Matrikelnummer, Alter, Studiengang lesen
- COLLECT_ID -> Matrikelnummer für Abfragen/Ändern/Löschen lesen
- COLLECT_UPDATE_FIELDS -> neues Alter und neuen Studiengang lesen
- EXIT -> Ende

Der Controller prüft selbst nichts. Alle Prüfungen macht der Store.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .domain import Result
from .store import StudentStore
from .view import ConsoleStudentView

logger = logging.getLogger(__name__)


class ShellState(Enum):
    """Zustände der Menü-Schleife."""
    MENU = "MENU"
    COLLECT_ADD_FIELDS = "COLLECT_ADD_FIELDS"
    COLLECT_ID = "COLLECT_ID"
    COLLECT_UPDATE_FIELDS = "COLLECT_UPDATE_FIELDS"
    EXIT = "EXIT"


class IdAction(Enum):
    """Aktion, für die im Zustand COLLECT_ID die Matrikelnummer gelesen wird."""
    QUERY = "query"
    UPDATE = "update"
    DELETE = "delete"


class ShellController:
    """
    Hauptcontroller für die Konsole.

    Aufgaben:
    - Zustandsautomat ausführen
    - Aufrufe an Store und View
    - Ergebnis-Meldungen ausgeben
    """

    def __init__(self, store: StudentStore, view: ConsoleStudentView) -> None:
        """
        Erstellt den Controller.

        - store: Datensätze und Prüfungen
        - view: Ein-/Ausgabe
        """
        self._store = store
        self._view = view
        self._state = ShellState.MENU
        self._action: Optional[IdAction] = None
        self._pending_id: Optional[str] = None

    @property
    def state(self) -> ShellState:
        return self._state

    def starte_app(self) -> None:
        """
        Startet die Schleife.
        Läuft bis EXIT erreicht ist (Auswahl 6, Dateiende oder Strg+C).
        """
        self._state = ShellState.MENU
        while self._state is not ShellState.EXIT:
            try:
                self.step()
            except (EOFError, KeyboardInterrupt):
                # Eingabe beendet.
                self._beenden()
                self._transition(ShellState.EXIT)

    def step(self) -> ShellState:
        """Führt genau einen Zustand aus, wechselt in den Folgezustand und liefert ihn."""
        if self._state is ShellState.MENU:
            next_state = self._menu()
        elif self._state is ShellState.COLLECT_ADD_FIELDS:
            next_state = self._collect_add_fields()
        elif self._state is ShellState.COLLECT_ID:
            next_state = self._collect_id()
        elif self._state is ShellState.COLLECT_UPDATE_FIELDS:
            next_state = self._collect_update_fields()
        else:
            next_state = ShellState.EXIT

        self._transition(next_state)
        return next_state

    def _menu(self) -> ShellState:
        self._view.render_menue()
        choice = self._view.prompt("Bitte Aktion wählen (1-6): ").strip()

        if choice == "1":
            return ShellState.COLLECT_ADD_FIELDS
        elif choice == "2":
            self._action = IdAction.QUERY
            return ShellState.COLLECT_ID
        elif choice == "3":
            self._action = IdAction.UPDATE
            return ShellState.COLLECT_ID
        elif choice == "4":
            self._action = IdAction.DELETE
            return ShellState.COLLECT_ID
        elif choice == "5":
            self._view.render_liste(self._store.list_all())
            return ShellState.MENU
        elif choice == "6":
            self._beenden()
            return ShellState.EXIT

        self._view.show_message("Ungültige Auswahl, bitte erneut eingeben.")
        return ShellState.MENU

    def _collect_add_fields(self) -> ShellState:
        name = self._view.prompt("Name: ").strip()
        student_id = self._view.prompt("Matrikelnummer: ").strip()
        age = self._view.prompt("Alter: ").strip()
        major = self._view.prompt("Studiengang: ").strip()

        result = self._store.add(name, student_id, age, major)
        self._show_result(result)
        return ShellState.MENU

    def _collect_id(self) -> ShellState:
        student_id = self._view.prompt("Matrikelnummer: ").strip()

        if self._action is IdAction.UPDATE:
            self._pending_id = student_id
            return ShellState.COLLECT_UPDATE_FIELDS

        if self._action is IdAction.QUERY:
            self._show_result(self._store.query(student_id))
        elif self._action is IdAction.DELETE:
            self._show_result(self._store.delete(student_id), show_student=False)

        self._action = None
        return ShellState.MENU

    def _collect_update_fields(self) -> ShellState:
        # Leere Eingabe bedeutet: Feld nicht ändern.
        age = self._view.prompt("Neues Alter (Enter = überspringen): ").strip()
        major = self._view.prompt("Neuer Studiengang (Enter = überspringen): ").strip()

        result = self._store.update(self._pending_id, age, major)
        self._show_result(result, titel="Geänderte Studentendaten")

        self._pending_id = None
        self._action = None
        return ShellState.MENU

    def _show_result(
        self,
        result: Result,
        titel: str = "Studentendaten",
        show_student: bool = True
    ) -> None:
        """Meldung ausgeben, bei Erfolg optional den Datensatz."""
        self._view.show_message(result.message)
        if result.success and show_student and result.student is not None:
            self._view.render_student(result.student, titel)

    def _transition(self, next_state: ShellState) -> None:
        if next_state is not self._state:
            logger.debug("Zustand %s -> %s", self._state.value, next_state.value)
        self._state = next_state

    def _beenden(self) -> None:
        """Verabschiedung."""
        self._view.show_message("Danke für die Nutzung der Studentenverwaltung. Auf Wiedersehen!")
