"""
Record Store

Der StudentStore hält alle Studierenden im Speicher und bietet CRUD an.
Es gibt keine Persistenz. Die Lebensdauer ist die des Prozesses.

- Reihenfolge der Einfügung bleibt erhalten.
- Suche nur über die id (exakter String-Vergleich).
- Jede Operation liefert ein Result, es wird nichts geworfen.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, List, Optional

from .domain import ErrorKind, Result, Student, is_blank, parse_age

logger = logging.getLogger(__name__)


class StudentStore:
    """
    Verzeichnis der Studierenden.

    Aufgaben:
    - Hinzufügen, Abfragen, Ändern, Löschen
    - Auflisten in Einfügereihenfolge
    - Prüfen der Eingaben (nur Vorhandensein und Alter)
    """

    def __init__(self, strict_age: bool = False) -> None:
        """
        Erstellt einen leeren Store.

        - strict_age: Alter muss komplett eine Ganzzahl sein ("20abc" wird abgelehnt)
        """
        self._students: List[Student] = []
        self._strict_age = strict_age

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student_id: object) -> bool:
        return self._find_index(student_id) is not None

    def add(self, name: Any, id: Any, age: Any, major: Any) -> Result:
        """
        Legt einen Studierenden an.
        Reihenfolge der Prüfungen:
        1) Alle Felder vorhanden
        2) id noch frei
        3) Alter ist eine positive Ganzzahl
        """
        if any(is_blank(v) for v in (name, id, age, major)):
            return self._reject(
                "add", ErrorKind.ValidationError,
                "Bitte alle Angaben vollständig eingeben (Name, Matrikelnummer, Alter, Studiengang).",
            )

        if self._find_index(id) is not None:
            return self._reject(
                "add", ErrorKind.DuplicateIdError, f"Matrikelnummer {id} existiert bereits."
            )

        age_num = parse_age(age, strict=self._strict_age)
        if age_num is None:
            return self._reject("add", ErrorKind.InvalidAgeError, "Bitte ein gültiges Alter eingeben.")

        student = Student(name=name, id=id, age=age_num, major=major)
        self._students.append(student)
        logger.info("Student %s (%s) angelegt, Anzahl: %d", id, name, len(self._students))
        return Result.ok(f"Student {name} erfolgreich hinzugefügt.", student=student)

    def query(self, id: Any) -> Result:
        """Sucht einen Studierenden über die id. Der Store wird nicht verändert."""
        if is_blank(id):
            return self._reject("query", ErrorKind.ValidationError, "Bitte eine Matrikelnummer eingeben.")

        idx = self._find_index(id)
        if idx is None:
            return self._not_found("query", id)

        student = self._students[idx]
        logger.debug("Student %s abgefragt", id)
        return Result.ok(f"Student {student.name} gefunden.", student=student)

    def update(self, id: Any, age: Any = None, major: Any = None) -> Result:
        """
        Ändert Alter und/oder Studiengang.
        - Leere Felder werden übersprungen.
        - Mindestens ein Feld muss gesetzt sein.
        - Bei ungültigem Alter bleibt der Datensatz unverändert.
        """
        if is_blank(id):
            return self._reject("update", ErrorKind.ValidationError, "Bitte eine Matrikelnummer eingeben.")

        idx = self._find_index(id)
        if idx is None:
            return self._not_found("update", id)

        if is_blank(age) and is_blank(major):
            return self._reject(
                "update", ErrorKind.NoFieldsProvidedError,
                "Bitte mindestens eine Angabe zum Ändern machen (Alter oder Studiengang).",
            )

        changes = {}
        if not is_blank(age):
            age_num = parse_age(age, strict=self._strict_age)
            if age_num is None:
                return self._reject("update", ErrorKind.InvalidAgeError, "Bitte ein gültiges Alter eingeben.")
            changes["age"] = age_num

        if not is_blank(major):
            changes["major"] = major

        updated = replace(self._students[idx], **changes)
        self._students[idx] = updated
        logger.info("Student %s geändert: %s", id, ", ".join(sorted(changes)))
        return Result.ok(f"Daten von {updated.name} erfolgreich geändert.", student=updated)

    def delete(self, id: Any) -> Result:
        """
        Löscht einen Studierenden.
        Der Name wird für die Bestätigung zurückgegeben.
        """
        if is_blank(id):
            return self._reject("delete", ErrorKind.ValidationError, "Bitte eine Matrikelnummer eingeben.")

        idx = self._find_index(id)
        if idx is None:
            return self._not_found("delete", id)

        removed = self._students.pop(idx)
        logger.info("Student %s (%s) gelöscht, Anzahl: %d", id, removed.name, len(self._students))
        return Result.ok(
            f"Student {removed.name} erfolgreich gelöscht.",
            student=removed,
            deleted_name=removed.name,
        )

    def list_all(self) -> List[Student]:
        """
        Gibt alle Studierenden in Einfügereihenfolge zurück.
        Es ist eine Kopie, der Store bleibt unberührt.
        """
        return list(self._students)

    def _find_index(self, id: Any) -> Optional[int]:
        """Lineare Suche, exakter Vergleich der id."""
        for i, s in enumerate(self._students):
            if s.id == id:
                return i
        return None

    def _not_found(self, operation: str, id: Any) -> Result:
        return self._reject(
            operation, ErrorKind.NotFoundError, f"Kein Student mit Matrikelnummer {id} gefunden."
        )

    def _reject(self, operation: str, error: ErrorKind, message: str) -> Result:
        logger.info("%s abgelehnt: %s", operation, error.value)
        return Result.fail(error, message)
