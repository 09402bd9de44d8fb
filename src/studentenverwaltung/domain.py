"""
Domain beinhaltet den Datensatz, die Fehlerarten und das Ergebnisobjekt

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder Konsolen-Logik.

- Student ist eine unveränderliche Dataclass.
- Fehler werden nicht geworfen, sondern als Result zurückgegeben.
- Das Alter wird tolerant geparst (führende Ziffern zählen), optional streng.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


# Führende Ganzzahl: Leerzeichen, optionales Vorzeichen, Ziffern.
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_STRICT_INT = re.compile(r"[+-]?[0-9]+")


class ErrorKind(Enum):
    """Mögliche Fehlerarten der Store-Operationen."""
    ValidationError = "ValidationError"
    DuplicateIdError = "DuplicateIdError"
    InvalidAgeError = "InvalidAgeError"
    NotFoundError = "NotFoundError"
    NoFieldsProvidedError = "NoFieldsProvidedError"


@dataclass(slots=True, frozen=True)
class Student:
    """
    Ein Studierender im Verzeichnis.
    - id ist eindeutig im Store.
    - age ist immer eine positive Ganzzahl.
    Änderungen laufen nur über den Store (dataclasses.replace).
    """
    name: str
    id: str
    age: int
    major: str


@dataclass(slots=True, frozen=True)
class Result:
    """
    Ergebnis einer Store-Operation.

    - success: True bei Erfolg
    - message: Text für die Ausgabe
    - error: Fehlerart, nur bei Misserfolg gesetzt
    - student: betroffener Datensatz (add, query, update, delete)
    - deleted_name: Name des gelöschten Datensatzes
    """
    success: bool
    message: str
    error: Optional[ErrorKind] = None
    student: Optional[Student] = None
    deleted_name: Optional[str] = None

    @classmethod
    def ok(
        cls,
        message: str,
        student: Optional[Student] = None,
        deleted_name: Optional[str] = None
    ) -> Result:
        """Erfolgreiches Ergebnis."""
        return cls(True, message, None, student, deleted_name)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> Result:
        """Fehlgeschlagenes Ergebnis mit Fehlerart."""
        return cls(False, message, error)


def is_blank(value: Any) -> bool:
    """
    Prüft auf fehlenden Wert.
    - None ist leer.
    - Ein String ist leer, wenn nach strip() nichts übrig bleibt.
    - Alle anderen Werte (auch 0) gelten als vorhanden.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_age(raw: Any, strict: bool = False) -> Optional[int]:
    """
    Parst ein Alter.

    Tolerant (Standard):
    - int bleibt int
    - float wird Richtung 0 abgeschnitten (20.9 -> 20)
    - String: führende Ganzzahl zählt ("20abc" -> 20, "20.5" -> 20)

    Streng:
    - String muss komplett eine Ganzzahl sein
    - float muss ganzzahlig sein

    Rückgabe ist None, wenn kein positives Alter herauskommt.
    """
    # bool ist eine Unterklasse von int.
    if isinstance(raw, bool):
        return None

    value: Optional[int] = None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        if strict and not raw.is_integer():
            return None
        value = int(raw)
    elif isinstance(raw, str):
        if strict:
            s = raw.strip()
            if _STRICT_INT.fullmatch(s):
                value = int(s)
        else:
            m = _LEADING_INT.match(raw)
            if m:
                value = int(m.group(1))

    if value is None or value <= 0:
        return None
    return value
