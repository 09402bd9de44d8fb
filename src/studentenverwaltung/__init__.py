"""
studentenverwaltung package

Dieses Paket implementiert eine Studentenverwaltung für die Konsole.
Alle Datensätze liegen nur im Speicher.

Schichtenarchitektur:
- domain.py: Student, Fehlerarten, Ergebnisobjekt, Alters-Parsing
- store.py: StudentStore mit CRUD
- view.py: ASCII-Ausgabe
- controller.py: Zustandsautomat der Menü-Schleife
- config.py / logging_config.py: Startoptionen und Logging
- main.py: Einstiegspunkt
"""

from .domain import ErrorKind, Result, Student, parse_age
from .store import StudentStore

__all__ = ["ErrorKind", "Result", "Student", "StudentStore", "parse_age"]
