from __future__ import annotations

from typing import Callable, Iterable, List, Type

import pytest

from studentenverwaltung.store import StudentStore
from studentenverwaltung.view import ConsoleStudentView


class ScriptedView(ConsoleStudentView):
    """View mit vorgegebenen Eingaben. Am Ende der Liste wird `end_of_input` geworfen."""

    def __init__(self, inputs: Iterable[str], end_of_input: Type[BaseException] = EOFError) -> None:
        super().__init__(width=100)
        self._inputs: List[str] = list(inputs)
        self._end_of_input = end_of_input
        self.prompts: List[str] = []

    def prompt(self, frage: str) -> str:
        self.prompts.append(frage)
        if not self._inputs:
            raise self._end_of_input
        return self._inputs.pop(0)


@pytest.fixture
def scripted_view() -> Callable[..., ScriptedView]:
    """Fabrik: scripted_view(["1", "Alice", ...], end_of_input=KeyboardInterrupt)."""
    return ScriptedView


@pytest.fixture
def store() -> StudentStore:
    return StudentStore()


@pytest.fixture
def filled_store() -> StudentStore:
    s = StudentStore()
    s.add("Alice", "S1", 20, "CS")
    s.add("Bob", "S2", "22", "Mathe")
    return s
