import pytest

from studentenverwaltung.controller import ShellController, ShellState
from studentenverwaltung.store import StudentStore


@pytest.fixture
def run_shell(scripted_view):
    def run(inputs, store=None, end_of_input=EOFError):
        store = store if store is not None else StudentStore()
        view = scripted_view(inputs, end_of_input=end_of_input)
        controller = ShellController(store, view)
        controller.starte_app()
        return controller, store, view
    return run


def test_exit_on_six(run_shell, capsys):
    controller, _, _ = run_shell(["6"])
    assert controller.state is ShellState.EXIT
    assert "Auf Wiedersehen" in capsys.readouterr().out


def test_invalid_choice_reprompts(run_shell, capsys):
    _, _, view = run_shell(["9", "abc", "6"])
    out = capsys.readouterr().out
    assert out.count("Ungültige Auswahl") == 2
    assert view.prompts.count("Bitte Aktion wählen (1-6): ") == 3


def test_add_and_show_record(run_shell, capsys):
    _, store, _ = run_shell(["1", "Alice", "S1", "20", "CS", "6"])
    out = capsys.readouterr().out
    assert "Student Alice erfolgreich hinzugefügt." in out
    assert "Name: Alice, Matrikelnummer: S1, Alter: 20, Studiengang: CS" in out
    assert len(store) == 1


def test_input_is_stripped(run_shell):
    _, store, _ = run_shell(["1", "  Alice ", " S1 ", "20", "CS ", "6"])
    assert store.query("S1").student.name == "Alice"


def test_add_error_message_and_no_crash(run_shell, capsys):
    _, store, _ = run_shell(["1", "Alice", "S1", "zwanzig", "CS", "5", "6"])
    out = capsys.readouterr().out
    assert "Bitte ein gültiges Alter eingeben." in out
    assert "Noch keine Studenten vorhanden." in out
    assert len(store) == 0


def test_query(run_shell, filled_store, capsys):
    run_shell(["2", "S2", "2", "S9", "6"], filled_store)
    out = capsys.readouterr().out
    assert "Student Bob gefunden." in out
    assert "Kein Student mit Matrikelnummer S9 gefunden." in out


def test_update_flow(run_shell, filled_store, capsys):
    _, _, view = run_shell(["3", "S1", "21", "", "6"], filled_store)
    out = capsys.readouterr().out
    assert "Geänderte Studentendaten: Name: Alice, Matrikelnummer: S1, Alter: 21" in out
    assert filled_store.query("S1").student.major == "CS"
    assert "Neues Alter (Enter = überspringen): " in view.prompts


def test_update_without_fields(run_shell, filled_store, capsys):
    run_shell(["3", "S1", "", "", "6"], filled_store)
    assert "mindestens eine Angabe" in capsys.readouterr().out


def test_update_unknown_id_still_collects_fields(run_shell, filled_store, capsys):
    _, _, view = run_shell(["3", "S9", "30", "", "6"], filled_store)
    assert "Kein Student mit Matrikelnummer S9 gefunden." in capsys.readouterr().out
    assert view.prompts[-1] == "Bitte Aktion wählen (1-6): "


def test_delete_flow(run_shell, filled_store, capsys):
    run_shell(["4", "S1", "5", "6"], filled_store)
    out = capsys.readouterr().out
    assert "Student Alice erfolgreich gelöscht." in out
    assert "S1" not in filled_store
    assert "Bob" in out


def test_list_in_insertion_order(run_shell, filled_store, capsys):
    run_shell(["5", "6"], filled_store)
    out = capsys.readouterr().out
    assert "Alle Studenten:" in out
    assert out.index("Alice") < out.index("Bob")
    assert "Anzahl: 2" in out


def test_eof_exits_cleanly(run_shell, capsys):
    controller, _, _ = run_shell(["1", "Alice"])
    assert controller.state is ShellState.EXIT
    assert "Auf Wiedersehen" in capsys.readouterr().out


def test_ctrl_c_at_prompt_exits_cleanly(run_shell, capsys):
    controller, store, _ = run_shell(["3", "S1"], end_of_input=KeyboardInterrupt)
    assert controller.state is ShellState.EXIT
    assert "Auf Wiedersehen" in capsys.readouterr().out
    assert len(store) == 0


def test_step_walks_update_states(scripted_view, filled_store):
    controller = ShellController(filled_store, scripted_view(["3", "S1", "", "Physik", "9", "6"]))
    assert controller.state is ShellState.MENU

    assert controller.step() is ShellState.COLLECT_ID
    assert controller.state is ShellState.COLLECT_ID

    assert controller.step() is ShellState.COLLECT_UPDATE_FIELDS
    assert controller.state is ShellState.COLLECT_UPDATE_FIELDS

    assert controller.step() is ShellState.MENU
    assert filled_store.query("S1").student.major == "Physik"

    # Ungültige Auswahl bleibt im Menü.
    assert controller.step() is ShellState.MENU
    assert controller.step() is ShellState.EXIT
    assert controller.state is ShellState.EXIT


def test_step_add_goes_back_to_menu(scripted_view, store):
    controller = ShellController(store, scripted_view(["1", "Alice", "S1", "20", "CS"]))
    assert controller.step() is ShellState.COLLECT_ADD_FIELDS
    assert controller.step() is ShellState.MENU
    assert "S1" in store
