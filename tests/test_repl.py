"""
Tests for the REPL: parser, completer and command dispatch.
"""

import builtins

from prompt_toolkit.document import Document

from worktravel.core.models import Context
from worktravel.core.screen import TodoScreen
from worktravel.repl.completer import create_completer
from worktravel.repl.main import execute_command, plain_prompt
from worktravel.repl.parser import parse_command


def run(screen, line):
    return execute_command(parse_command(line), screen)


# --- parser ---


def test_parse_quoted_text():
    result = parse_command('add "Book the hotel"')
    assert result.command == "add"
    assert result.args == ["Book the hotel"]
    assert result.text == "Book the hotel"


def test_parse_unquoted_text_and_flags():
    result = parse_command("ADD Buy milk")
    assert result.command == "add"
    assert result.text == "Buy milk"

    result = parse_command("rm 2 --yes")
    assert result.args == ["2"]
    assert result.flags == {"yes": True}


def test_parse_unclosed_quote_falls_back():
    result = parse_command("add don't forget")
    assert result.text == "don't forget"


def test_parse_empty():
    assert parse_command("   ").command == ""


def test_parse_add_keeps_text_verbatim():
    """add takes everything after the command word, flags and quotes included."""
    assert parse_command("add Fix the --force option").text == "Fix the --force option"
    assert parse_command('add Read "Dune" again').text == 'Read "Dune" again'
    assert parse_command("add Gate  B12   boarding").text == "Gate  B12   boarding"
    assert parse_command("add --yes").flags == {}
    assert parse_command('add "Quoted" and "more"').text == '"Quoted" and "more"'


def test_parse_boolean_flag_never_takes_value():
    result = parse_command("rm --yes 2")
    assert result.flags == {"yes": True}
    assert result.args == ["2"]


# --- completer ---


def test_command_completion():
    completer = create_completer()
    completions = list(completer.get_completions(Document("tr", cursor_position=2), None))
    assert [c.text for c in completions] == ["travel"]


def test_mode_completion():
    completer = create_completer()
    doc = Document("mode ", cursor_position=5)
    assert [c.text for c in completer.get_completions(doc, None)] == ["work", "travel"]


def test_row_completion(store):
    screen = TodoScreen(store)
    store.add_item("Write slides")
    store.add_item("Email Sam")

    completer = create_completer(screen)
    doc = Document("done ", cursor_position=5)
    completions = list(completer.get_completions(doc, None))

    assert [c.text for c in completions] == ["1", "2"]


# --- dispatch ---


def test_add_ls_and_switch(store, capsys):
    screen = TodoScreen(store)

    assert run(screen, "add Write slides") is True
    assert run(screen, "travel") is True
    assert plain_prompt(screen) == "travel> "
    assert run(screen, 'add "Book hotel"') is True
    assert run(screen, "ls") is True

    assert store.count(Context.WORK) == 1
    assert store.count(Context.TRAVEL) == 1
    assert "Book hotel" in capsys.readouterr().out


def test_done_toggles_by_row(store):
    screen = TodoScreen(store)
    run(screen, "add Pack charger")

    run(screen, "done 1")
    assert next(store.list_visible()).completed is True

    run(screen, "done 1")
    assert next(store.list_visible()).completed is False


def test_rm_asks_for_confirmation(store, monkeypatch):
    screen = TodoScreen(store)
    run(screen, "add Old task")

    answers = iter(["n", "y"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

    run(screen, "rm 1")
    assert len(store.items) == 1

    run(screen, "rm 1")
    assert len(store.items) == 0


def test_rm_yes_flag_skips_prompt(store, monkeypatch):
    screen = TodoScreen(store)
    run(screen, "add Old task")

    def no_input(prompt=""):
        raise AssertionError("should not prompt")

    monkeypatch.setattr(builtins, "input", no_input)
    run(screen, "rm 1 --yes")
    assert len(store.items) == 0


def test_add_stores_typed_text(store):
    screen = TodoScreen(store)

    run(screen, "add Fix the --force option")
    run(screen, 'add Read "Dune" again')

    assert [i.text for i in store.list_visible()] == [
        "Fix the --force option",
        'Read "Dune" again',
    ]


def test_rm_yes_before_row(store, monkeypatch):
    screen = TodoScreen(store)
    run(screen, "add First")
    run(screen, "add Second")

    def no_input(prompt=""):
        raise AssertionError("should not prompt")

    monkeypatch.setattr(builtins, "input", no_input)
    run(screen, "rm --yes 2")

    assert [i.text for i in store.list_visible()] == ["First"]


def test_edit_changes_nothing(store, capsys):
    screen = TodoScreen(store)
    run(screen, "add Keep text")

    run(screen, "edit 1")

    assert next(store.list_visible()).text == "Keep text"
    assert "not available" in capsys.readouterr().out


def test_exit_and_unknown_commands(store, capsys):
    screen = TodoScreen(store)
    assert run(screen, "bogus") is True
    assert "Unknown command" in capsys.readouterr().out
    assert run(screen, "exit") is False
    assert run(screen, "") is True
