"""
Test the CLI end to end in a subprocess, with the data directory in tmp_path.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent


@pytest.fixture()
def run_cli(tmp_path):
    """Run 'python -m worktravel.cli.main ...' against a temporary data directory."""
    env = dict(os.environ)
    env["WORKTRAVEL_HOME"] = str(tmp_path)
    env.pop("WORKTRAVEL_LOG_LEVEL", None)

    def run(*args, input_text=None):
        return subprocess.run(
            [sys.executable, "-m", "worktravel.cli.main", *args],
            input=input_text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=project_root,
            env=env,
        )

    return run


def test_default_launches_repl(run_cli, tmp_path):
    """Running without arguments launches the REPL."""
    result = run_cli(input_text="add Buy milk\nexit\n")

    assert "worktravel REPL" in result.stdout, f"Expected REPL welcome, got: {result.stdout}"
    assert "Goodbye!" in result.stdout
    assert result.returncode == 0
    assert (tmp_path / "worktravel.db").exists()
    assert (tmp_path / "worktravel.log").exists()

    print("✓ Default command launches REPL successfully")


def test_version(run_cli):
    result = run_cli("version")
    assert "worktravel v" in result.stdout
    assert result.returncode == 0


def test_add_and_list_json(run_cli):
    result = run_cli("add", "Buy milk")
    assert result.returncode == 0, result.stderr

    result = run_cli("ls", "--json")
    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert [(d["text"], d["context"], d["completed"]) for d in data] == [("Buy milk", "work", False)]


def test_mode_partitions_items(run_cli):
    run_cli("add", "Write slides")

    result = run_cli("mode", "travel")
    assert result.returncode == 0
    assert "Travel" in result.stdout

    assert json.loads(run_cli("ls", "--json").stdout) == []

    run_cli("add", "Book hotel")
    assert [d["text"] for d in json.loads(run_cli("ls", "--json").stdout)] == ["Book hotel"]

    run_cli("mode", "work")
    assert run_cli("mode", "--raw").stdout.strip() == "work"
    assert [d["text"] for d in json.loads(run_cli("ls", "--json").stdout)] == ["Write slides"]


def test_done_and_rm(run_cli):
    run_cli("add", "Pack charger")

    result = run_cli("done", "1")
    assert result.returncode == 0
    assert json.loads(run_cli("ls", "--json").stdout)[0]["completed"] is True

    # Declining keeps the item
    result = run_cli("rm", "1", input_text="n\n")
    assert "Cancelled" in result.stdout
    assert len(json.loads(run_cli("ls", "--json").stdout)) == 1

    result = run_cli("rm", "1", "--yes")
    assert result.returncode == 0
    assert json.loads(run_cli("ls", "--json").stdout) == []


def test_errors_exit_with_code_1(run_cli):
    result = run_cli("add", "   ")
    assert result.returncode == 1
    assert "Error" in result.stderr

    result = run_cli("done", "7")
    assert result.returncode == 1
    assert "No item" in result.stderr

    result = run_cli("mode", "holiday")
    assert result.returncode == 1


def test_digit_like_reference_is_not_found(run_cli):
    run_cli("add", "Pack charger")

    result = run_cli("done", "²")
    assert result.returncode == 1
    assert "No item" in result.stderr
    assert "Traceback" not in result.stderr
