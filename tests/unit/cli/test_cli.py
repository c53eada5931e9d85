"""Tests for the metascry command line."""

import json
import sys
from pathlib import Path

import pytest

from metascry.cli.main import create_parser, main

NOTE = """---
status: draft
stats:
  views: 1
---
# Intro

Hello.
"""


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    (tmp_path / "Idea.md").write_text(NOTE, encoding="utf-8")
    (tmp_path / "Other.md").write_text("---\nstatus: done\n---\n", encoding="utf-8")
    return tmp_path


def run_cli(monkeypatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["metascry", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


class TestParser:
    """Tests for argument parsing."""

    def test_get(self):
        """get takes one or more notes and an optional path."""
        args = create_parser().parse_args(["get", "a", "b", "-p", "file.name"])

        assert args.command == "get"
        assert args.notes == ["a", "b"]
        assert args.path == "file.name"

    def test_patch_options(self):
        """Write commands accept redirection flags."""
        args = create_parser().parse_args(["patch", "a", "k", "1", "--values", "--prototype"])

        assert (args.note, args.key, args.value) == ("a", "k", "1")
        assert args.values is True
        assert args.prototype is True

    def test_clear_defaults_to_no_keys(self):
        """clear without keys parses to an empty list."""
        args = create_parser().parse_args(["clear", "a"])
        assert args.keys == []


class TestMain:
    """Tests for main()."""

    def test_get_single(self, vault_dir: Path, monkeypatch, capsys):
        """A single note prints its record."""
        code = run_cli(monkeypatch, "--vault", str(vault_dir), "get", "Idea")

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "draft"
        assert data["file"]["sections"] == ["Intro"]
        assert data["cache"] == {}

    def test_get_path_many(self, vault_dir: Path, monkeypatch, capsys):
        """Several notes print a map keyed by identifier."""
        code = run_cli(monkeypatch, "--vault", str(vault_dir), "get", "Idea", "Other", "-p", "status")

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {"Idea.md": "draft", "Other.md": "done"}

    def test_patch(self, vault_dir: Path, monkeypatch, capsys):
        """patch parses the value as YAML and writes it."""
        code = run_cli(monkeypatch, "--vault", str(vault_dir), "patch", "Idea", "stats.views", "5")

        assert code == 0
        assert json.loads(capsys.readouterr().out)["stats"] == {"views": 5}
        assert "views: 5" in (vault_dir / "Idea.md").read_text(encoding="utf-8")

    def test_set(self, vault_dir: Path, monkeypatch, capsys):
        """set replaces the frontmatter."""
        code = run_cli(monkeypatch, "--vault", str(vault_dir), "set", "Other", "{a: 1}")

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {"a": 1}

    def test_set_rejects_non_mapping(self, vault_dir: Path, monkeypatch, capsys):
        """A YAML list is not valid frontmatter."""
        code = run_cli(monkeypatch, "--vault", str(vault_dir), "set", "Other", "[1, 2]")

        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_clear(self, vault_dir: Path, monkeypatch, capsys):
        """clear removes the named keys."""
        code = run_cli(monkeypatch, "--vault", str(vault_dir), "clear", "Idea", "stats")

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {"status": "draft"}

    def test_missing_note(self, vault_dir: Path, monkeypatch, capsys):
        """Unknown notes exit with an error."""
        code = run_cli(monkeypatch, "--vault", str(vault_dir), "get", "Nope")

        assert code == 1
        assert "Document not found: Nope" in capsys.readouterr().err

    def test_no_command_prints_help(self, monkeypatch, capsys):
        """Without a command the help is printed."""
        code = run_cli(monkeypatch)

        assert code == 0
        assert "usage: metascry" in capsys.readouterr().out
