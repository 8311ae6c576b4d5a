"""
Tests for the `dppi` command line entry point.
"""
import builtins

import dppi
from dppilang.tests.utils import EXAMPLES_DIR


def test_runs_scripts_in_order(capsys):
    script = str(EXAMPLES_DIR / "scopes.dppi")
    assert dppi.main(["dppi", script, script]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Output for file 1: {script}:"
    assert out[1:6] == ["2", "3", "9", "2", "null"]
    assert out[6] == dppi.SEPARATOR
    assert out[7] == f"Output for file 2: {script}:"
    assert len(out) == 14


def test_parse_error_stops_run(capsys):
    broken = str(EXAMPLES_DIR / "broken.dppi")
    good = str(EXAMPLES_DIR / "scopes.dppi")
    assert dppi.main(["dppi", broken, good]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [f"Output for file 1: {broken}:"]
    assert captured.err.startswith("| DPPI Error |\n")
    assert "Unexpected token '5'" in captured.err


def test_debug_prints_tokens_and_ast(capsys, monkeypatch):
    monkeypatch.setenv("DPPIDEBUG", "1")
    assert dppi.main(["dppi", str(EXAMPLES_DIR / "scopes.dppi")]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "AST:" in out


def test_help(capsys):
    assert dppi.main(["dppi", "--help"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_non_script_argument(capsys):
    assert dppi.main(["dppi", "notes.txt"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_repl_keeps_bindings(capsys, monkeypatch):
    lines = iter(["a = 4", "scope { a = 1 }", "a", "print a", "scope 5", "exit"])
    monkeypatch.setattr(builtins, "input", lambda prompt: next(lines))
    assert dppi.main(["dppi"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[2:4] == ["4", "4"]
    assert out[4].startswith("UnexpectedToken: ")


def test_repl_continues_unfinished_input(capsys, monkeypatch):
    prompts = []
    lines = iter(["a = 1", "scope {", "b =", "2", "b }", "a", "exit"])

    def fake_input(prompt):
        prompts.append(prompt)
        return next(lines)

    monkeypatch.setattr(builtins, "input", fake_input)
    assert dppi.main(["dppi"]) == 0
    assert prompts == [">>> ", ">>> ", "... ", "... ", "... ", ">>> ", ">>> "]
    assert capsys.readouterr().out.splitlines()[2:] == ["2", "1"]


def test_deeply_nested_script(capsys, tmp_path):
    script = tmp_path / "deep.dppi"
    script.write_text("scope { " * 1000 + "print 7" + " }" * 1000, encoding="utf-8")
    assert dppi.main(["dppi", str(script)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[1:] == ["7", dppi.SEPARATOR]
