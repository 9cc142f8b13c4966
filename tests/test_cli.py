"""Tests for the command-line front end."""

import io
import json

from regsubst.cli import main


def run(monkeypatch, capsys, argv, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main(argv)
    out, err = capsys.readouterr()
    return code, out, err


def test_sub_array(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["sub", "[0-9]+", r"<\0>", "--flags", "G"], '["a1","b2"]')
    assert code == 0
    assert json.loads(out) == ["a<1>", "b<2>"]


def test_sub_lookup_table(monkeypatch, capsys):
    table = json.dumps({"cat": "feline", "dog": "canine"})
    code, out, _ = run(monkeypatch, capsys, ["sub", "cat|dog", table, "--map", "--flags", "G"], '"catdog"')
    assert code == 0
    assert json.loads(out) == "felinecanine"


def test_sensitive_output_hidden(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["--sensitive", "sub", "a", "b"], '"secret-a"')
    assert code == 0
    assert json.loads(out) == "Sensitive [value redacted]"
    assert "secret" not in out


def test_error_exit(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, ["sub", "(", "x"], '"a"')
    assert code == 1
    assert out == ""
    assert err.startswith("error: ")


def test_apply_rule_set(monkeypatch, capsys, rules_yaml):
    code, out, _ = run(monkeypatch, capsys, ["apply", "--config", str(rules_yaml)], '"dog42"')
    assert code == 0
    assert json.loads(out) == "canine<42>"


def test_apply_missing_config(monkeypatch, capsys, tmp_path):
    code, _, err = run(monkeypatch, capsys, ["apply", "--config", str(tmp_path / "none.yaml")], '"x"')
    assert code == 1
    assert "error:" in err


def test_apply_non_mapping_config(monkeypatch, capsys, tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n")
    code, out, err = run(monkeypatch, capsys, ["apply", "--config", str(path)], '"x"')
    assert code == 1
    assert out == ""
    assert err.startswith("error: ")
