import io
import json
from pathlib import Path
import pytest
from bkfuzzy.__main__ import main, parse_config
from bkfuzzy import config as CFG

def _seed(tmp: Path, text: str = "kitten sitting bitten mitten\n") -> str:
    p = tmp / "words.txt"
    p.write_text(text, encoding="utf-8")
    return str(p)

@pytest.mark.e2e
def test_default_distance_prints_one_word_per_line(tmp_path: Path, capsys):
    assert main(["-w", _seed(tmp_path), "kitten"]) == 0
    assert capsys.readouterr().out.splitlines() == ["kitten", "bitten", "mitten"]

@pytest.mark.e2e
def test_explicit_distance(tmp_path: Path, capsys):
    assert main(["-w", _seed(tmp_path), "3", "kitten"]) == 0
    assert set(capsys.readouterr().out.split()) == {"kitten", "sitting", "bitten", "mitten"}

@pytest.mark.e2e
def test_brute_force_flag(tmp_path: Path, capsys):
    assert main(["-b", "-w", _seed(tmp_path), "0", "mitten"]) == 0
    assert capsys.readouterr().out.splitlines() == ["mitten"]

@pytest.mark.e2e
def test_dot_flag_prints_graph(tmp_path: Path, capsys):
    assert main(["--dot", "-w", _seed(tmp_path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "digraph G {" and out[-1] == "}"
    assert '  "kitten" -> "sitting" [label="3"];' in out
    assert len(out) == 2 + 3

@pytest.mark.e2e
def test_json_output(tmp_path: Path, capsys):
    assert main(["--json", "-w", _seed(tmp_path), "1", "kitten"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["matches"] == ["kitten", "bitten", "mitten"]
    assert data["threshold"] == 1 and data["mode"] == "index"

@pytest.mark.e2e
def test_wordfile_from_environment(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setenv(CFG.WORDFILE_ENV, _seed(tmp_path, "rose nose note\n"))
    assert main(["0", "note"]) == 0
    assert capsys.readouterr().out.splitlines() == ["note"]

@pytest.mark.e2e
def test_repl_answers_until_empty_line(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 bitten\nkitten\n\nmitten\n"))
    assert main(["--repl", "-w", _seed(tmp_path)]) == 0
    assert capsys.readouterr().out.split() == ["bitten", "kitten", "bitten", "mitten"]

@pytest.mark.e2e
def test_repl_rejects_non_decimal_distance(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\u00b2 kitten\n1 2 3\n0 mitten\n\n"))
    assert main(["--repl", "-w", _seed(tmp_path)]) == 0
    captured = capsys.readouterr()
    assert captured.out.split() == ["mitten"]
    assert captured.err.count("expected: [n] word") == 2

@pytest.mark.e2e
def test_missing_wordfile_exits_1(tmp_path: Path, capsys):
    assert main(["-w", str(tmp_path / "missing.txt"), "kitten"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing.txt" in captured.err

@pytest.mark.e2e
def test_empty_wordfile_exits_1(tmp_path: Path, capsys):
    assert main(["-w", _seed(tmp_path, "\n"), "kitten"]) == 1
    assert "empty" in capsys.readouterr().err

@pytest.mark.parametrize("argv", [
    [],                         # no query
    ["x", "kitten"],            # non-integer distance
    ["-1", "kitten"],           # negative distance
    ["1", "2", "kitten"],       # too many positionals
    ["-b", "--dot"],            # dot needs the index
    ["-w"],                     # -w without a path
])
def test_usage_errors_exit_2(argv, capsys):
    with pytest.raises(SystemExit) as ei:
        parse_config(argv)
    assert ei.value.code == 2
    assert "usage:" in capsys.readouterr().err

def test_parse_config_defaults(monkeypatch):
    monkeypatch.delenv(CFG.WORDFILE_ENV, raising=False)
    cfg = parse_config(["kitten"])
    assert cfg.query == "kitten"
    assert cfg.max_distance == CFG.DEFAULT_MAX_DISTANCE == 2
    assert cfg.wordfile == CFG.DEFAULT_WORDFILE
    assert cfg.strategy == CFG.STRATEGY_INDEX
    assert not cfg.dump_dot and not cfg.repl
    with pytest.raises(Exception):
        cfg.query = "other"     # frozen
