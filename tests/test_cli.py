import json
from pathlib import Path

import pytest

from apps.cli import play, simulate
from script.extract_wordle_answers import parse_answers


def _words(tmp_path: Path) -> Path:
    p = tmp_path / "words.txt"
    p.write_text("crane\nslate\nabbey\nGeese\ngeese\nParis\n", encoding="utf-8")
    return p


def test_play_win(tmp_path, monkeypatch, capsys):
    replies = iter(["..g.g", "ggggg"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
    monkeypatch.delenv("WORDLE_ASSISTANT_LIMIT", raising=False)

    rc = play.main(["--source", f"file:{_words(tmp_path)}"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "words=4 (uniq=4" in out
    assert "Guess 'crane'" in out and "Guess 'slate'" in out and "You win!" in out


def test_play_missing_source(tmp_path, capsys):
    rc = play.main(["--source", str(tmp_path / "missing.txt")])
    assert rc == 1
    assert capsys.readouterr().out.startswith("ERROR: cannot read word list")


def test_play_exhausted(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": ".....")
    rc = play.main(["--source", str(_words(tmp_path))])
    assert rc == 1
    assert "ERROR: No valid guesses left!" in capsys.readouterr().out


def test_simulate_writes_outputs(tmp_path, capsys):
    answers = tmp_path / "answers.txt"
    answers.write_text("slate\ncrane\n", encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = simulate.main([
        "--source", str(_words(tmp_path)), "--answers", str(answers),
        "--outdir", str(outdir), "--no-progress",
    ])
    assert rc == 0
    assert len(list(outdir.glob("sim_*.csv"))) == 1
    assert len(list(outdir.glob("sim_*_manifest.json"))) == 1
    assert '"wins": 2' in capsys.readouterr().out


def test_parse_answers():
    html = (
        "<table><tr><td>2024-01-02 (Tuesday) 928 SLATE</td></tr>"
        "<tr><td>2024-01-01 (Monday) 927 CRANE</td></tr>"
        "<tr><td>2023-12-31 (Sunday) 926 SLATE</td></tr></table>"
    )
    assert parse_answers(html) == ["slate", "crane"]


@pytest.mark.parametrize("limit", ["0", "-3"])
def test_play_rejects_non_positive_limit(tmp_path, capsys, limit):
    with pytest.raises(SystemExit) as exc:
        play.main(["--source", str(_words(tmp_path)), "--limit", limit])
    assert exc.value.code == 2
    assert "--limit" in capsys.readouterr().err


def test_simulate_bad_env_limit(monkeypatch, capsys):
    monkeypatch.setenv("WORDLE_ASSISTANT_LIMIT", "zero")
    assert simulate.main(["--no-progress"]) == 2
    assert capsys.readouterr().out.startswith("ERROR: WORDLE_ASSISTANT_LIMIT")


def test_simulate_skips_unplayable_answers(tmp_path, capsys):
    answers = tmp_path / "answers.txt"
    answers.write_text("slate\ntoolong\ncr4ne\ncrane\n", encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = simulate.main([
        "--source", str(_words(tmp_path)), "--answers", str(answers),
        "--outdir", str(outdir), "--no-progress",
    ])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Skipped 2 answer line(s)" in out
    assert '"games": 2' in out and '"wins": 2' in out


def test_simulate_sample_is_seeded(tmp_path, capsys):
    answers = tmp_path / "answers.txt"
    answers.write_text("slate\ncrane\nabbey\ngeese\n", encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = simulate.main([
        "--source", str(_words(tmp_path)), "--answers", str(answers),
        "--outdir", str(outdir), "--no-progress", "--sample", "2", "--seed", "5",
    ])
    assert rc == 0
    manifest = json.loads(next(outdir.glob("sim_*_manifest.json")).read_text(encoding="utf-8"))
    assert manifest["num_cases"] == 2
    assert manifest["config"]["sample"] == 2
