import csv
import json
from pathlib import Path

import pytest

from wordle_assistant.engine import to_candidate
from wordle_assistant.harness import run_batch, run_case, summarize, write_csv, write_manifest

CANDS = [to_candidate(w) for w in ["crane", "slate", "abbey", "geese"]]


def test_run_case_solves():
    r = run_case("slate", CANDS)
    assert r["success"] is True and r["exhausted"] is False
    assert r["guesses"] == 2
    assert r["history"] == [("crane", "..g.g"), ("slate", "ggggg")]


def test_run_case_answer_outside_dictionary():
    r = run_case("zzzzz", CANDS)
    assert r["success"] is False and r["exhausted"] is True
    assert r["guesses"] == 1


def test_run_case_enforces_turn_budget():
    with pytest.raises(ValueError):
        run_case("slate", CANDS, max_turns=8)


def test_run_batch_sample_and_ranker_stamp():
    results = run_batch(["crane", "slate", "geese"], CANDS, sample=2, progress=False)
    assert [r["answer"] for r in results] == ["crane", "slate"]
    assert all(r["ranker_id"] == "distinct" for r in results)
    assert all(r["success"] for r in results)


def test_summarize():
    results = [
        {"answer": "a", "success": True, "guesses": 1},
        {"answer": "b", "success": True, "guesses": 3},
        {"answer": "c", "success": True, "guesses": 3},
        {"answer": "d", "success": False, "guesses": 1, "exhausted": True},
    ]
    s = summarize(results)
    assert s["games"] == 4 and s["wins"] == 3
    assert s["win_rate"] == pytest.approx(0.75)
    assert s["exhausted"] == 1
    assert s["mean_guesses"] == pytest.approx(7 / 3)
    assert s["median_guesses"] == 3.0
    assert s["distribution"] == [1, 0, 2, 0, 0, 0]
    json.dumps(s)  # manifest-safe


def test_summarize_no_wins():
    s = summarize([])
    assert s["games"] == 0 and s["win_rate"] == 0.0
    assert s["mean_guesses"] is None
    assert s["distribution"] == [0] * 6


def test_write_csv_and_manifest(tmp_path: Path):
    results = run_batch(["slate"], CANDS, progress=False)
    p = write_csv(results, str(tmp_path / "out" / "sim.csv"), max_turns=6)
    with open(p, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    row = rows[0]
    assert row["ranker"] == "distinct" and row["answer"] == "slate"
    assert row["guess_1"] == "crane" and row["feedback_1"] == "..g.g"
    assert row["guess_2"] == "slate" and row["guess_3"] == ""

    m = write_manifest({"summary": summarize(results)}, str(tmp_path / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8"))["summary"]["wins"] == 1
