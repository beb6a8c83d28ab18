import csv
import json
from collections import Counter

import pytest
from wordsieve.engine import Corpus
from wordsieve.harness import (
    BatchTally, format_report, run_batch, run_case, summarize, write_csv, write_manifest,
)

WORDS = ["robot", "robin", "rosin", "chirp", "count", "mound", "round", "hound", "rhino",
         "tiger", "mince", "humid", "those", "phase", "horse", "abide", "guide", "oxide"]


@pytest.mark.parametrize("solver", ["adaptive", "ranked"])
def test_run_case_smoke(solver):
    r = run_case(Corpus(WORDS), "hound", solver=solver)
    assert r["success"] is True
    assert r["history"][-1] == ("hound", "GGGGG")
    assert r["guesses"] == len(r["history"])
    assert r["solver_id"] == solver


def test_run_case_turn_budget():
    r = run_case(Corpus(WORDS), "hound", solver="ranked", max_turns=1)
    assert r["success"] is False
    assert r["guesses"] == 1


def test_run_case_solution_outside_corpus_fails():
    r = run_case(Corpus(WORDS), "zesty", solver="ranked")
    assert r["success"] is False


def test_run_batch_threads_and_tally():
    corpus = Corpus(WORDS)
    seen = []
    results, tally = run_batch(corpus, WORDS, solver="ranked", workers=3, on_result=seen.append)
    assert [r["answer"] for r in results] == WORDS
    assert len(seen) == len(WORDS)
    assert tally.solved == len(WORDS) and tally.failed == 0
    assert tally.played == len(WORDS)
    assert tally.total_guesses == sum(r["guesses"] for r in results)
    assert sum(tally.solved_at.values()) == len(WORDS)


def test_batch_matches_sequential_runs():
    corpus = Corpus(WORDS)
    results, _ = run_batch(corpus, WORDS, solver="adaptive", workers=4)
    for r in results:
        assert r["history"] == run_case(corpus, r["answer"], solver="adaptive")["history"]


def test_summarize_and_report():
    tally = BatchTally(solved=3, failed=1, total_guesses=7, solved_at=Counter({1: 1, 3: 2}))
    s = summarize(tally, 4)
    assert s["average_guesses"] == pytest.approx(7 / 3)
    assert s["success_rate"] == pytest.approx(75.0)
    assert len(s["by_guess"]) == 10                     # never reaches 100%
    assert s["by_guess"][2] == {"guess": 3, "percent_solved": 75.0, "unsolved": 1}

    text = format_report(s)
    assert "Solved: 3" in text
    assert "Average guesses for solved words: 2.33" in text
    assert "Guess 3: 75.00% solved, 1 failed" in text


def test_summary_stops_once_everything_is_solved():
    tally = BatchTally(solved=2, total_guesses=5, solved_at=Counter({2: 1, 3: 1}))
    s = summarize(tally, 2)
    assert [row["guess"] for row in s["by_guess"]] == [1, 2, 3]


def test_write_csv_and_manifest(tmp_path):
    results = [run_case(Corpus(WORDS), "hound", solver="ranked")]
    path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["answer"] == "hound"
    assert rows[0]["outcome_1"] == results[0]["history"][0][1]

    mpath = write_manifest({"run_id": "x", "num_cases": 1}, str(tmp_path / "m.json"))
    assert json.loads(open(mpath, encoding="utf-8").read())["num_cases"] == 1
