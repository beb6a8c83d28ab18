# apps/cli/run.py
"""
CLI entry point for batch-evaluating a wordsieve solver.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the corpus and picks the solutions to play (all, or a seeded sample).
  3) Plays every solution as an independent game on a thread pool, with a
     live progress indicator, then prints the summary report and writes:
       - CSV:  per-game results + guess/outcome history columns
       - JSON: manifest with config, corpus hash, summary, git commit, etc.

Usage:
    python -m apps.cli.run --words data/words_5.txt --solver ranked --workers 4
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordsieve.datasets import load_corpus, pretty_summary, validate_corpus
from wordsieve.engine import Corpus
from wordsieve.harness import format_report, run_batch, summarize
from wordsieve.harness.core import DEFAULT_WORKERS
from wordsieve.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from wordsieve.solvers import get_solver_ids


def main():
    """
    Parse CLI args, validate the corpus, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordsieve: batch-evaluate a solver")
    ap.add_argument("--solver", default="adaptive",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default="data/words_5.txt",
                    help="path to the word list (one word per line)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of the corpus (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                    help="number of worker threads")
    ap.add_argument("--max-turns", type=int,
                    help="count a game as failed after this many guesses (default: no limit)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "plain", "off"], default="bar",
                    help="progress display")
    ap.add_argument("--verbose", action="store_true",
                    help="log every game's turns (very noisy on big corpora)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate the word list and print a one-liner summary
    rep = validate_corpus(args.words)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}", file=sys.stderr)
        raise SystemExit(1)

    # 2) Load and encode once; every game shares this read-only corpus
    corpus = Corpus(load_corpus(args.words))

    rng = random.Random(args.seed)
    if args.sample and args.sample < len(corpus):
        cases = rng.sample(list(corpus.words), args.sample)
    else:
        cases = list(corpus.words)
    total = len(cases)

    # 3) Progress
    bar = tqdm(total=total, ncols=80, desc=args.solver, unit="game") \
        if args.progress == "bar" else None
    start = time.time()
    done = 0
    last_print = 0.0

    def on_result(_result):
        nonlocal done, last_print
        done += 1
        if bar is not None:
            bar.update(1)
        elif args.progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (done == total):
                elapsed = now - start
                rate = (done / elapsed) if elapsed > 0 else 0.0
                remaining = (total - done) / rate if rate > 0 else 0.0
                pct = 100.0 * done / max(1, total)
                sys.stderr.write(
                    f"\r[{done}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    results, tally = run_batch(
        corpus, cases,
        solver=args.solver,
        workers=args.workers,
        max_turns=args.max_turns,
        verbose=args.verbose,
        on_result=on_result,
    )

    if bar is not None:
        bar.close()
    elif args.progress == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(tally, total)
    print()
    print(format_report(summary))

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "corpus": rep,
        "num_cases": len(results),
        "solver_id": args.solver,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
