"""
Experiment harness core primitives.

- run_case:   play one game (one hidden solution) to a win or a dead end.
- run_batch:  play many games on a thread pool and tally the outcomes.
- BatchTally: lock-protected counters shared by the worker threads.

Every game gets its own Game (store, candidates, scratch buffers, solver);
only the read-only Corpus and the tally are shared. Output is controlled per
game through `verbose`/`log`, never by redirecting shared streams.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from wordsieve.engine.corpus import Corpus
from wordsieve.engine.scoring import feedback
from wordsieve.game import Game

log = logging.getLogger(__name__)

DEFAULT_WORKERS = 4
# Safety net for games without a turn budget; a game can't need more guesses
# than there are corpus words, but a buggy strategy could repeat itself.
HARD_TURN_CAP = 100


@dataclass
class BatchTally:
    """Aggregate outcome counts; record() may be called from any thread."""
    solved: int = 0
    failed: int = 0
    total_guesses: int = 0
    solved_at: Counter = field(default_factory=Counter)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, result: Dict) -> None:
        with self._lock:
            if result["success"]:
                self.solved += 1
                self.total_guesses += result["guesses"]
                self.solved_at[result["guesses"]] += 1
            else:
                self.failed += 1

    @property
    def played(self) -> int:
        return self.solved + self.failed


def run_case(
        corpus: Corpus,
        solution: str,
        *,
        solver: str = "adaptive",
        max_turns: int | None = None,
        verbose: bool = False,
        game_log: logging.Logger | None = None,
) -> Dict:
    """
    Play one game against a known solution.

    Args:
        corpus:    shared, read-only Corpus
        solution:  the hidden word
        solver:    registered solver id
        max_turns: stop (as a failure) after this many guesses; None = no limit
        verbose:   log this game's turns at INFO
        game_log:  logger for this game (default: wordsieve.game)

    Returns:
        dict with keys:
            answer, success, guesses, time_ms, history, solver_id
    """
    game = Game(corpus, solver=solver, log=game_log, verbose=verbose)
    budget = max_turns if max_turns is not None else HARD_TURN_CAP

    t0 = time.perf_counter()
    while game.turn < budget and not game.is_solved() and not game.is_exhausted():
        guess = game.next_guess()
        game.apply_feedback(guess, feedback(guess, solution))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": solution,
        "success": game.is_solved(),
        "guesses": game.turn,
        "time_ms": dt,
        "history": list(game.history),
        "solver_id": game.solver.id,
    }


def _chunks(items: Sequence[str], n: int) -> List[Tuple[int, Sequence[str]]]:
    """Split into at most n contiguous slices; returns (offset, slice) pairs."""
    size = max(1, -(-len(items) // max(1, n)))
    return [(start, items[start:start + size]) for start in range(0, len(items), size)]


def run_batch(
        corpus: Corpus,
        solutions: Iterable[str],
        *,
        solver: str = "adaptive",
        workers: int = DEFAULT_WORKERS,
        max_turns: int | None = None,
        verbose: bool = False,
        on_result: Callable[[Dict], None] | None = None,
) -> Tuple[List[Dict], BatchTally]:
    """
    Play every solution as an independent game, `workers` threads at a time.

    The solution list is cut into `workers` contiguous chunks, one per worker.
    Results come back in input order; `on_result` (e.g. a progress bar
    update) runs once per finished game, one call at a time.
    """
    solutions = list(solutions)
    tally = BatchTally()
    results: List[Dict | None] = [None] * len(solutions)
    callback_lock = threading.Lock()

    def work(offset: int, chunk: Sequence[str]) -> None:
        for i, sol in enumerate(chunk):
            r = run_case(corpus, sol, solver=solver, max_turns=max_turns, verbose=verbose)
            results[offset + i] = r
            tally.record(r)
            if on_result is not None:
                with callback_lock:
                    on_result(r)

    chunks = _chunks(solutions, workers)
    log.info("Running %d games on %d worker(s) with solver %s", len(solutions), len(chunks), solver)

    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        futures = [executor.submit(work, offset, chunk) for offset, chunk in chunks]
        for f in futures:
            f.result()  # re-raises a worker's exception here

    return results, tally
