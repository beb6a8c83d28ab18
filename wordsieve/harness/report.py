"""
Batch summary: the numbers printed after a run.

  - totals, solved, failed
  - average guesses over SOLVED games only
  - success / failure rate
  - cumulative share solved within k guesses, for k = 1.. until every word
    is solved or k reaches MAX_REPORTED_GUESSES
"""

from __future__ import annotations
from typing import Dict, List

from .core import BatchTally

MAX_REPORTED_GUESSES = 10


def summarize(tally: BatchTally, total: int) -> Dict:
    """Turn a tally into a JSON-serializable summary dict."""
    total = max(0, int(total))
    avg = tally.total_guesses / tally.solved if tally.solved else 0.0
    pct = (lambda k: 100.0 * k / total) if total else (lambda k: 0.0)

    by_guess: List[Dict] = []
    cumulative = 0
    for k in range(1, MAX_REPORTED_GUESSES + 1):
        cumulative += tally.solved_at.get(k, 0)
        by_guess.append({
            "guess": k,
            "percent_solved": pct(cumulative),
            "unsolved": total - cumulative,
        })
        if cumulative >= total:
            break

    return {
        "total": total,
        "solved": tally.solved,
        "failed": tally.failed,
        "average_guesses": avg,
        "success_rate": pct(tally.solved),
        "failure_rate": pct(tally.failed),
        "by_guess": by_guess,
    }


def format_report(summary: Dict) -> str:
    lines = [
        "=== TEST RESULTS ===",
        f"Total words: {summary['total']}",
        f"Solved: {summary['solved']}",
        f"Failed: {summary['failed']}",
        f"Average guesses for solved words: {summary['average_guesses']:.2f}",
        f"Success Rate: {summary['success_rate']:.2f}%",
        f"Failed Rate: {summary['failure_rate']:.2f}%",
        "",
        "Percent solved by guess count:",
    ]
    for row in summary["by_guess"]:
        lines.append(
            f"Guess {row['guess']}: {row['percent_solved']:.2f}% solved, {row['unsolved']} failed"
        )
    lines.append("====================")
    return "\n".join(lines)
