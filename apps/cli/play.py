# apps/cli/play.py
"""
Interactive assistant: suggests a guess, you play it in the real game and
type back the colours.

Feedback format: five symbols, G = green, Y = yellow, X = gray (any case).
Type ERR if the game refused the suggested word; it won't be suggested again
this game.

Usage:
    python -m apps.cli.play --words data/words_5.txt
"""

from __future__ import annotations

import argparse
import logging

from wordsieve.datasets import load_corpus
from wordsieve.engine import Corpus, InvalidFeedbackError, REJECTED
from wordsieve.game import Game
from wordsieve.solvers import get_solver_ids


def _ask(prompt: str) -> str | None:
    """input() that turns end-of-input into None."""
    try:
        return input(prompt)
    except EOFError:
        return None


def play_one(game: Game) -> bool | None:
    """
    Run one game to the end. Returns True (solved), False (failed) or None
    if the input stream ended.
    """
    while not game.is_solved() and not game.is_exhausted():
        guess = game.next_guess()
        n = len(game.candidates)
        print(f"{n} possible words remain.")
        print(f"Try: {guess}")

        # Same guess until we get usable feedback for it.
        while True:
            line = _ask("Enter feedback (G=Green, Y=Yellow, X=Gray, ERR=word refused): ")
            if line is None:
                return None
            if line.strip().upper() == REJECTED:
                game.reject_guess(guess)
                print("Invalid word removed, try again.")
                break
            try:
                game.apply_feedback(guess, line)
            except InvalidFeedbackError as e:
                print(f"{e}. Valid feedback uses only G, Y and X.")
                continue
            break

    if game.is_solved():
        print(f"Solution: {game.history[-1][0]}")
        print(f"Total guesses: {game.turn}")
        return True

    print("Failed to solve - no possible words remain.")
    print(f"Game failed after {game.turn} guesses.")
    return False


def main():
    ap = argparse.ArgumentParser(description="wordsieve: interactive Wordle assistant")
    ap.add_argument("--words", default="data/words_5.txt",
                    help="path to the word list (one word per line)")
    ap.add_argument("--solver", default="adaptive",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    corpus = Corpus(load_corpus(args.words))
    game = Game(corpus, solver=args.solver)

    while True:
        outcome = play_one(game)
        if outcome is None:
            break
        line = _ask("Enter 'exit' to quit or press Enter to start a new game. ")
        if line is None or line.strip().lower() == "exit":
            break
        game.reset()
        print("New game started.")


if __name__ == "__main__":
    main()
