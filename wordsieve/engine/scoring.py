"""
Wordle-style feedback for a single (guess, solution) pair.

Conventions:
  - 'G' : hit     = correct letter in the correct position
  - 'Y' : present = letter is in the solution, but not at this position
  - 'X' : absent  = letter not in the solution (or already used up by
                    earlier hits/presents)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks every exact positional match and consumes that
     solution slot.
  2) Second pass walks the remaining guess positions left to right; each one
     consumes the first unused solution slot holding the same letter.

So a repeated guess letter is marked 'Y' only as many times as it still
occurs unconsumed in the solution, earlier positions first.
"""

from typing import Literal

WORD_LENGTH = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

HIT = "G"
PRESENT = "Y"
ABSENT = "X"
ALL_HIT = HIT * WORD_LENGTH

# Type alias for clarity; each outcome character is one of 'G', 'Y', 'X'
OutcomeChar = Literal["G", "Y", "X"]


def feedback(guess: str, solution: str) -> str:
    """
    Compute the outcome string for `guess` against `solution`.

    Preconditions:
      - both are lowercase five-letter words (not checked here; the oracle
        sits in the inner loop of the minimax search)

    Examples:
      feedback("salet", "robot") -> "XXXXG"
      feedback("allot", "lolly") -> "XYGYX"
    """
    marks = [""] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    # Pass 1: hits consume their own slot.
    for i in range(WORD_LENGTH):
        if guess[i] == solution[i]:
            marks[i] = HIT
            used[i] = True

    # Pass 2: presents consume the leftmost unused matching slot.
    for i in range(WORD_LENGTH):
        if marks[i]:
            continue
        g = guess[i]
        marks[i] = ABSENT
        for j in range(WORD_LENGTH):
            if not used[j] and solution[j] == g:
                marks[i] = PRESENT
                used[j] = True
                break

    return "".join(marks)
