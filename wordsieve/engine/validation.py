"""
Lightweight input validation.

This module answers two questions before anything touches solver state:
  - "Is this token a word the engine can play?"  (five letters a-z)
  - "Is this feedback string usable?"            (five symbols over G/Y/X)

Both checks are pure. A failed check raises before any constraint is
recorded, so a rejected input never leaves a half-applied update behind.
"""

from .errors import InvalidFeedbackError, InvalidGuessError
from .scoring import ABSENT, ALPHABET, HIT, PRESENT, WORD_LENGTH

# Typed by the interactive caller when the game refused the suggested word.
REJECTED = "ERR"

_LETTERS = frozenset(ALPHABET)
_SYMBOLS = frozenset((HIT, PRESENT, ABSENT))


def is_word(token: str) -> bool:
    """
    Return True if `token` (case-insensitive) is exactly five letters a-z.

    str.isalpha() alone would accept accented letters, which fall outside
    the 26-letter tables, hence the explicit alphabet check.
    """
    if not isinstance(token, str):
        return False
    w = token.strip().lower()
    return len(w) == WORD_LENGTH and all(ch in _LETTERS for ch in w)


def normalize_word(token: str) -> str:
    """Strip and lowercase `token`; raise InvalidGuessError if it isn't a word."""
    if not is_word(token):
        raise InvalidGuessError(f"not a {WORD_LENGTH}-letter a-z word: {token!r}")
    return token.strip().lower()


def parse_outcome(text: str) -> str:
    """
    Normalize a feedback string to uppercase 'G'/'Y'/'X'.

    Raises:
      InvalidFeedbackError on a length mismatch or an unknown symbol.
    """
    if not isinstance(text, str):
        raise InvalidFeedbackError(f"feedback must be a string, got {type(text).__name__}")

    patt = text.strip().upper()
    if len(patt) != WORD_LENGTH:
        raise InvalidFeedbackError(
            f"feedback must be exactly {WORD_LENGTH} symbols, got {len(patt)}: {text!r}"
        )
    for ch in patt:
        if ch not in _SYMBOLS:
            raise InvalidFeedbackError(
                f"invalid feedback symbol {ch!r}; use only {HIT}, {PRESENT}, {ABSENT}"
            )
    return patt
