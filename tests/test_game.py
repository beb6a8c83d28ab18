import logging

import pytest
from wordsieve import Game, new_game
from wordsieve.engine import (
    ContradictionError, Corpus, EmptyCorpusError, InvalidFeedbackError, InvalidGuessError, feedback,
)

WORDS = ["robot", "robin", "rosin", "chirp", "count", "mound", "round", "hound", "rhino",
         "tiger", "mince", "humid", "those", "phase", "horse", "abide", "guide", "oxide"]


def test_new_game_starts_with_full_ranked_corpus():
    g = new_game(WORDS)
    assert sorted(g.current_candidates()) == sorted(WORDS)
    assert g.current_candidates() == g.corpus.ranked_words(range(len(WORDS)))
    assert not g.is_solved() and not g.is_exhausted()


def test_empty_corpus_is_fatal():
    with pytest.raises(EmptyCorpusError):
        Game([])


def test_openers_on_first_two_turns():
    g = Game(WORDS)
    assert g.next_guess() == "salet"
    g.apply_feedback("salet", feedback("salet", "mound"))
    assert g.next_guess() == "frogs"


def test_single_candidate_is_committed_and_solved():
    g = Game(WORDS)
    g.apply_feedback("salet", "XXXXG")        # robot vs salet
    assert sorted(g.candidates) == ["count", "robot"]
    g.apply_feedback("count", feedback("count", "robot"))
    assert g.candidates == ["robot"]
    assert g.next_guess() == "robot"
    g.apply_feedback("robot", "GGGGG")
    assert g.is_solved()
    assert g.next_guess() == "robot"


def test_all_absent_keeps_the_solution():
    g = Game(WORDS)
    g.apply_feedback("salet", feedback("salet", "chirp"))
    assert "chirp" in g.candidates


def test_candidates_shrink_and_keep_solution():
    solution = "hound"
    g = Game(WORDS, solver="ranked")
    sizes = [len(g.candidates)]
    while not g.is_solved():
        guess = g.next_guess()
        g.apply_feedback(guess, feedback(guess, solution))
        assert solution in g.candidates
        sizes.append(len(g.candidates))
    assert sizes == sorted(sizes, reverse=True)


def test_malformed_feedback_leaves_game_untouched():
    g = Game(WORDS)
    before = g.current_candidates()
    for bad in ["GGGG", "GGXZY", ""]:
        with pytest.raises(InvalidFeedbackError):
            g.apply_feedback("salet", bad)
    with pytest.raises(InvalidGuessError):
        g.apply_feedback("sal3t", "XXXXG")
    assert g.store.is_empty()
    assert g.turn == 0 and g.history == []
    assert g.current_candidates() == before


def test_lowercase_feedback_accepted():
    g = Game(WORDS)
    g.apply_feedback("SALET", "xxxxg")
    assert g.history == [("salet", "XXXXG")]


def test_contradiction_exhausts_the_game():
    g = Game(["robot", "robin"])
    g.apply_feedback("rxxxx", "XXXXX")        # no 'r' at all
    assert g.is_exhausted() and not g.is_solved()
    with pytest.raises(ContradictionError):
        g.next_guess()


def test_rejected_word_stays_out():
    g = Game(WORDS, solver="ranked")
    g.reject_guess("mound")
    assert "mound" not in g.candidates
    g.apply_feedback("salet", feedback("salet", "mound"))
    assert "mound" not in g.candidates
    assert "hound" in g.candidates
    assert g.store.bounds()        # constraints came from the feedback only


def test_rejected_opener_falls_back_to_top_candidate():
    g = Game(WORDS + ["salet"])
    g.reject_guess("salet")
    assert g.next_guess() == g.candidates[0]


def test_reset_starts_a_new_game():
    g = Game(WORDS)
    g.apply_feedback("salet", "XXXXG")
    g.reject_guess("robot")
    g.reset()
    assert g.turn == 0 and g.history == []
    assert len(g.candidates) == len(WORDS)
    assert g.next_guess() == "salet"


def test_explicit_turn_index():
    g = Game(WORDS)
    assert g.next_guess(turn=1) == "frogs"


def test_verbose_logs_at_info(caplog):
    corpus = Corpus(WORDS)
    with caplog.at_level(logging.INFO, logger="wordsieve.game"):
        Game(corpus, verbose=False).next_guess()
        assert not caplog.records
        Game(corpus, verbose=True).next_guess()
    assert any("Try: salet" in r.getMessage() for r in caplog.records)
