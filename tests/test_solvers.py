import pytest
from wordsieve.engine import Corpus, ConstraintStore
from wordsieve.solvers import create_solver, get_solver_ids
from wordsieve.solvers.information_gain import information_score, pick_information_gain_word
from wordsieve.solvers.minimax import guess_pool, pick_minimax_guess, worst_bucket

OPENED = set("saletfrogs")


def _state(turn, candidates, corpus=None, store=None):
    return {
        "turn": turn,
        "candidates": candidates,
        "corpus": corpus or Corpus(candidates),
        "constraints": store or ConstraintStore(),
    }


def test_registry_lists_solvers():
    assert get_solver_ids() == ["adaptive", "ranked"]
    with pytest.raises(ValueError):
        create_solver("nope")


# --- information gain ---

def test_information_gain_prefers_untested_letters():
    tested = set(OPENED)
    pick = pick_information_gain_word(["tiger", "mince", "humid"], ConstraintStore(), tested)
    assert pick == "humid"
    assert set("humid") <= tested


def test_information_gain_penalizes_yellow_at_same_position():
    store = ConstraintStore()
    store.apply("crane", "XYXXX")      # 'r' somewhere, not in position 1
    yellow_at = [store.present_at_position(i) for i in range(5)]
    required = store.required_letters()
    tested = set("crane")
    assert information_score("droit", tested, yellow_at, required) == 7
    assert information_score("dirty", tested, yellow_at, required) == 9
    assert pick_information_gain_word(["droit", "dirty"], store, tested) == "dirty"


def test_information_gain_avoids_known_greens_when_possible():
    store = ConstraintStore()
    store.apply("house", "GXXXX")
    assert pick_information_gain_word(["humid", "cubic"], store, set(OPENED)) == "cubic"
    # every candidate sits on the green: fall back to the best overall
    assert pick_information_gain_word(["hunch", "humid"], store, set(OPENED)) == "humid"


# --- minimax ---

def test_worst_bucket():
    assert worst_bucket("salet", ["robot", "robin"]) == 1
    assert worst_bucket("mound", ["round", "hound", "mound"]) == 2


def test_minimax_picks_smallest_worst_case():
    cands = ["mound", "round", "hound", "rhino"]
    assert pick_minimax_guess(cands, []) == ("rhino", 1)


def test_minimax_ties_keep_pool_order():
    cands = ["hatch", "latch", "match", "patch", "watch"]
    guess, worst = pick_minimax_guess(cands, [])
    assert guess == "hatch" and worst == 4


def test_minimax_pool_falls_back_to_corpus_prefix():
    corpus_words = ["aaaaa", "bbbbb", "ccccc"]
    assert guess_pool(["x", "y"], corpus_words, candidate_pool_limit=3) == ["x", "y"]
    assert guess_pool(["x", "y", "z"], corpus_words, candidate_pool_limit=3,
                      corpus_pool_size=2) == ["aaaaa", "bbbbb"]


# --- strategies ---

def test_adaptive_state_machine():
    cands = ["mound", "round", "hound", "rhino"]
    corpus = Corpus(cands)
    solver = create_solver("adaptive")
    solver.reset(corpus)

    assert solver.next_guess(_state(0, cands, corpus)) == "salet"
    assert solver.next_guess(_state(1, cands, corpus)) == "frogs"
    assert OPENED <= solver.tested

    # turn 3..5 with few candidates: minimax
    assert solver.next_guess(_state(3, cands, corpus)) == "rhino"
    # past the minimax window: top-ranked candidate
    assert solver.next_guess(_state(6, cands, corpus)) == "mound"


def test_adaptive_turn_two_uses_information_gain():
    cands = ["tiger", "mince", "humid"]
    solver = create_solver("adaptive")
    solver.reset(Corpus(cands))
    solver.next_guess(_state(0, cands))
    solver.next_guess(_state(1, cands))
    assert solver.next_guess(_state(2, cands)) == "humid"


def test_adaptive_skips_minimax_for_large_sets():
    cands = ["mound", "round", "hound", "rhino"]
    solver = create_solver("adaptive", minimax_max_candidates=3)
    solver.reset(Corpus(cands))
    assert solver.next_guess(_state(3, cands)) == "mound"


def test_custom_openers_and_reset():
    solver = create_solver("ranked", openers=["crane"])
    cands = ["mound", "round"]
    solver.reset(Corpus(cands))
    assert solver.next_guess(_state(0, cands)) == "crane"
    assert solver.next_guess(_state(1, cands)) == "mound"
    solver.reset(Corpus(cands))
    assert solver.tested == set()
