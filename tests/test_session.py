import random

import pytest

from answers import FractionAnswer
from generator import Mode, Question
from session import SessionNotFound, SessionState, SessionStore, start_session, submit_answer, switch_mode


def _consistent(state):
    return state.score.correct + state.score.wrong == len(state.history)


def test_multiplication_round(scripted):
    state = start_session(Mode.MULTIPLICATION, scripted([7, 8]))
    assert state.question.display_text == "7 × 8"

    state, res = submit_answer(state, "56", scripted([3, 4]))
    assert res.is_correct
    assert state.score.correct == 1 and state.score.wrong == 0
    assert state.history[0].render() == "7 × 8 = 56 ✅"
    assert state.question.display_text == "3 × 4"


def test_division_round_wrong(scripted):
    state = start_session(Mode.DIVISION, scripted([4, 9]))
    assert state.question.display_text == "36 ÷ 4"

    state, res = submit_answer(state, "8", scripted([2, 2]))
    assert not res.is_correct
    assert state.score.wrong == 1
    assert state.history[0].render() == "36 ÷ 4 = 8 ❌ (Should be 9)"


def test_fraction_round(scripted):
    state = start_session(Mode.FRACTIONS, scripted([0, 3, 1, 2]))
    assert state.question.display_text == "1/5 + 2/5"
    assert state.question.canonical_answer == FractionAnswer(3, 5)

    state, res = submit_answer(state, "3/5", random.Random(0))
    assert res.is_correct and state.score.correct == 1


def test_rejected_input_leaves_state_alone():
    state = SessionState(Mode.FRACTIONS, Question(Mode.FRACTIONS, "1/4 + 1/4", FractionAnswer(1, 2)))
    for raw in ["abc", "3/", "/4", "5/0", ""]:
        new_state, res = submit_answer(state, raw, random.Random(0))
        assert not res.accepted
        assert new_state is state


def test_history_is_most_recent_first(scripted):
    state = start_session(Mode.MULTIPLICATION, scripted([2, 3]))
    state, _ = submit_answer(state, "6", scripted([4, 5]))
    state, _ = submit_answer(state, "21", scripted([6, 7]))
    assert [e.question_text for e in state.history] == ["4 × 5", "2 × 3"]
    assert [e.correct for e in state.history] == [False, True]


def test_score_monotonic_and_matches_history():
    rng = random.Random(3)
    state = start_session(Mode.ORDER, rng)
    prev = state.score
    for i in range(60):
        if i % 10 == 0:
            state = switch_mode(state, list(Mode)[i // 10 % 4], rng)
        answer = str(state.question.canonical_answer) if i % 3 else "0/1"
        state, _ = submit_answer(state, answer, rng)
        assert state.score.correct >= prev.correct and state.score.wrong >= prev.wrong
        assert _consistent(state)
        prev = state.score
    assert len(state.history) == 60


def test_switch_mode_keeps_score_and_history(scripted):
    state = start_session(Mode.MULTIPLICATION, scripted([7, 8]))
    state, _ = submit_answer(state, "56", scripted([2, 2]))
    switched = switch_mode(state, Mode.DIVISION, scripted([4, 9]))
    assert switched.mode is Mode.DIVISION
    assert switched.question.display_text == "36 ÷ 4"
    assert switched.score == state.score
    assert switched.history == state.history


def test_store_roundtrip():
    store = SessionStore()
    sid, state = store.create(Mode.DIVISION, seed=5)
    assert store.get(sid) == state
    answer = str(state.question.canonical_answer)
    new_state, res = store.submit(sid, answer)
    assert res.is_correct
    assert store.get(sid) == new_state
    assert store.switch_mode(sid, Mode.FRACTIONS).mode is Mode.FRACTIONS
    assert store.count() == 1


def test_seeded_sessions_repeat():
    store = SessionStore()
    _, a = store.create(Mode.ORDER, seed=11)
    _, b = store.create(Mode.ORDER, seed=11)
    assert a.question == b.question


def test_store_evicts_least_recently_used():
    store = SessionStore(max_sessions=2)
    first, _ = store.create()
    second, _ = store.create()
    store.get(first)
    third, _ = store.create()
    assert store.count() == 2
    store.get(first)
    store.get(third)
    with pytest.raises(SessionNotFound):
        store.get(second)


def test_store_delete():
    store = SessionStore()
    sid, _ = store.create()
    store.delete(sid)
    assert store.count() == 0
    with pytest.raises(SessionNotFound):
        store.delete(sid)
    with pytest.raises(SessionNotFound):
        store.submit(sid, "1")
