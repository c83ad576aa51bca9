import pytest

from answers import FractionAnswer, IntegerAnswer
from generator import Mode
from validator import validate

HALF = FractionAnswer(1, 2)


@pytest.mark.parametrize("raw", ["1/2", "2/4", "3/6", " 4 / 8 "])
def test_equivalent_fractions_are_correct(raw):
    res = validate(Mode.FRACTIONS, raw, HALF)
    assert res.accepted and res.is_correct
    assert res.expected_text == "1/2"
    assert res.feedback == "YES!"


def test_fraction_keeps_user_form_in_text():
    res = validate(Mode.FRACTIONS, "06/12", HALF)
    assert res.is_correct
    assert res.user_answer_text == "6/12"


def test_wrong_fraction_is_scored():
    res = validate(Mode.FRACTIONS, "2/3", HALF)
    assert res.accepted and not res.is_correct
    assert res.feedback == "OOPS!"


def test_zero_fraction():
    assert validate(Mode.FRACTIONS, "0/5", FractionAnswer(0, 1)).is_correct


@pytest.mark.parametrize("raw", ["abc", "3/", "/4", "5/0", "", "   ", "-1/2", "1.5/2", "1/2/3"])
def test_malformed_fractions_rejected(raw):
    res = validate(Mode.FRACTIONS, raw, HALF)
    assert res.accepted is False
    assert res.is_correct is False
    assert res.feedback


def test_integer_answers():
    res = validate(Mode.MULTIPLICATION, "56", IntegerAnswer(56))
    assert res.accepted and res.is_correct
    assert res.user_answer_text == "56"

    res = validate(Mode.ORDER, " 56.0 ", IntegerAnswer(56))
    assert res.is_correct and res.user_answer_text == "56"

    res = validate(Mode.DIVISION, "8", IntegerAnswer(9))
    assert res.accepted and not res.is_correct
    assert res.expected_text == "9"


def test_non_numeric_is_wrong_not_rejected():
    res = validate(Mode.DIVISION, "nine", IntegerAnswer(9))
    assert res.accepted and not res.is_correct
    assert res.user_answer_text == "NaN"


def test_fraction_text_in_integer_mode_is_wrong():
    res = validate(Mode.MULTIPLICATION, "3/4", IntegerAnswer(3))
    assert res.accepted and not res.is_correct


def test_empty_rejected_in_every_mode():
    for mode in Mode:
        assert validate(mode, "  ", IntegerAnswer(1)).accepted is False
        assert validate(mode, None, IntegerAnswer(1)).accepted is False


def test_over_long_answers_rejected():
    res = validate(Mode.FRACTIONS, "1" * 5000 + "/2", HALF)
    assert res.accepted is False
    assert "too long" in res.feedback.lower()

    res = validate(Mode.MULTIPLICATION, "5" * 101, IntegerAnswer(5))
    assert res.accepted is False


@pytest.mark.parametrize("raw", ["0x38", "0X38", "0o70", "0b111000"])
def test_radix_literals_read_as_numbers(raw):
    res = validate(Mode.MULTIPLICATION, raw, IntegerAnswer(56))
    assert res.accepted and res.is_correct
    assert res.user_answer_text == "56"


def test_signed_radix_literal_is_nan():
    res = validate(Mode.MULTIPLICATION, "-0x38", IntegerAnswer(-56))
    assert res.accepted and not res.is_correct
    assert res.user_answer_text == "NaN"
