import pytest

import config
from rotated_divisor import (
    CycleNotClosedError,
    DigitOverflowError,
    Pattern,
    PatternError,
    digits_to_int,
    fold_pattern,
    generate_pattern,
    iter_patterns,
    modular_sum,
    pattern_contributions,
    repunit_contribution,
)


def test_142857_pattern():
    p = generate_pattern(5, 7)
    assert p.low_digits == (7, 5, 8, 2, 4)
    assert p.period == 6
    assert p.leading_digit == 1
    assert p.is_valid
    assert p.low_value == 42857


def test_leading_zero_pattern_is_discarded():
    # 052631578947368421
    p = generate_pattern(2, 1)
    assert p.low_digits == (1, 2, 4, 8, 6)
    assert p.period == 18
    assert p.leading_digit == 0
    assert not p.is_valid
    assert fold_pattern(p, 100) == 0


def test_period_13_pattern():
    # 1012658227848 × 8 = 8101265822784
    p = generate_pattern(8, 8)
    assert p.period == 13
    assert p.leading_digit == 1
    assert p.low_value == 27848
    assert fold_pattern(p, 100) == 27848 * 7 % 100000


@pytest.mark.parametrize("multiplier,period", [
    (2, 18), (3, 28), (4, 6), (6, 58), (7, 22), (8, 13), (9, 44),
])
def test_periods_by_multiplier(multiplier, period):
    for digit in config.DIGITS:
        assert generate_pattern(multiplier, digit).period == period


def test_multiplier_5_periods():
    periods = {d: generate_pattern(5, d).period for d in config.DIGITS}
    assert periods.pop(7) == 6
    assert set(periods.values()) == {42}


def test_valid_exactly_when_digit_not_below_multiplier():
    for p in iter_patterns():
        assert p.is_valid == (p.digit >= p.multiplier), p


def test_iter_patterns_covers_all_pairs():
    pairs = [(p.multiplier, p.digit) for p in iter_patterns()]
    assert len(pairs) == 72
    assert len(set(pairs)) == 72


@pytest.mark.parametrize("multiplier,digit", [(1, 5), (10, 5), (0, 1), (5, 0), (5, 10)])
def test_generate_rejects_out_of_domain(multiplier, digit):
    with pytest.raises(ValueError):
        generate_pattern(multiplier, digit)


def test_step_cap():
    with pytest.raises(CycleNotClosedError):
        generate_pattern(5, 7, max_steps=5)
    assert generate_pattern(5, 7, max_steps=6).period == 6


def test_cycle_error_is_pattern_error():
    assert issubclass(CycleNotClosedError, PatternError)
    assert issubclass(DigitOverflowError, PatternError)


def test_digits_to_int_little_endian():
    assert digits_to_int((7, 5, 8, 2, 4)) == 42857
    assert digits_to_int((9, 9, 9, 9, 9)) == 99999
    assert digits_to_int(()) == 0


def test_digits_to_int_overflow():
    with pytest.raises(DigitOverflowError):
        digits_to_int((0, 0, 0, 0, 0, 1))
    with pytest.raises(DigitOverflowError):
        digits_to_int((1, 2), limit=21)


def test_digits_to_int_bad_digit():
    with pytest.raises(DigitOverflowError):
        digits_to_int((1, 10, 0))


def test_fold_short_period_is_internal_error():
    p = Pattern(multiplier=3, digit=3, low_digits=(3, 0, 0, 0, 0), period=2, leading_digit=3)
    with pytest.raises(PatternError):
        fold_pattern(p, 10)


def test_fold_no_room_for_pattern():
    assert fold_pattern(generate_pattern(5, 7), 5) == 0
    assert fold_pattern(generate_pattern(5, 7), 6) == 42857
    assert fold_pattern(generate_pattern(5, 7), 12) == 85714


def test_repunit_contribution_full_range():
    # 长度 2..100：1233 + 96 × 11111
    expected = sum(i * (1233 + 96 * 11111) for i in range(1, 10)) % 100000
    assert repunit_contribution(100) == expected == 55005


def test_repunit_contribution_excludes_single_digits():
    assert repunit_contribution(1) == 0
    assert repunit_contribution(2) == 45 * 11
    assert repunit_contribution(4) == 45 * 1233 % 100000


def test_repunit_contribution_rejects_zero_length():
    with pytest.raises(ValueError):
        repunit_contribution(0)


def test_pattern_contributions_full_range():
    assert sum(pattern_contributions(100)) % 100000 == 4201


def test_modular_sum():
    assert modular_sum(100) == 59206


def test_modular_sum_small_ranges():
    assert modular_sum(1) == 0
    assert modular_sum(2) == 495
    assert modular_sum(6) == 98331


def test_modular_sum_is_repeatable():
    assert modular_sum() == modular_sum()


def test_modular_sum_rejects_bad_exponent():
    with pytest.raises(ValueError):
        modular_sum(0)
