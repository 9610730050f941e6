import itertools
import random

import pytest

from recursia.chisquared import MAX_OUTCOMES, is_close


def _cycle(values):
    it = itertools.cycle(values)
    return lambda: next(it)


def _never_called():
    raise AssertionError("experiment should not run")


def test_no_outcomes_passes_without_running():
    assert is_close([], _never_called) is True


def test_single_outcome_passes_without_running():
    assert is_close([1.0], _never_called) is True


def test_exact_uniform_frequencies_pass():
    assert is_close([0.25, 0.25, 0.25, 0.25], _cycle([0, 1, 2, 3])) is True


def test_exact_weighted_frequencies_pass():
    assert is_close([0.5, 0.25, 0.25], _cycle([0, 0, 1, 2])) is True


def test_seeded_random_uniform_passes():
    rng = random.Random(1234)
    assert is_close([1 / 6] * 6, lambda: rng.randrange(6)) is True


def test_constant_outcome_fails_uniform():
    assert is_close([0.5, 0.5], lambda: 0) is False


def test_impossible_event_occurring_fails():
    assert is_close([0.5, 0.5, 0.0], _cycle([0, 1, 2])) is False


def test_impossible_event_never_occurring_is_ignored():
    assert is_close([0.5, 0.0, 0.5], _cycle([0, 2])) is True


def test_only_one_possible_outcome_fails_threshold():
    assert is_close([1.0, 0.0], lambda: 0) is False


def test_outcome_too_large_raises():
    with pytest.raises(ValueError, match="Illegal experiment outcome"):
        is_close([0.5, 0.5], lambda: 2)


def test_negative_outcome_raises():
    with pytest.raises(ValueError, match="valid range is 0 to 1"):
        is_close([0.5, 0.5], lambda: -1)


def test_too_many_outcomes_raises():
    probabilities = [1 / (MAX_OUTCOMES + 1)] * (MAX_OUTCOMES + 1)
    with pytest.raises(ValueError, match="too large"):
        is_close(probabilities, _never_called)