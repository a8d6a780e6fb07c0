"""
Tests for binexp/verification/cross_check.py

Small seeded runs keep these fast; hand-built tables check the evaluation
and summary logic on known inputs.
"""

import pandas as pd
import pytest

from binexp.config.settings import CrossCheckSettings
from binexp.verification.cross_check import (
    INPUT_COLUMNS,
    RESULT_COLUMNS,
    evaluate_cross_check,
    generate_cross_check_inputs,
    run_cross_check,
    summarize_cross_check,
)


def test_generate_inputs_shape_and_columns():
    """Test that one row per trial is generated with the input columns."""
    settings = CrossCheckSettings(trials=50, seed=1)
    inputs = generate_cross_check_inputs(settings)

    assert list(inputs.columns) == INPUT_COLUMNS
    assert len(inputs) == 50


def test_generate_inputs_respects_bounds():
    """Test that every draw lies within the configured ranges."""
    settings = CrossCheckSettings(
        trials=500, seed=3, max_base=10, max_exponent=5, max_modulus=4
    )
    inputs = generate_cross_check_inputs(settings)

    assert inputs["base"].between(-10, 10).all()
    assert inputs["exponent"].between(0, 5).all()
    assert inputs["modulus"].between(2, 4).all()


def test_generate_inputs_is_reproducible_with_seed():
    """Test that the same seed yields the same table, different seeds differ."""
    first = generate_cross_check_inputs(CrossCheckSettings(trials=20, seed=11))
    second = generate_cross_check_inputs(CrossCheckSettings(trials=20, seed=11))
    other = generate_cross_check_inputs(CrossCheckSettings(trials=20, seed=12))

    pd.testing.assert_frame_equal(first, second)
    assert not first.equals(other)


def test_run_cross_check_all_match():
    """Test a seeded run end to end: every trial should match its reference."""
    results = run_cross_check(CrossCheckSettings(trials=200, seed=0))
    summary = summarize_cross_check(results)

    assert list(results.columns) == RESULT_COLUMNS
    assert summary == {
        "trials": 200,
        "power_mismatches": 0,
        "power_mod_mismatches": 0,
        "all_match": True,
    }


def test_run_cross_check_wide_inputs_all_match():
    """Test full-width int64 bases, where power() wraps on nearly every trial."""
    settings = CrossCheckSettings(
        trials=100,
        seed=5,
        max_base=2 ** 63 - 1,
        max_exponent=2 ** 40,
        max_modulus=3037000499,
    )
    summary = summarize_cross_check(run_cross_check(settings))

    assert summary["all_match"]


def test_evaluate_cross_check_known_rows():
    """Test evaluation on the reference vectors."""
    inputs = pd.DataFrame({
        "base": [2, 15, 2],
        "exponent": [3, 20, 0],
        "modulus": [5, 1_000_000_007, 3],
    })
    results = evaluate_cross_check(inputs)

    assert results["power"].tolist() == [8, 4664335276710460609, 1]
    assert results["power_mod"].tolist() == [3, 393128630, 1]
    assert results["power_matches"].all()
    assert results["power_mod_matches"].all()


def test_evaluate_cross_check_does_not_mutate_inputs():
    """Test that the input table is left untouched."""
    inputs = pd.DataFrame({"base": [3], "exponent": [4], "modulus": [7]})
    evaluate_cross_check(inputs)

    assert list(inputs.columns) == INPUT_COLUMNS


def test_evaluate_cross_check_missing_columns():
    """Test that a table without the input columns raises KeyError."""
    inputs = pd.DataFrame({"base": [2], "exponent": [3]})

    with pytest.raises(KeyError, match="modulus"):
        evaluate_cross_check(inputs)


def test_summarize_cross_check_counts_mismatches():
    """Test mismatch counting on a hand-built results table."""
    results = pd.DataFrame({
        "power_matches": [True, False, True, False],
        "power_mod_matches": [True, True, False, True],
    })
    summary = summarize_cross_check(results)

    assert summary == {
        "trials": 4,
        "power_mismatches": 2,
        "power_mod_mismatches": 1,
        "all_match": False,
    }
