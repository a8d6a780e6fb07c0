"""
Tests for the exponentiation cross-check action.

**Purpose**: Verify argument handling, settings overrides and exit codes of
actions/cross_check_exponentiation.py without spawning a subprocess.
"""

import sys
from pathlib import Path

import pandas as pd
import pytest

# Add project root to path so we can import actions module
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from actions.cross_check_exponentiation import apply_overrides, build_parser, main
from binexp.config.settings import CrossCheckSettings, reset_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run each test against default settings."""
    for name in [
        "BINEXP_CROSS_CHECK_TRIALS",
        "BINEXP_CROSS_CHECK_SEED",
        "BINEXP_CROSS_CHECK_MAX_BASE",
        "BINEXP_CROSS_CHECK_MAX_EXPONENT",
        "BINEXP_CROSS_CHECK_MAX_MODULUS",
    ]:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_apply_overrides_keeps_unset_flags():
    """Test that only flags given on the command line replace loaded values."""
    loaded = CrossCheckSettings(trials=300, seed=9, max_exponent=100)
    args = build_parser().parse_args(["--trials", "25"])

    settings = apply_overrides(loaded, args)

    assert settings.trials == 25
    assert settings.seed == 9
    assert settings.max_exponent == 100


def test_apply_overrides_validates():
    """Test that invalid overrides fail validation."""
    args = build_parser().parse_args(["--max-modulus", "1"])

    with pytest.raises(ValueError, match="max_modulus"):
        apply_overrides(CrossCheckSettings(), args)


def test_main_success_exit_code(capsys):
    """Test that a matching run exits with 0 and prints a summary."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--trials", "30", "--seed", "2"])

    assert exc_info.value.code == 0
    out = capsys.readouterr().out
    assert "Trials: 30" in out
    assert "All trials matched" in out


def test_main_writes_csv(tmp_path):
    """Test that --output writes the per-trial table."""
    output = tmp_path / "results" / "cross_check.csv"

    with pytest.raises(SystemExit) as exc_info:
        main(["--trials", "12", "--seed", "4", "--output", str(output)])

    assert exc_info.value.code == 0
    table = pd.read_csv(output)
    assert len(table) == 12
    assert table["power_matches"].all()
    assert table["power_mod_matches"].all()


def test_main_invalid_configuration_exit_code(capsys):
    """Test that invalid settings exit with 2 before running."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--trials", "0"])

    assert exc_info.value.code == 2
    assert "Invalid cross-check configuration" in capsys.readouterr().out


def test_main_invalid_environment_exit_code(monkeypatch):
    """Test that a bad environment variable is reported as configuration error."""
    monkeypatch.setenv("BINEXP_CROSS_CHECK_SEED", "abc")

    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2


def test_main_mismatch_exit_code(monkeypatch, capsys):
    """Test that any mismatch exits with 1 and lists the offending rows."""
    import actions.cross_check_exponentiation as action
    from binexp.verification import cross_check

    def broken_run(settings):
        results = cross_check.run_cross_check(settings)
        results.loc[results.index[0], "power_mod_matches"] = False
        return results

    monkeypatch.setattr(action, "run_cross_check", broken_run)

    with pytest.raises(SystemExit) as exc_info:
        main(["--trials", "5", "--seed", "8"])

    assert exc_info.value.code == 1
    assert "First mismatching trials" in capsys.readouterr().out
