"""
Configuration settings for the exponentiation tooling.

**Conceptual**: The exponentiation routines themselves take no configuration;
they are pure functions. The tooling around them (the randomized cross-check
that compares power()/power_mod() against Python's built-in pow()) does, and
this module provides strongly-typed, validated settings objects for it. Values
come from environment variables, optionally via a .env file at the project
root.

**Why centralized config?**
  - Single source of truth for tunables (trial counts, seeds, input ranges).
  - Easy to test (construct settings directly instead of reading the environment).
  - Fail-fast validation (a bad BINEXP_* value is reported at startup, with the
    variable name, not deep inside a run).

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from binexp.utils.math import INT64_MAX, MAX_EXACT_MODULUS

# Load .env from project root (no-op when the file does not exist)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    """Read an optional integer environment variable, failing with its name."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw}")


@dataclass(frozen=True)
class CrossCheckSettings:
    """
    Configuration for the randomized exponentiation cross-check.

    **Conceptual**: The cross-check draws random (base, exponent, modulus)
    triples and compares power()/power_mod() with arbitrary-precision
    references. These settings bound the random draws so that every trial is
    meaningful:
      - Moduli are capped at MAX_EXACT_MODULUS, the largest m with m * m
        inside int64. Above it power_mod() deliberately wraps and would no
        longer match the exact reference.
      - Exponents are capped so trials stay fast (O(log exponent) each).

    Attributes:
        trials: Number of random triples to evaluate (default 1000).
        seed: Seed for numpy's random generator. None draws fresh entropy,
              so each run sees different inputs.
        max_base: Bases are drawn from [-max_base, max_base].
        max_exponent: Exponents are drawn from [0, max_exponent].
        max_modulus: Moduli are drawn from [1, max_modulus].
    """
    trials: int = 1000
    seed: Optional[int] = None
    max_base: int = (1 << 31) - 1
    max_exponent: int = 1 << 20
    max_modulus: int = (1 << 31) - 1

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.trials < 1:
            raise ValueError(
                f"trials must be at least 1, got: {self.trials}"
            )
        if self.seed is not None and self.seed < 0:
            raise ValueError(
                f"seed must be non-negative, got: {self.seed}"
            )
        if not 1 <= self.max_base <= INT64_MAX:
            raise ValueError(
                f"max_base must be in [1, {INT64_MAX}], got: {self.max_base}"
            )
        if not 0 <= self.max_exponent <= INT64_MAX:
            raise ValueError(
                f"max_exponent must be in [0, {INT64_MAX}], got: {self.max_exponent}"
            )
        if not 2 <= self.max_modulus <= MAX_EXACT_MODULUS:
            raise ValueError(
                f"max_modulus must be in [2, {MAX_EXACT_MODULUS}] so that "
                f"modulus * modulus fits in int64, got: {self.max_modulus}"
            )

    @classmethod
    def from_env(cls) -> "CrossCheckSettings":
        """
        Load cross-check settings from environment variables.

        **Environment variables** (all optional):
          - BINEXP_CROSS_CHECK_TRIALS: Number of trials (default 1000).
          - BINEXP_CROSS_CHECK_SEED: Random seed (default: unset, fresh entropy).
          - BINEXP_CROSS_CHECK_MAX_BASE: Base magnitude bound (default 2**31 - 1).
          - BINEXP_CROSS_CHECK_MAX_EXPONENT: Exponent bound (default 2**20).
          - BINEXP_CROSS_CHECK_MAX_MODULUS: Modulus bound (default 2**31 - 1).

        Returns:
            CrossCheckSettings object with values loaded from environment.

        Raises:
            ValueError: If a variable is not an integer or fails validation.

        Usage example:
            >>> # In .env file:
            >>> # BINEXP_CROSS_CHECK_TRIALS=5000
            >>> # BINEXP_CROSS_CHECK_SEED=42
            >>>
            >>> settings = CrossCheckSettings.from_env()
            >>> print(settings.trials)  # 5000
        """
        defaults = cls()
        return cls(
            trials=_int_from_env("BINEXP_CROSS_CHECK_TRIALS", defaults.trials),
            seed=_int_from_env("BINEXP_CROSS_CHECK_SEED", defaults.seed),
            max_base=_int_from_env("BINEXP_CROSS_CHECK_MAX_BASE", defaults.max_base),
            max_exponent=_int_from_env(
                "BINEXP_CROSS_CHECK_MAX_EXPONENT", defaults.max_exponent
            ),
            max_modulus=_int_from_env(
                "BINEXP_CROSS_CHECK_MAX_MODULUS", defaults.max_modulus
            ),
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the project.

    **Conceptual**: Top-level settings object aggregating subsystem settings.
    Today that is only the cross-check; new tooling adds its own section here.

    Attributes:
        cross_check: Settings for the randomized cross-check.
    """
    cross_check: CrossCheckSettings = field(default_factory=CrossCheckSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Returns:
            Settings object with all subsystem settings loaded from environment.

        Raises:
            ValueError: If any subsystem setting is invalid.
        """
        return cls(cross_check=CrossCheckSettings.from_env())


# Lazily loaded singleton; tests construct Settings(...) directly or call reset_settings()
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          reset_settings()
          monkeypatch.setenv("BINEXP_CROSS_CHECK_TRIALS", "10")
          assert get_settings().cross_check.trials == 10
      ```
    """
    global _default_settings
    _default_settings = None
