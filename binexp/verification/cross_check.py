"""
Randomized cross-check of power() and power_mod() against built-in pow().

**Conceptual**: Python's built-in pow() is arbitrary precision and its
three-argument form is a trusted modular exponentiation. That makes it a
convenient oracle:
  - power(a, n) must equal pow(a, n, 2**64) folded into the signed int64
    range (wrap_int64), since int64 wraparound is arithmetic modulo 2**64.
  - power_mod(a, n, m) must equal pow(a, n, m) whenever m * m fits in int64.

This module draws seeded random triples with numpy, evaluates both sides and
tabulates the results in a pandas DataFrame so mismatches are easy to inspect
or save to CSV.
"""

import numpy as np
import pandas as pd

from binexp.arithmetic.exponentiation import power, power_mod
from binexp.config.settings import CrossCheckSettings
from binexp.utils.math import UINT64_MASK, wrap_int64


INPUT_COLUMNS = ["base", "exponent", "modulus"]

RESULT_COLUMNS = INPUT_COLUMNS + [
    "power",
    "power_reference",
    "power_matches",
    "power_mod",
    "power_mod_reference",
    "power_mod_matches",
]


def generate_cross_check_inputs(settings: CrossCheckSettings) -> pd.DataFrame:
    """
    Draw random (base, exponent, modulus) triples.

    **Functionally**:
    - Bases are uniform on [-max_base, max_base].
    - Exponents are uniform on [0, max_exponent].
    - Moduli are uniform on [2, max_modulus]. Modulus 1 is left out because
      built-in pow(a, 0, 1) returns 0 while power_mod(a, 0, 1) keeps its
      initial result of 1.
    - The same seed always yields the same table.

    Args:
        settings: Cross-check settings (trial count, seed, bounds).

    Returns:
        DataFrame with int64 columns base, exponent, modulus and one row per trial.
    """
    rng = np.random.default_rng(settings.seed)
    size = settings.trials

    bases = rng.integers(
        -settings.max_base, settings.max_base, size=size, dtype=np.int64, endpoint=True
    )
    exponents = rng.integers(
        0, settings.max_exponent, size=size, dtype=np.int64, endpoint=True
    )
    moduli = rng.integers(
        2, settings.max_modulus, size=size, dtype=np.int64, endpoint=True
    )

    return pd.DataFrame({
        "base": bases,
        "exponent": exponents,
        "modulus": moduli,
    })


def evaluate_cross_check(inputs: pd.DataFrame) -> pd.DataFrame:
    """
    Evaluate power()/power_mod() and their references for each input row.

    Computed values are stored as Python ints in object columns.

    Args:
        inputs: DataFrame with columns base, exponent, modulus.

    Returns:
        Copy of inputs with the RESULT_COLUMNS added.

    Raises:
        KeyError: If a required input column is missing.
    """
    missing = [col for col in INPUT_COLUMNS if col not in inputs.columns]
    if missing:
        raise KeyError(
            f"Cross-check inputs missing required columns: {missing}. "
            f"Available columns: {list(inputs.columns)}"
        )

    bases = inputs["base"].tolist()
    exponents = inputs["exponent"].tolist()
    moduli = inputs["modulus"].tolist()

    power_values = [power(b, e) for b, e in zip(bases, exponents)]
    power_refs = [
        wrap_int64(pow(b, e, UINT64_MASK + 1)) for b, e in zip(bases, exponents)
    ]
    power_mod_values = [
        power_mod(b, e, m) for b, e, m in zip(bases, exponents, moduli)
    ]
    power_mod_refs = [pow(b, e, m) for b, e, m in zip(bases, exponents, moduli)]

    results = inputs.copy()
    results["power"] = pd.Series(power_values, index=inputs.index, dtype=object)
    results["power_reference"] = pd.Series(power_refs, index=inputs.index, dtype=object)
    results["power_matches"] = [v == r for v, r in zip(power_values, power_refs)]
    results["power_mod"] = pd.Series(power_mod_values, index=inputs.index, dtype=object)
    results["power_mod_reference"] = pd.Series(
        power_mod_refs, index=inputs.index, dtype=object
    )
    results["power_mod_matches"] = [
        v == r for v, r in zip(power_mod_values, power_mod_refs)
    ]

    return results[RESULT_COLUMNS]


def run_cross_check(settings: CrossCheckSettings) -> pd.DataFrame:
    """
    Generate random inputs per settings and evaluate them.

    Args:
        settings: Cross-check settings.

    Returns:
        Per-trial results DataFrame (see evaluate_cross_check).
    """
    return evaluate_cross_check(generate_cross_check_inputs(settings))


def summarize_cross_check(results: pd.DataFrame) -> dict:
    """
    Summarize a cross-check results table.

    Args:
        results: Output of evaluate_cross_check / run_cross_check.

    Returns:
        Dictionary with:
          - trials: number of rows
          - power_mismatches: rows where power() disagreed with its reference
          - power_mod_mismatches: rows where power_mod() disagreed with pow()
          - all_match: True when both mismatch counts are zero
    """
    power_mismatches = int((~results["power_matches"].astype(bool)).sum())
    power_mod_mismatches = int((~results["power_mod_matches"].astype(bool)).sum())

    return {
        "trials": int(len(results)),
        "power_mismatches": power_mismatches,
        "power_mod_mismatches": power_mod_mismatches,
        "all_match": power_mismatches == 0 and power_mod_mismatches == 0,
    }
