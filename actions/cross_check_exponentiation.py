#!/usr/bin/env python3
"""
Cross-check power() and power_mod() against Python's built-in pow().

**Purpose**: Draws random (base, exponent, modulus) triples and confirms that
  - power(a, n) equals pow(a, n, 2**64) folded into the signed int64 range, and
  - power_mod(a, n, m) equals pow(a, n, m),
for every trial. Run it after touching the exponentiation loop.

**Usage**:
    # Default settings (from environment / .env, else built-in defaults)
    python actions/cross_check_exponentiation.py

    # Reproducible run with more trials
    python actions/cross_check_exponentiation.py --trials 10000 --seed 42

    # Save the per-trial table for inspection
    python actions/cross_check_exponentiation.py --seed 7 --output data/results/cross_check.csv

**Configuration**: Command-line flags override BINEXP_CROSS_CHECK_* environment
variables (see binexp/config/settings.py), which override built-in defaults.

**Exit codes**:
  - 0: Every trial matched its reference
  - 1: At least one mismatch
  - 2: Invalid configuration
"""

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import Optional

# Add project root to Python path so we can import binexp modules
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from binexp.config.settings import CrossCheckSettings, get_settings
from binexp.verification.cross_check import run_cross_check, summarize_cross_check


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser for this action."""
    parser = argparse.ArgumentParser(
        description="Cross-check power()/power_mod() against Python's built-in pow().",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--trials",
        type=int,
        default=None,
        help="Number of random trials. Default: BINEXP_CROSS_CHECK_TRIALS or 1000.",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs. Default: BINEXP_CROSS_CHECK_SEED or fresh entropy.",
    )

    parser.add_argument(
        "--max-base",
        type=int,
        default=None,
        help="Bases are drawn from [-MAX_BASE, MAX_BASE].",
    )

    parser.add_argument(
        "--max-exponent",
        type=int,
        default=None,
        help="Exponents are drawn from [0, MAX_EXPONENT].",
    )

    parser.add_argument(
        "--max-modulus",
        type=int,
        default=None,
        help="Moduli are drawn from [2, MAX_MODULUS]; at most 3037000499.",
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional CSV path for the per-trial results table.",
    )

    return parser


def apply_overrides(
    settings: CrossCheckSettings,
    args: argparse.Namespace,
) -> CrossCheckSettings:
    """
    Overlay command-line flags on top of loaded settings.

    Flags left at None keep the loaded value. The result is validated again by
    CrossCheckSettings.__post_init__.

    Args:
        settings: Settings loaded from environment.
        args: Parsed command-line arguments.

    Returns:
        New CrossCheckSettings with overrides applied.

    Raises:
        ValueError: If an override fails validation.
    """
    overrides = {
        "trials": args.trials,
        "seed": args.seed,
        "max_base": args.max_base,
        "max_exponent": args.max_exponent,
        "max_modulus": args.max_modulus,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    return dataclasses.replace(settings, **overrides)


def main(argv: Optional[list] = None):
    """
    Main entry point for the cross-check action.

    **Workflow**:
      1. Parse command-line arguments
      2. Load settings from environment and apply overrides
      3. Run the cross-check
      4. Print summary (and a few mismatching rows, if any)
      5. Optionally write the per-trial table to CSV
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = apply_overrides(get_settings().cross_check, args)
    except ValueError as e:
        print(f"ERROR: Invalid cross-check configuration: {e}")
        sys.exit(2)

    print("=" * 60)
    print("Exponentiation Cross-Check")
    print("=" * 60)
    print(f"Trials: {settings.trials}")
    print(f"Seed: {settings.seed if settings.seed is not None else '(fresh entropy)'}")
    print(f"Base range: [-{settings.max_base}, {settings.max_base}]")
    print(f"Exponent range: [0, {settings.max_exponent}]")
    print(f"Modulus range: [2, {settings.max_modulus}]")
    print("=" * 60)

    results = run_cross_check(settings)
    summary = summarize_cross_check(results)

    if args.output is not None:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        results.to_csv(output_path, index=False)
        print(f"✓ Wrote {len(results)} trials to {output_path}")

    print()
    print(f"power() mismatches:     {summary['power_mismatches']}/{summary['trials']}")
    print(f"power_mod() mismatches: {summary['power_mod_mismatches']}/{summary['trials']}")

    if not summary["all_match"]:
        mismatches = results[
            ~(results["power_matches"].astype(bool) & results["power_mod_matches"].astype(bool))
        ]
        print()
        print("First mismatching trials:")
        print(mismatches.head(10).to_string(index=False))
        print("=" * 60)
        sys.exit(1)

    print("✓ All trials matched the built-in pow() references")
    print("=" * 60)
    sys.exit(0)


if __name__ == "__main__":
    main()
