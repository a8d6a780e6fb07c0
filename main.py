"""
binexp – Main entry point.

Minimal bootstrap script that prints the reference vectors for power() and
power_mod(), confirming the package imports and computes as expected.
"""

from binexp.arithmetic.exponentiation import InvalidModulusError, power, power_mod


def main() -> None:
    """Print the reference vectors and the invalid-modulus failure."""
    print(f"power(2, 3) = {power(2, 3)}")
    print(f"power(2, 0) = {power(2, 0)}")
    print(f"power(15, 20) = {power(15, 20)}  (int64 wraparound)")
    print(f"power_mod(2, 3, 5) = {power_mod(2, 3, 5)}")
    print(f"power_mod(2, 0, 3) = {power_mod(2, 0, 3)}")
    print(f"power_mod(15, 20, 1000000007) = {power_mod(15, 20, 1_000_000_007)}")
    try:
        power_mod(2, 3, 0)
    except InvalidModulusError as e:
        print(f"power_mod(2, 3, 0) -> InvalidModulusError: {e}")


if __name__ == "__main__":
    main()
