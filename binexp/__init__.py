"""
binexp – exponentiation by squaring over 64-bit signed integers.

Core routines live in binexp.arithmetic.exponentiation; fixed-width helpers,
configuration and cross-check tooling live in the sibling subpackages.
"""
