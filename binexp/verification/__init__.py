"""
Randomized cross-checks of the exponentiation routines against Python's
arbitrary-precision built-in pow().
"""
