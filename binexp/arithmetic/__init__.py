"""
Integer arithmetic primitives: exponentiation and modular exponentiation
by squaring, plus the caller-contract errors they raise.
"""
