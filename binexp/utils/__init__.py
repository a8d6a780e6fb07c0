"""
Generic utility functions shared across modules.

Includes fixed-width (int64) integer helpers and their range errors.
"""
