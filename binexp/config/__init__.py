"""
Configuration loading and validation for settings.

Provides strongly typed settings objects loaded from environment variables,
with upfront validation.
"""
