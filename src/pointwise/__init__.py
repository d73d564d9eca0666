"""Positional sequence matchers with readable failure diagnostics."""
