"""Shared utilities (I/O, text helpers, merging)."""
