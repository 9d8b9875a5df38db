"""Shared naming constants."""

from __future__ import annotations

# Suggested names offered to callers building a Person. Never mutated.
SUGGESTED_NAMES = (
    "Jan",
    "Piet",
)
