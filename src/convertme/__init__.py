"""A small mutable person record and a shared list of suggested names."""

from __future__ import annotations

from convertme.names import SUGGESTED_NAMES
from convertme.person import Person

__all__ = ["Person", "SUGGESTED_NAMES"]
