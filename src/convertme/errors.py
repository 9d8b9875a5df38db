"""Exceptions raised by convertme.

Core Person operations never raise. These are only raised by the opt-in
validators and by configuration loading, so callers can catch
ConvertMeError without depending on which layer failed.
"""

from __future__ import annotations


class ConvertMeError(Exception):
    """Base for all convertme errors. Carries a detail string."""

    def __init__(self, detail: str = "convertme error") -> None:
        self.detail = detail
        super().__init__(detail)


class ValidationError(ConvertMeError):
    def __init__(self, detail: str = "Validation error") -> None:
        super().__init__(detail)


class ConfigurationError(ConvertMeError):
    def __init__(self, detail: str = "Invalid configuration") -> None:
        super().__init__(detail)
