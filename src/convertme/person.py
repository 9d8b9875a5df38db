"""The Person record.

Person is a plain mutable record: `name` and `age` are public attributes
and may be read or assigned directly. The get_/set_ methods are thin
accessors over the same attributes. No value is validated on assignment.

Person is not thread-safe; callers sharing an instance across threads must
synchronize mutations themselves.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from convertme.config import Settings, strict_enabled
from convertme.names import SUGGESTED_NAMES
from convertme.validation import validate_age, validate_name

logger = logging.getLogger(__name__)

DEFAULT_NAME = "unknown"
DEFAULT_AGE = 0


@dataclass
class Person:
    name: str
    age: int

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    def get_age(self) -> int:
        return self.age

    def set_age(self, age: int) -> None:
        self.age = age

    @staticmethod
    def get_suggested_names() -> tuple[str, ...]:
        """Return the shared suggested names. Same tuple on every call."""
        return SUGGESTED_NAMES

    @classmethod
    def from_defaults(cls, name: str = DEFAULT_NAME, age: int = DEFAULT_AGE) -> Person:
        return cls(name=name, age=age)

    @classmethod
    def validated(cls, name: Any, age: Any, settings: Settings | None = None) -> Person:
        """Build a Person, checking both fields when strict mode is on.

        Raises:
            ValidationError: In strict mode, if the name or age is rejected.
        """
        strict = settings.strict if settings is not None else strict_enabled()
        if strict:
            name = validate_name(name)
            age = validate_age(age)
        return cls(name=name, age=age)

    def __iter__(self) -> Iterator[Any]:
        # Supports unpacking: name, age = person
        yield self.name
        yield self.age

    def copy(self, **changes: Any) -> Person:
        """Return a new Person with `changes` applied; self is left as is."""
        return dataclasses.replace(self, **changes)

    def celebrate_birthday(self) -> Person:
        older = self.copy(age=self.age + 1)
        logger.debug("%s turned %s", older.name, older.age)
        return older

    def greeting(self) -> str:
        return f"Hello, my name is {self.name}"
