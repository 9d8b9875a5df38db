from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from convertme.person import Person


class PersonView(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    age: int

    @classmethod
    def from_person(cls, person: Person) -> PersonView:
        return cls(name=person.name, age=person.age)

    def to_person(self) -> Person:
        return Person(name=self.name, age=self.age)
