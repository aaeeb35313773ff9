"""Factories for tests and prototyping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from faker import Faker


@dataclass(slots=True)
class EventNameFactory:
    faker: Faker = field(default_factory=Faker)

    def build(self) -> str:
        return f"{self.faker.word()}:{self.faker.unique.lexify(text='????')}"

    def batch(self, count: int) -> Iterable[str]:
        for _ in range(count):
            yield self.build()
