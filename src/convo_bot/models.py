"""Subjects wrapped by context graph nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

CENTER_NAME = "centerNode"


@dataclass(frozen=True, slots=True)
class Subject:
    """Named payload of a graph node; equal when variant and name match."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Center(Subject):
    name: str = CENTER_NAME


@dataclass(frozen=True, slots=True)
class Solution(Subject):
    """A recommendable outcome, identified only by its name."""


@dataclass(frozen=True, slots=True)
class SolutionAffinity:
    solution: Solution
    multiplier: float


@dataclass(frozen=True, slots=True)
class Characteristic(Subject):
    """An observable topic with synonyms and weighted affinities to solutions."""

    synonyms: tuple[str, ...] = field(default=(), compare=False)
    affinities: tuple[SolutionAffinity, ...] = field(default=(), compare=False)

    def declares(self, solution: Solution) -> bool:
        return any(affinity.solution == solution for affinity in self.affinities)

    def multiplier_for(self, solution: Solution) -> float | None:
        for affinity in self.affinities:
            if affinity.solution == solution:
                return affinity.multiplier
        return None

    @property
    def terms(self) -> tuple[str, ...]:
        return (self.name, *self.synonyms)
