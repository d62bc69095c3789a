"""Immutable registries of known characteristics and solutions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from types import MappingProxyType
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from convo_bot.errors import CatalogLoadError
from convo_bot.models import CENTER_NAME, Characteristic, SolutionAffinity, Solution, Subject

SubjectT = TypeVar("SubjectT", bound=Subject)

_logger = logging.getLogger("convo_bot.catalog")


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def _not_reserved(cls, value: str) -> str:
        if value == CENTER_NAME:
            raise ValueError(f"'{CENTER_NAME}' is reserved for the center node")
        return value


class SolutionRecord(_Record):
    """A parsed solution entry."""


class AffinityRecord(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    solution: str = Field(min_length=1)
    multiplier: float


class CharacteristicRecord(_Record):
    """A parsed characteristic entry with synonyms and solution affinities."""

    synonyms: list[str] = Field(default_factory=list)
    affinities: list[AffinityRecord] = Field(default_factory=list)


class Catalog(Generic[SubjectT]):
    """Ordered, read-only name -> subject registry."""

    def __init__(self, subjects: Iterable[SubjectT] = ()) -> None:
        entries: dict[str, SubjectT] = {}
        for subject in subjects:
            if subject.name in entries:
                raise CatalogLoadError(f"Duplicate catalog entry: {subject.name}")
            entries[subject.name] = subject
        self._entries = MappingProxyType(entries)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._entries
        if isinstance(item, Subject):
            return self._entries.get(item.name) == item
        return False

    def __iter__(self) -> Iterator[SubjectT]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({list(self._entries)!r})"

    def get(self, name: str) -> SubjectT | None:
        return self._entries.get(name)

    def names(self) -> list[str]:
        return list(self._entries)


def build_catalogs(
    solution_records: Sequence[SolutionRecord | dict | str],
    characteristic_records: Sequence[CharacteristicRecord | dict],
) -> tuple[Catalog[Characteristic], Catalog[Solution]]:
    """Build both catalogs; solutions first so characteristics can resolve their affinities.

    Affinities naming a solution that is not in the solution records are dropped.
    Nothing is returned unless every record validates.
    """
    try:
        solutions_parsed = [_coerce_solution(record) for record in solution_records]
        characteristics_parsed = [
            record if isinstance(record, CharacteristicRecord) else CharacteristicRecord.model_validate(record)
            for record in characteristic_records
        ]
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid catalog record: {exc}") from exc

    solutions = Catalog(Solution(record.name) for record in solutions_parsed)

    characteristics: list[Characteristic] = []
    for record in characteristics_parsed:
        affinities: list[SolutionAffinity] = []
        for affinity in record.affinities:
            solution = solutions.get(affinity.solution)
            if solution is None:
                _logger.debug(
                    "affinity_dropped",
                    extra={"characteristic": record.name, "solution": affinity.solution},
                )
                continue
            affinities.append(SolutionAffinity(solution=solution, multiplier=affinity.multiplier))
        characteristics.append(
            Characteristic(
                record.name,
                synonyms=tuple(synonym for synonym in record.synonyms if synonym),
                affinities=tuple(affinities),
            )
        )

    characteristic_catalog = Catalog(characteristics)
    _logger.info(
        "catalog_loaded",
        extra={"characteristics": len(characteristic_catalog), "solutions": len(solutions)},
    )
    return characteristic_catalog, solutions


def _coerce_solution(record: SolutionRecord | dict | str) -> SolutionRecord:
    if isinstance(record, SolutionRecord):
        return record
    if isinstance(record, str):
        return SolutionRecord(name=record)
    return SolutionRecord.model_validate(record)
