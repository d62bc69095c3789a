"""Reader for the line-oriented characteristic and solution catalog files.

Solutions are stored one per line as ``name;``. Characteristics are stored as
``name;synonym1,synonym2;solution1-m1,solution2-m2;`` where the affinity
section is optional and each multiplier follows the last ``-`` of its token.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from convo_bot.errors import CatalogLoadError
from convo_bot.models import Characteristic, Solution

from .catalog import AffinityRecord, Catalog, CharacteristicRecord, SolutionRecord, build_catalogs


def _records(text: str) -> Iterator[tuple[int, str]]:
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        yield line_number, line


def parse_solutions(text: str, *, source: str | Path | None = None) -> list[SolutionRecord]:
    records: list[SolutionRecord] = []
    for line_number, line in _records(text):
        name = line.split(";", 1)[0]
        try:
            records.append(SolutionRecord(name=name))
        except ValidationError as exc:
            raise CatalogLoadError(_first_error(exc), source=source, line_number=line_number) from exc
    return records


def parse_characteristics(text: str, *, source: str | Path | None = None) -> list[CharacteristicRecord]:
    records: list[CharacteristicRecord] = []
    for line_number, line in _records(text):
        sections = line.split(";")
        if len(sections) < 2:
            raise CatalogLoadError(
                "Expected 'name;synonyms;solution-multiplier,...'",
                source=source,
                line_number=line_number,
            )

        name = sections[0]
        synonyms = [synonym for synonym in sections[1].split(",") if synonym.strip()]
        affinity_section = sections[2] if len(sections) > 2 else ""

        affinities: list[AffinityRecord] = []
        for token in affinity_section.split(","):
            token = token.strip()
            if not token:
                continue
            solution, separator, multiplier = token.rpartition("-")
            if not separator or not solution:
                raise CatalogLoadError(
                    f"Affinity '{token}' is missing its '-multiplier' suffix",
                    source=source,
                    line_number=line_number,
                )
            try:
                affinities.append(AffinityRecord(solution=solution, multiplier=multiplier))
            except ValidationError as exc:
                raise CatalogLoadError(_first_error(exc), source=source, line_number=line_number) from exc

        try:
            records.append(CharacteristicRecord(name=name, synonyms=synonyms, affinities=affinities))
        except ValidationError as exc:
            raise CatalogLoadError(_first_error(exc), source=source, line_number=line_number) from exc
    return records


def load_catalogs(
    characteristics_path: str | Path,
    solutions_path: str | Path,
) -> tuple[Catalog[Characteristic], Catalog[Solution]]:
    """Read both catalog files; raises ``CatalogLoadError`` without exposing a partial catalog."""
    solutions_text = _read(solutions_path)
    characteristics_text = _read(characteristics_path)
    solution_records = parse_solutions(solutions_text, source=solutions_path)
    characteristic_records = parse_characteristics(characteristics_text, source=characteristics_path)
    return build_catalogs(solution_records, characteristic_records)


def _read(path: str | Path) -> str:
    target = Path(path).expanduser()
    try:
        return target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(f"Cannot read catalog: {exc}", source=target) from exc


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field_path = ".".join(str(part) for part in error.get("loc", ()))
    return f"{field_path}: {error['msg']}" if field_path else error["msg"]
