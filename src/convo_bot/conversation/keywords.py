"""Match catalog characteristics and rejected solutions in free-form text."""

from __future__ import annotations

import re
from collections.abc import Iterable

from convo_bot.models import Characteristic, Solution


def _normalize(term: str) -> str:
    return " ".join(term.split()).lower()


def _alternation(terms: Iterable[str]) -> str | None:
    cleaned = sorted({" ".join(term.split()) for term in terms if term.strip()}, key=len, reverse=True)
    if not cleaned:
        return None
    return "|".join(re.escape(term).replace(r"\ ", r"\s+") for term in cleaned)


def _term_pattern(terms: Iterable[str]) -> re.Pattern[str] | None:
    alternatives = _alternation(terms)
    if alternatives is None:
        return None
    return re.compile(rf"(?<!\w)(?:{alternatives})(?!\w)", re.IGNORECASE)


class KeywordMatcher:
    """Finds characteristics whose name or synonym appears as a whole word or phrase."""

    def __init__(self, characteristics: Iterable[Characteristic]) -> None:
        self._patterns: list[tuple[Characteristic, re.Pattern[str]]] = []
        for characteristic in characteristics:
            pattern = _term_pattern(characteristic.terms)
            if pattern is not None:
                self._patterns.append((characteristic, pattern))

    def match(self, utterance: str) -> list[Characteristic]:
        """Matched characteristics in catalog order, each at most once."""
        return [characteristic for characteristic, pattern in self._patterns if pattern.search(utterance)]


class RejectionMatcher:
    """Finds a solution the speaker turns down.

    The solution name must directly follow ``not``/``no`` or directly precede
    ``doesn't apply``-style phrasing.
    """

    def __init__(self, solutions: Iterable[Solution]) -> None:
        self._solutions = {_normalize(solution.name): solution for solution in solutions}
        alternatives = _alternation(solution.name for solution in self._solutions.values())
        self._patterns: tuple[re.Pattern[str], ...] = ()
        if alternatives is not None:
            self._patterns = (
                re.compile(
                    rf"(?<!\w)(?P<solution>{alternatives})\s+"
                    r"(?:doesn'?t|does\s+not|won'?t|will\s+not|wouldn'?t)\s+(?:apply|help|work)\b",
                    re.IGNORECASE,
                ),
                re.compile(rf"\b(?:not|no)\s+(?P<solution>{alternatives})(?!\w)", re.IGNORECASE),
            )

    def match(self, utterance: str) -> Solution | None:
        for pattern in self._patterns:
            found = pattern.search(utterance)
            if found:
                return self._solutions[_normalize(found.group("solution"))]
        return None
