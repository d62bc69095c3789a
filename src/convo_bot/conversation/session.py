"""Turn-by-turn discussion that feeds observed characteristics into a context graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from convo_bot.graph import ContextGraph
from convo_bot.models import Characteristic, Solution

from .keywords import KeywordMatcher, RejectionMatcher

NEUTRAL_PROMPTS: tuple[str, ...] = (
    "Please go on.",
    "That's very interesting.",
    "I see.",
    "How does that make you feel?",
    "Could you please elaborate?",
)

_RECOMMENDATION_PHRASES = ("what should i do", "recommend", "suggest", "any ideas", "what can i do")


class ReplyKind(str, Enum):
    OBSERVED = "observed"
    REJECTED = "rejected"
    RECOMMENDATION = "recommendation"
    PROMPT = "prompt"


@dataclass(slots=True)
class Reply:
    kind: ReplyKind
    text: str
    observed: list[Characteristic] = field(default_factory=list)
    rejected: Solution | None = None


class DiscussionSession:
    """Increments mentioned characteristics and answers with the current best recommendation."""

    def __init__(
        self,
        graph: ContextGraph,
        *,
        matcher: KeywordMatcher | None = None,
        increment: float = 1.0,
        logger: logging.Logger | None = None,
    ) -> None:
        self.graph = graph
        self._matcher = matcher or KeywordMatcher(graph.characteristics)
        self._rejections = RejectionMatcher(graph.solutions)
        self._increment = increment
        self._logger = logger or logging.getLogger("convo_bot.conversation")
        self.turns = 0
        self.observed: list[Characteristic] = []

    def respond(self, utterance: str) -> str:
        return self.handle(utterance).text

    def handle(self, utterance: str) -> Reply:
        text = " ".join(utterance.strip().split())
        self.turns += 1

        observed = self._matcher.match(text)
        for characteristic in observed:
            self.graph.increment(characteristic, self._increment)
        self.observed.extend(observed)

        rejected = self._rejections.match(text)
        if rejected is not None:
            self.graph.set_node_enabled(rejected, False)
            self._logger.info("solution_rejected", extra={"solution": rejected.name, "turn": self.turns})
            follow_up = self._suggestion_sentence()
            return Reply(
                kind=ReplyKind.REJECTED,
                text=f"Understood, I'll set {rejected.name} aside." + (f" {follow_up}" if follow_up else ""),
                observed=observed,
                rejected=rejected,
            )

        if any(phrase in text.lower() for phrase in _RECOMMENDATION_PHRASES):
            suggestion = self._suggestion_sentence()
            return Reply(
                kind=ReplyKind.RECOMMENDATION,
                text=suggestion or "Tell me a bit more about what's been going on first.",
                observed=observed,
            )

        if observed:
            names = ", ".join(characteristic.name for characteristic in observed)
            verb = "is" if len(observed) == 1 else "are"
            suggestion = self._suggestion_sentence()
            return Reply(
                kind=ReplyKind.OBSERVED,
                text=f"It sounds like {names} {verb} on your mind." + (f" {suggestion}" if suggestion else ""),
                observed=observed,
            )

        return Reply(kind=ReplyKind.PROMPT, text=NEUTRAL_PROMPTS[(self.turns - 1) % len(NEUTRAL_PROMPTS)])

    def recommendations(self, limit: int = 3) -> list[Solution]:
        """Top enabled solutions that have gathered any weight."""
        ranked = self.graph.ranked_weights(enabled_only=True)
        return [solution for solution, weight in ranked if weight > 0][:limit]

    def _suggestion_sentence(self) -> str | None:
        top = self.recommendations(limit=1)
        if not top:
            return None
        return f"Have you considered {top[0].name}?"
