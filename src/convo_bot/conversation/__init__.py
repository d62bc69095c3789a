"""Keyword evidence extraction and the discussion loop built on it."""

from .keywords import KeywordMatcher, RejectionMatcher
from .session import DiscussionSession, Reply, ReplyKind

__all__ = ["DiscussionSession", "KeywordMatcher", "RejectionMatcher", "Reply", "ReplyKind"]
