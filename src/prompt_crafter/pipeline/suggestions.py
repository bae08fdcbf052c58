"""Prompt suggestions derived from the current prompt text."""

from __future__ import annotations

MAX_SUGGESTIONS = 5

SUGGESTION_TEMPLATES: tuple[str, ...] = (
    "Create a comprehensive guide about {topic}",
    "Explain the key concepts and principles of {topic}",
    "Provide a step-by-step tutorial on {topic}",
    "Compare different approaches to {topic}",
    "Analyze the benefits and challenges of {topic}",
    "Create a beginner's introduction to {topic}",
    "Design a practical implementation plan for {topic}",
    "Evaluate the current trends in {topic}",
)


def generate_suggestions(topic: str, limit: int = MAX_SUGGESTIONS) -> list[str]:
    """Expand the fixed phrasings around topic, first `limit` (max 5) only."""
    topic = topic.strip()
    if not topic:
        return []
    count = max(0, min(limit, MAX_SUGGESTIONS))
    return [t.format(topic=topic) for t in SUGGESTION_TEMPLATES[:count]]
