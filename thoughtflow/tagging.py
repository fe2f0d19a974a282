"""Keyword-based tag suggestions for captured notes."""

from typing import Mapping, Sequence

DEFAULT_KEYWORD_TAGS: dict[str, list[str]] = {
    "meeting": ["meetings", "work"],
    "task": ["tasks", "todo"],
    "idea": ["ideas", "creativity"],
    "research": ["research", "learning"],
    "project": ["projects", "work"],
}


class TagSuggester:
    """Suggests tags by looking for trigger keywords anywhere in a note.

    Matching is by substring on the lower-cased content, so a trigger inside a
    longer word still counts ("ideas" and "projector" both match).
    """

    def __init__(self, keyword_tags: Mapping[str, Sequence[str]] | None = None) -> None:
        """Initialize the suggester.

        Args:
            keyword_tags: Trigger keyword to tags mapping, checked in insertion order
        """
        rules = DEFAULT_KEYWORD_TAGS if keyword_tags is None else keyword_tags
        self.keyword_tags = {keyword.lower(): list(tags) for keyword, tags in rules.items()}

    def suggest(self, content: str) -> list[str]:
        """Suggest tags for the content.

        Args:
            content: Raw note text

        Returns:
            Deduplicated tags in order of the first trigger that produced them
        """
        content_lower = content.lower()
        suggested: list[str] = []

        for keyword, tags in self.keyword_tags.items():
            if keyword in content_lower:
                for tag in tags:
                    if tag not in suggested:
                        suggested.append(tag)

        return suggested


_default_suggester = TagSuggester()


def suggest_tags(content: str) -> list[str]:
    """Suggest tags using the default keyword rules."""
    return _default_suggester.suggest(content)
