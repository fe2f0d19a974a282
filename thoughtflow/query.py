"""Search and tag filtering over the note collection."""

from datetime import date
from typing import Collection, Iterable, Sequence

from loguru import logger

from thoughtflow.domain.note import Note


def matches_search(note: Note, search_phrase: str) -> bool:
    """Check that every whitespace-separated term of the phrase occurs in the note."""
    content_lower = note.content.lower()
    return all(term in content_lower for term in search_phrase.lower().split())


def matches_tags(note: Note, selected_tags: Collection[str]) -> bool:
    """Check that the note carries at least one selected tag, or that none are selected."""
    if not selected_tags:
        return True
    return any(tag in selected_tags for tag in note.tags)


def filter_notes(
    notes: Sequence[Note], search_phrase: str = "", selected_tags: Collection[str] = ()
) -> list[Note]:
    """Filter notes by search phrase and tag selection, preserving their order.

    Args:
        notes: Notes to filter
        search_phrase: Terms that must all appear in a note's content (case-insensitive)
        selected_tags: Tags of which a note must have at least one; empty selects all

    Returns:
        Notes matching both the search phrase and the tag selection
    """
    return [
        note
        for note in notes
        if matches_search(note, search_phrase) and matches_tags(note, selected_tags)
    ]


def collect_tags(notes: Iterable[Note]) -> list[str]:
    """Get the sorted, deduplicated union of tags across all notes."""
    return sorted({tag for note in notes for tag in note.tags})


def group_by_date(notes: Iterable[Note]) -> list[tuple[date, list[Note]]]:
    """Group notes by the calendar date of their timestamp for a timeline view.

    Groups appear in the order their first note is seen and notes keep their
    order within a group. Notes with unparseable timestamps are skipped.
    """
    groups: dict[date, list[Note]] = {}
    for note in notes:
        try:
            day = note.created.date()
        except ValueError:
            logger.warning(f"Skipping note {note.id} with invalid timestamp {note.timestamp!r}")
            continue
        groups.setdefault(day, []).append(note)
    return list(groups.items())
