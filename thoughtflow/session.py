"""Session state and the calls the presentation layer makes into the core."""

from datetime import date, datetime, timezone
from typing import Callable

from loguru import logger

from thoughtflow.domain.note import Note, format_timestamp
from thoughtflow.note_store import NoteStore
from thoughtflow.query import collect_tags, filter_notes, group_by_date
from thoughtflow.related import find_related
from thoughtflow.tagging import TagSuggester


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NoteSession:
    """Owns the note collection for one running application.

    Notes are hydrated from the store once on construction. Every capture
    builds a new sequence and persists it before it replaces the old one.
    """

    def __init__(
        self,
        *,
        store: NoteStore,
        tag_suggester: TagSuggester | None = None,
        related_max_results: int = 3,
        related_min_word_length: int = 4,
        preview_length: int = 100,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.store = store
        self.tag_suggester = tag_suggester or TagSuggester()
        self.related_max_results = related_max_results
        self.related_min_word_length = related_min_word_length
        self.preview_length = preview_length
        self._clock = clock

        self._notes: list[Note] = store.load()
        self._search_phrase = ""
        self._selected_tags: list[str] = []
        self._latest: Note | None = None

        logger.info(f"Session started with {len(self._notes)} notes")

    @property
    def notes(self) -> list[Note]:
        """All notes, newest first."""
        return list(self._notes)

    @property
    def latest(self) -> Note | None:
        """The note captured most recently in this session, if any."""
        return self._latest

    @property
    def search_phrase(self) -> str:
        return self._search_phrase

    @property
    def selected_tags(self) -> list[str]:
        return list(self._selected_tags)

    def on_save(self, content: str) -> Note | None:
        """Capture a note: suggest tags, snapshot related notes, prepend and persist.

        Content that is empty after trimming is ignored.

        Returns:
            The new note, or None if nothing was captured

        Raises:
            PersistenceWriteError: If the updated notes could not be saved; the
                session keeps its previous notes in that case
        """
        if not content.strip():
            logger.debug("Ignoring empty note")
            return None

        now = self._clock()
        note = Note(
            id=NoteStore.next_id(self._notes, now),
            content=content,
            timestamp=format_timestamp(now),
            tags=self.tag_suggester.suggest(content),
            related=find_related(
                content,
                self._notes,
                limit=self.related_max_results,
                min_word_length=self.related_min_word_length,
                preview_length=self.preview_length,
            ),
        )

        notes = NoteStore.append(self._notes, note)
        self.store.save(notes)
        self._notes = notes
        self._latest = note

        logger.info(
            f"Captured note {note.id} with tags {note.tags} and {len(note.related)} related notes"
        )
        return note

    def on_search(self, phrase: str) -> None:
        """Set the search phrase used for the visible notes."""
        self._search_phrase = phrase

    def on_toggle_tag(self, tag: str) -> None:
        """Select the tag if it is not selected, otherwise deselect it."""
        if tag in self._selected_tags:
            self._selected_tags.remove(tag)
        else:
            self._selected_tags.append(tag)

    @property
    def visible_notes(self) -> list[Note]:
        """Notes matching the current search phrase and tag selection."""
        return filter_notes(self._notes, self._search_phrase, self._selected_tags)

    @property
    def all_tags(self) -> list[str]:
        """Every tag in use, sorted, for populating the tag filter."""
        return collect_tags(self._notes)

    @property
    def timeline(self) -> list[tuple[date, list[Note]]]:
        """Visible notes grouped by creation date."""
        return group_by_date(self.visible_notes)

    def clear(self) -> None:
        """Delete every note and reset the search and tag selection."""
        self._notes = self.store.clear()
        self._search_phrase = ""
        self._selected_tags = []
        self._latest = None
