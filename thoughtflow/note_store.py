"""Persistence of the ordered note collection in a key-value blob store."""

from datetime import datetime
from typing import Sequence

from loguru import logger
from pydantic import ValidationError

from thoughtflow.blob_stores.base import BlobStore
from thoughtflow.domain.note import Note, NoteList
from thoughtflow.exceptions import PersistenceReadError, PersistenceWriteError

DEFAULT_STORAGE_KEY = "thoughtflow_notes"


class NoteStore:
    """Reads and writes the newest-first note sequence as a single JSON blob."""

    def __init__(self, blob_store: BlobStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        """Initialize NoteStore.

        Args:
            blob_store: External key-value store holding the serialized notes
            key: Name of the blob the notes are stored under
        """
        self._blob_store = blob_store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Note]:
        """Load notes from the blob store.

        Missing or unparseable data is logged and yields an empty list; this
        method never raises to the caller.
        """
        try:
            notes = self._read()
        except PersistenceReadError as e:
            logger.warning(f"Error loading notes, starting with an empty store: {e}")
            return []

        logger.debug(f"Loaded {len(notes)} notes from blob '{self._key}'")
        return notes

    def save(self, notes: Sequence[Note]) -> None:
        """Serialize the full note sequence and overwrite the blob.

        Raises:
            PersistenceWriteError: If the blob store cannot be written
        """
        payload = NoteList.dump_json(list(notes)).decode()
        try:
            self._blob_store.put(self._key, payload)
        except PersistenceWriteError:
            raise
        except OSError as e:
            raise PersistenceWriteError(f"Could not save notes to blob '{self._key}': {e}") from e
        logger.debug(f"Saved {len(notes)} notes to blob '{self._key}'")

    def clear(self) -> list[Note]:
        """Delete the persisted blob and return the new, empty note sequence."""
        try:
            self._blob_store.delete(self._key)
        except OSError as e:
            raise PersistenceWriteError(f"Could not delete blob '{self._key}': {e}") from e
        logger.info(f"Cleared all notes from blob '{self._key}'")
        return []

    @staticmethod
    def append(notes: Sequence[Note], note: Note) -> list[Note]:
        """Return a new sequence with the note prepended; the input is left untouched."""
        return [note, *notes]

    @staticmethod
    def next_id(notes: Sequence[Note], now: datetime) -> int:
        """Allocate an id from the creation time, kept above every existing id."""
        candidate = int(now.timestamp() * 1000)
        if notes:
            newest = max(note.id for note in notes)
            if candidate <= newest:
                return newest + 1
        return candidate

    def _read(self) -> list[Note]:
        try:
            raw = self._blob_store.get(self._key)
        except OSError as e:
            raise PersistenceReadError(f"Could not read blob '{self._key}': {e}") from e
        if raw is None:
            logger.debug(f"No blob stored under '{self._key}'")
            return []

        try:
            return NoteList.validate_json(raw)
        except ValidationError as e:
            raise PersistenceReadError(f"Blob '{self._key}' is not a valid note list: {e}") from e
