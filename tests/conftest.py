from pathlib import Path
from typing import Generator

import pytest

from thoughtflow.domain.note import Note, RelatedNote
from thoughtflow.note_store import NoteStore
from thoughtflow.session import NoteSession
from tests.fakes import FakeBlobStore, FakeClock


@pytest.fixture
def fruit_notes() -> list[Note]:
    return [
        Note(
            id=1,
            content="apples oranges",
            timestamp="2024-05-01T09:00:00.000Z",
            tags=["fruit"],
        ),
        Note(
            id=2,
            content="bananas",
            timestamp="2024-05-01T10:00:00.000Z",
            tags=["fruit"],
        ),
    ]


@pytest.fixture
def mixed_notes() -> list[Note]:
    """Newest-first notes spread over two days with assorted tags."""
    return [
        Note(
            id=1714660000000,
            content="Project kickoff meeting with the design team",
            timestamp="2024-05-02T14:26:40.000Z",
            tags=["meetings", "work", "projects"],
            related=[RelatedNote(id=1714570000000, preview="Research notes on design...")],
        ),
        Note(
            id=1714580000000,
            content="Idea: a garden journal app",
            timestamp="2024-05-01T16:13:20.000Z",
            tags=["ideas", "creativity"],
        ),
        Note(
            id=1714570000000,
            content="Research notes on design systems",
            timestamp="2024-05-01T13:26:40.000Z",
            tags=["research", "learning"],
        ),
        Note(
            id=1714560000000,
            content="Buy milk",
            timestamp="2024-05-01T10:40:00.000Z",
        ),
    ]


@pytest.fixture
def fake_blob_store() -> FakeBlobStore:
    return FakeBlobStore()


@pytest.fixture
def note_store(fake_blob_store: FakeBlobStore) -> NoteStore:
    return NoteStore(fake_blob_store)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session(note_store: NoteStore, fake_clock: FakeClock) -> NoteSession:
    """Session over an empty fake blob store with a deterministic clock."""
    return NoteSession(store=note_store, clock=fake_clock)


@pytest.fixture
def temp_blob_path(tmp_path: Path) -> Generator[Path, None, None]:
    """Path for a blob store file that does not exist yet."""
    yield tmp_path / "data" / "blobs.json"
