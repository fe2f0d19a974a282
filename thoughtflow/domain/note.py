"""Note domain models."""

from datetime import datetime, timezone

from pydantic import BaseModel, TypeAdapter


class RelatedNote(BaseModel):
    """Snapshot of a note that looked related when another note was captured.

    This is an embedded value, not a reference: it keeps the preview it was
    created with even if the referenced note later changes or disappears.
    """

    id: int
    preview: str

    model_config = {"frozen": True}


class Note(BaseModel):
    """Represents a single captured note.

    Attributes:
        id: Unique identifier (creation time in milliseconds since the epoch)
        content: Raw text body as typed by the user
        timestamp: Creation instant as an ISO-8601 string
        tags: Topical tags suggested at creation time
        related: Up to three previews of notes that existed at creation time
    """

    id: int
    content: str
    timestamp: str
    tags: list[str] = []
    related: list[RelatedNote] = []

    model_config = {"frozen": True}

    @property
    def created(self) -> datetime:
        """Creation instant parsed from the ISO-8601 timestamp."""
        return datetime.fromisoformat(self.timestamp.replace("Z", "+00:00"))


NoteList = TypeAdapter(list[Note])


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as a UTC ISO-8601 string with millisecond precision."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
