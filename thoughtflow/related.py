"""Discovery of previously captured notes that share vocabulary with new text."""

from typing import Sequence

from thoughtflow.domain.note import Note, RelatedNote

PREVIEW_SUFFIX = "..."


def _words(text: str) -> list[str]:
    return text.lower().split()


def make_preview(content: str, length: int = 100) -> str:
    """Truncate content for a related-note preview.

    The suffix is always appended, whether or not anything was cut off.
    """
    return content[:length] + PREVIEW_SUFFIX


def is_related(content_words: Sequence[str], note: Note, min_word_length: int = 4) -> bool:
    """Check whether a note contains any long word from the new content verbatim."""
    note_words = set(_words(note.content))
    return any(len(word) > min_word_length and word in note_words for word in content_words)


def find_related(
    content: str,
    corpus: Sequence[Note],
    *,
    limit: int = 3,
    min_word_length: int = 4,
    preview_length: int = 100,
) -> list[RelatedNote]:
    """Find notes in the corpus that share a long word with the content.

    Args:
        content: Text of the note being captured
        corpus: Existing notes, newest first, not including the new note
        limit: Maximum number of related notes to return
        min_word_length: Words must be longer than this to count as shared
        preview_length: Number of characters kept in each preview

    Returns:
        Previews of the first matching notes, in corpus order
    """
    content_words = _words(content)
    related: list[RelatedNote] = []

    for note in corpus:
        if len(related) >= limit:
            break
        if is_related(content_words, note, min_word_length):
            related.append(
                RelatedNote(id=note.id, preview=make_preview(note.content, preview_length))
            )

    return related
