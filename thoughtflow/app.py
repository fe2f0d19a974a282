import sys

from loguru import logger

from thoughtflow.blob_stores.local import LocalBlobStore
from thoughtflow.config import Settings, settings
from thoughtflow.note_store import NoteStore
from thoughtflow.session import NoteSession


def configure_logging(level: str) -> None:
    """Send log records at or above the level to stderr.

    Replaces every loguru handler, so the application shell calls this once at startup.
    """
    logger.configure(handlers=[{"sink": sys.stderr, "level": level}])


def create_session(config: Settings = settings) -> NoteSession:
    """Create a note session backed by the local blob store.

    Logging is left as the caller configured it.
    """
    blob_store = LocalBlobStore(filepath=config.local_blob_store_path)
    store = NoteStore(blob_store, key=config.storage_key)
    logger.info(f"Opening notes '{store.key}' at {config.local_blob_store_path}")

    return NoteSession(
        store=store,
        related_max_results=config.related_max_results,
        related_min_word_length=config.related_min_word_length,
        preview_length=config.preview_length,
    )
