import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from thoughtflow.blob_stores.base import BlobStore
from thoughtflow.exceptions import PersistenceReadError, PersistenceWriteError


class LocalBlobStore(BlobStore):
    """Local blob store that keeps every blob in a single JSON file."""

    def __init__(self, filepath: str | Path | None = None) -> None:
        """Initialize LocalBlobStore.

        Args:
            filepath: Path to the blob store file. The file is read on every get() and
                     replaced atomically on every put() or delete(). If not provided,
                     blobs live in memory only.
        """
        self._filepath = Path(filepath) if filepath else None
        self._blobs: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        """Get the blob stored under a key, or None if the key is missing."""
        return self._read_all().get(key)

    def put(self, key: str, value: str) -> None:
        """Store a blob under a key, replacing any previous value."""
        blobs = self._read_for_update()
        blobs[key] = value
        self._write_all(blobs)

    def delete(self, key: str) -> None:
        """Remove the blob stored under a key, if any."""
        blobs = self._read_for_update()
        if key in blobs:
            del blobs[key]
            self._write_all(blobs)

    def _read_all(self) -> Dict[str, str]:
        if self._filepath is None:
            return dict(self._blobs)
        if not self._filepath.exists():
            return {}

        try:
            with open(self._filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise PersistenceReadError(f"Could not read blob store {self._filepath}: {e}") from e

        blobs = data.get("blobs") if isinstance(data, dict) else None
        if not isinstance(blobs, dict):
            raise PersistenceReadError(f"Blob store {self._filepath} has no 'blobs' section")
        return blobs

    def _read_for_update(self) -> Dict[str, str]:
        """Read existing blobs before a write, starting over if the file is unreadable."""
        try:
            return self._read_all()
        except PersistenceReadError as e:
            logger.warning(f"Discarding unreadable blob store contents: {e}")
            return {}

    def _write_all(self, blobs: Dict[str, str]) -> None:
        if self._filepath is None:
            self._blobs = blobs
            return

        # Readers see either the old file or the new one, never a partial write
        tmp_path = None
        try:
            self._filepath.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self._filepath.parent, suffix=".tmp", delete=False
            ) as f:
                tmp_path = f.name
                json.dump({"blobs": blobs}, f)
            os.replace(tmp_path, self._filepath)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise PersistenceWriteError(f"Could not write blob store {self._filepath}: {e}") from e
