from typing import Optional, Protocol


class BlobStore(Protocol):
    """Protocol for key-value blob storage implementations."""

    def get(self, key: str) -> Optional[str]:
        """Get the blob stored under a key, or None if the key is missing."""
        ...

    def put(self, key: str, value: str) -> None:
        """Store a blob under a key, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove the blob stored under a key, if any."""
        ...
