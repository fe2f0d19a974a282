"""Key-value blob storage backends for persisted notes."""

from thoughtflow.blob_stores.base import BlobStore
from thoughtflow.blob_stores.local import LocalBlobStore

__all__ = [
    "BlobStore",
    "LocalBlobStore",
]
