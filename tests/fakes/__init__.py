from tests.fakes.fake_blob_store import (
    FailingBlobStore,
    FakeBlobStore,
    OSErrorBlobStore,
    UnreadableBlobStore,
)
from tests.fakes.fake_clock import FakeClock

__all__ = [
    "FakeBlobStore",
    "FailingBlobStore",
    "OSErrorBlobStore",
    "UnreadableBlobStore",
    "FakeClock",
]
