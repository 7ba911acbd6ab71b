"""Client-side stores."""

from .hoot_collection import HootCollectionStore
from .hoot_detail import HootDetailStore, LoadState

__all__ = [
    "HootCollectionStore",
    "HootDetailStore",
    "LoadState",
]
