"""
Error taxonomy for playback sequencing.

Empty catalogs and unrecognized platform events are outcomes, not errors, and
have no exception type here.
"""


class PlaybackError(Exception):
    """Base class for faults that end the invocation with the generic error response."""


class RetrievalError(PlaybackError):
    """Listing objects from storage failed."""


class MintingError(PlaybackError):
    """Minting a time-boxed retrieval URL failed, or the key was invalid."""


class IndexOutOfRangeError(PlaybackError):
    """A playback index has no catalog entry although playback was not complete."""

    def __init__(self, index: int, catalog_size: int) -> None:
        super().__init__(f"No video at index {index} (catalog size {catalog_size})")
        self.index = index
        self.catalog_size = catalog_size
