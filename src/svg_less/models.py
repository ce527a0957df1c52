"""Data model for svg-less.

Plain dataclasses for the files flowing into and out of a collector run.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class SourceFile:
    """One image file handed to the collector.

    ``contents`` is ``str`` or ``bytes`` when the file is fully in memory,
    ``None`` for content-less entries (e.g. directories), and any other
    object (file object, iterator, generator) when the host streams it.
    """

    path: str
    contents: Any = None

    def is_null(self) -> bool:
        """True for entries with no content at all."""
        if self.contents is None:
            return True
        return isinstance(self.contents, (str, bytes, bytearray)) and not self.contents

    def is_stream(self) -> bool:
        """True when contents are not available as a complete value."""
        return not self.is_null() and not isinstance(
            self.contents, (str, bytes, bytearray)
        )

    def text(self) -> str:
        """Contents as text.

        Bytes are decoded as UTF-8; invalid sequences become U+FFFD.
        """
        if isinstance(self.contents, (bytes, bytearray)):
            return bytes(self.contents).decode("utf-8", errors="replace")
        return self.contents


@dataclass(frozen=True)
class Dimensions:
    """Width and height read off an svg element, ``None`` when absent."""

    width: Optional[str] = None
    height: Optional[str] = None


@dataclass(frozen=True)
class OutputArtifact:
    """The single stylesheet produced when a run finishes."""

    path: str
    contents: str

    def to_bytes(self) -> bytes:
        return self.contents.encode("utf-8")
