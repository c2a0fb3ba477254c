"""Common interface for sfnt tables."""

import io
from abc import ABC, abstractmethod
from typing import BinaryIO, ClassVar


class FontTable(ABC):
    """A table that serializes itself into a writable stream.

    Subclasses set ``tag`` and implement :meth:`write`. Tables never pad
    themselves; the container writer adds the four-byte padding.
    """

    tag: ClassVar[bytes]

    @abstractmethod
    def write(self, writer: BinaryIO) -> None:
        """Write the table's bytes to ``writer``."""

    def to_bytes(self) -> bytes:
        """Serialize the table into memory."""
        out = io.BytesIO()
        self.write(out)
        return out.getvalue()
