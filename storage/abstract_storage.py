"""Storage abstraction layer for doctor images."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO


class ImageStore(ABC):
    """Interface for image storage backends.

    A backend turns uploaded bytes into an opaque *reference* that is kept in
    the database, and later turns that reference back into something a
    browser can display.
    """

    @abstractmethod
    def store(self, file_obj: IO[bytes], filename: str) -> str:
        """Persist the image and return its reference."""

    @abstractmethod
    def resolve(self, reference: str | None) -> str | None:
        """Return a displayable URL for the reference, or None."""

    @abstractmethod
    def discard(self, reference: str) -> None:
        """Remove the stored resource behind the reference."""

    @abstractmethod
    def exists(self, reference: str) -> bool:
        """Return whether the referenced resource is still retrievable."""
