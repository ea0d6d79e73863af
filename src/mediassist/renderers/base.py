"""Abstract base class for document renderers."""

from abc import ABC, abstractmethod
from pathlib import Path

from mediassist.formatting.ir import Document


class Renderer(ABC):
    """Abstract base class for file renderers.

    Each renderer maps every Block variant of a parsed Document to its
    output format and writes the result to disk.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.docx',))."""
        ...

    @abstractmethod
    def write(self, document: Document, path: Path) -> None:
        """Write a parsed document to file.

        Args:
            document: The parsed reply
            path: Path to write the output file
        """
        ...
