"""Base classes for file extractors."""

from abc import ABC, abstractmethod
from pathlib import PurePath

from ..models import FileRecord


class Extractor(ABC):
    """Contract for extractors that turn raw file text into a record."""

    @abstractmethod
    def supports(self, path: PurePath) -> bool:
        """Return True when this extractor handles the given file."""

    @abstractmethod
    def extract(self, rel_path: str, text: str) -> FileRecord:
        """Return the facts found in ``text``; never raise on odd input."""


class SuffixExtractor(Extractor):
    """Extractor selected by file-name suffix."""

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix

    def supports(self, path: PurePath) -> bool:
        return path.name.endswith(self.suffix)
