from abc import ABC, abstractmethod

from jardoc.models import ParsedFile


class BaseParser(ABC):
    """Abstract base class for language-specific class extractors."""

    @abstractmethod
    def extract_file(self, source_code: str, file_path: str) -> ParsedFile:
        """Extract top-level classes and module registrations from source code.

        Args:
            source_code: The source code to parse
            file_path: File name as handed to the program (for RawClassInfo.file_name)

        Returns:
            ParsedFile with classes and modules in declaration order
        """
        pass
