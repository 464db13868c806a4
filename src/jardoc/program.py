"""Immutable snapshot of the source files handed to an analysis run."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from jardoc.config import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_INCLUDE_PATTERNS
from jardoc.parsers import SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """One source file: the name it is reported under and its text."""
    file_name: str
    source_code: str


@dataclass(frozen=True)
class Program:
    """Ordered set of source files to analyze.

    File order is the discovery order of the resulting documentation.
    """
    files: tuple[SourceFile, ...] = ()

    @property
    def file_names(self) -> tuple[str, ...]:
        return tuple(source_file.file_name for source_file in self.files)

    @classmethod
    def from_sources(cls, sources: dict[str, str]) -> "Program":
        """Build a program from already-read source text, keeping dict order."""
        return cls(files=tuple(
            SourceFile(file_name=name, source_code=code) for name, code in sources.items()
        ))

    @classmethod
    def from_files(cls, paths: list[Path], root: Path | None = None) -> "Program":
        """Read the given files; names are reported relative to root when given.

        Raises:
            FileNotFoundError: If a file doesn't exist
            ValueError: If a file has an extension no parser supports
        """
        for path in paths:
            if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
                raise ValueError(f"Unsupported file type: {path}")
        return cls._read_files(paths, root)

    @classmethod
    def _read_files(cls, paths: list[Path], root: Path | None) -> "Program":
        files = []
        for path in paths:
            if not path.exists():
                raise FileNotFoundError(f"File not found: {path}")
            file_name = path.relative_to(root).as_posix() if root is not None else path.as_posix()
            files.append(SourceFile(file_name=file_name, source_code=path.read_text(encoding="utf-8")))
        return cls(files=tuple(files))

    @classmethod
    def from_directory(
        cls,
        root: Path,
        include_patterns: tuple[str, ...] = DEFAULT_INCLUDE_PATTERNS,
        exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS,
    ) -> "Program":
        """Discover and read the source files below a directory.

        Args:
            root: Directory to search recursively
            include_patterns: A root-relative POSIX path must match one of these
            exclude_patterns: A root-relative POSIX path matching any of these is dropped

        Returns:
            Program with files sorted by relative path

        Raises:
            FileNotFoundError: If root doesn't exist or is not a directory
        """
        paths = discover_source_files(root, include_patterns, exclude_patterns)
        logger.info(f"Discovered {len(paths)} source files under {root}")
        return cls._read_files(paths, root)


def discover_source_files(
    root: Path,
    include_patterns: tuple[str, ...] = DEFAULT_INCLUDE_PATTERNS,
    exclude_patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS,
) -> list[Path]:
    """Find files below root whose relative path passes the include/exclude filters.

    node_modules and hidden directories are never searched.

    Raises:
        FileNotFoundError: If root doesn't exist or is not a directory
        re.error: If a pattern is not a valid regular expression
    """
    if not root.is_dir():
        raise FileNotFoundError(f"Source directory not found: {root}")

    includes = [re.compile(pattern) for pattern in include_patterns]
    excludes = [re.compile(pattern) for pattern in exclude_patterns]

    found = []
    for path in root.rglob("*"):
        if not path.is_file():
            continue
        relative = path.relative_to(root)
        if any(part == "node_modules" or part.startswith(".") for part in relative.parts[:-1]):
            continue
        relative_name = relative.as_posix()
        if not any(pattern.search(relative_name) for pattern in includes):
            continue
        if any(pattern.search(relative_name) for pattern in excludes):
            continue
        found.append(path)

    return sorted(found, key=lambda p: p.relative_to(root).as_posix())
