from pathlib import Path

from jardoc.parsers.base import BaseParser
from jardoc.parsers.typescript_parser import (
    DEFAULT_COMPONENT_DECORATOR,
    DEFAULT_MODULE_DECORATOR,
    TypescriptParser,
)

SUPPORTED_EXTENSIONS = (".ts", ".tsx")


def get_parser_for_file(
    file_path: Path,
    component_decorator: str = DEFAULT_COMPONENT_DECORATOR,
    module_decorator: str = DEFAULT_MODULE_DECORATOR,
) -> BaseParser | None:
    """Return a parser for the file's extension, or None if unsupported.

    Args:
        file_path: Path of the source file (only the suffix is inspected)
        component_decorator: Decorator name marking view components
        module_decorator: Decorator name marking modules

    Returns:
        Parser instance, or None for unsupported extensions
    """
    suffix = Path(file_path).suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        return None
    return TypescriptParser(
        component_decorator=component_decorator,
        module_decorator=module_decorator,
        tsx=suffix == ".tsx",
    )


__all__ = ["BaseParser", "TypescriptParser", "SUPPORTED_EXTENSIONS", "get_parser_for_file"]
