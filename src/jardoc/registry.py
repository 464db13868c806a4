"""Registry of every top-level class of a program, keyed by bare class name."""

import logging
from pathlib import Path

from jardoc.models import ModuleInfo, RawClassInfo
from jardoc.parsers import get_parser_for_file
from jardoc.parsers.base import BaseParser
from jardoc.parsers.typescript_parser import DEFAULT_COMPONENT_DECORATOR, DEFAULT_MODULE_DECORATOR
from jardoc.program import Program

logger = logging.getLogger(__name__)


class ClassRegistry:
    """Read-only lookup tables built once per analysis run.

    Holds every parsed class by name (in discovery order) and every module
    registration by the class names it declares. Built by ``build`` and
    never mutated afterwards.
    """

    def __init__(self, classes: list[RawClassInfo], modules: list[ModuleInfo]):
        self._classes: dict[str, RawClassInfo] = {}
        for class_info in classes:
            existing = self._classes.get(class_info.name)
            if existing is not None:
                logger.warning(
                    f"Duplicate class name {class_info.name} in {class_info.file_name}, "
                    f"keeping declaration from {existing.file_name}"
                )
                continue
            self._classes[class_info.name] = class_info

        self._modules = tuple(modules)
        self._module_by_declared_name: dict[str, ModuleInfo] = {}
        for module_info in self._modules:
            for declared_name in module_info.declared_component_names:
                # First declaring module wins
                self._module_by_declared_name.setdefault(declared_name, module_info)

    @classmethod
    def build(
        cls,
        program: Program,
        component_decorator: str = DEFAULT_COMPONENT_DECORATOR,
        module_decorator: str = DEFAULT_MODULE_DECORATOR,
    ) -> "ClassRegistry":
        """Walk every file of a program and collect its top-level classes.

        Files with unsupported extensions are skipped. Files whose syntax
        tree contains errors are still processed on a best-effort basis.

        Args:
            program: Source files to analyze
            component_decorator: Decorator name registering a view component
            module_decorator: Decorator name registering a module

        Returns:
            ClassRegistry over all classes and modules of the program
        """
        parsers: dict[str, BaseParser | None] = {}
        classes = []
        modules = []

        for source_file in program.files:
            suffix = Path(source_file.file_name).suffix.lower()
            if suffix not in parsers:
                parsers[suffix] = get_parser_for_file(
                    Path(source_file.file_name),
                    component_decorator=component_decorator,
                    module_decorator=module_decorator,
                )
            parser = parsers[suffix]
            if parser is None:
                logger.debug(f"Skipping unsupported file {source_file.file_name}")
                continue

            parsed = parser.extract_file(source_file.source_code, source_file.file_name)
            if parsed.has_syntax_errors:
                logger.warning(f"Syntax errors in {source_file.file_name}, results may be incomplete")
            classes.extend(parsed.classes)
            modules.extend(parsed.modules)

        return cls(classes, modules)

    @property
    def classes(self) -> tuple[RawClassInfo, ...]:
        """All registered classes in discovery order."""
        return tuple(self._classes.values())

    @property
    def modules(self) -> tuple[ModuleInfo, ...]:
        return self._modules

    def get(self, name: str) -> RawClassInfo | None:
        return self._classes.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def module_for(self, class_name: str) -> ModuleInfo | None:
        """Return the first module declaring the class, or None."""
        return self._module_by_declared_name.get(class_name)
