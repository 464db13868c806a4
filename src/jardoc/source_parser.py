"""Assembly of the project documentation model from a program."""

import logging

from jardoc.config import JardocConfig
from jardoc.models import ProjectSourceDocumentation, RawClassInfo, SourceDoc
from jardoc.program import Program
from jardoc.registry import ClassRegistry
from jardoc.resolver import InheritanceResolver, MergePolicy

logger = logging.getLogger(__name__)


class SourceParser:
    """Build ProjectSourceDocumentation from a program.

    Every ``build`` call owns its registry and resolver, so independent
    calls never share state.
    """

    def __init__(self, config: JardocConfig | None = None):
        self.config = config or JardocConfig()
        self.policy = MergePolicy.from_name(self.config.member_merge)

    def build(self, program: Program) -> ProjectSourceDocumentation:
        """Analyze a program and return its documentation model.

        Documented components (component decorator plus an ``@component``
        tag) become SourceDocs; every other class is kept in other_classes.
        Both sequences follow discovery order: program file order, then
        declaration order within a file.

        Args:
            program: Source files to analyze

        Returns:
            Immutable ProjectSourceDocumentation

        Raises:
            CyclicInheritanceError: If a documented component's extends chain loops
        """
        registry = ClassRegistry.build(
            program,
            component_decorator=self.config.component_decorator,
            module_decorator=self.config.module_decorator,
        )
        resolver = InheritanceResolver(registry, self.policy)

        classes_with_docs = []
        other_classes = []
        for class_info in registry.classes:
            if class_info.is_documented_component:
                classes_with_docs.append(self._source_doc(class_info, registry, resolver))
            else:
                other_classes.append(class_info)

        logger.info(
            f"Documented {len(classes_with_docs)} components, "
            f"{len(other_classes)} other classes, {len(registry.modules)} modules"
        )
        return ProjectSourceDocumentation(
            classes_with_docs=tuple(classes_with_docs),
            other_classes=tuple(other_classes),
        )

    @staticmethod
    def _source_doc(
        class_info: RawClassInfo,
        registry: ClassRegistry,
        resolver: InheritanceResolver,
    ) -> SourceDoc:
        tags = class_info.doc_tags
        registration = class_info.registration_config
        return SourceDoc(
            component_ref_name=class_info.name,
            component_doc_name=tags.component,
            group_doc_name=tags.group,
            description=tags.description,
            file_name=class_info.file_name,
            selector=registration.selector if registration else None,
            module_details=registry.module_for(class_info.name),
            extend_classes=class_info.extend_classes,
            api_details=resolver.resolve(class_info.name),
        )


def build_documentation(program: Program, config: JardocConfig | None = None) -> ProjectSourceDocumentation:
    """Convenience wrapper: ``SourceParser(config).build(program)``."""
    return SourceParser(config).build(program)
