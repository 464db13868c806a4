from dataclasses import dataclass, field
from enum import Enum


class Visibility(str, Enum):
    """Accessibility of a class member as written in the source."""
    DEFAULT = "default"  # No modifier, public by language rules
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    @property
    def is_public(self) -> bool:
        return self in (Visibility.DEFAULT, Visibility.PUBLIC)


@dataclass(frozen=True)
class CommentTags:
    """Tags parsed from the doc block preceding a class."""
    group: str = ""
    component: str = ""
    description: str = ""


@dataclass(frozen=True)
class PropertyInfo:
    """A public property declared in a class body."""
    name: str
    declared_type: str = ""  # Annotation text as written, "" if none
    decorator_names: tuple[str, ...] = ()
    description: str = ""
    visibility: Visibility = Visibility.DEFAULT

    def to_dict(self) -> dict:
        return {
            "propertyName": self.name,
            "type": self.declared_type,
            "description": self.description,
            "decoratorNames": list(self.decorator_names),
        }


@dataclass(frozen=True)
class MethodInfo:
    """A public method declared in a class body."""
    display_name: str  # e.g. "toggle()"
    description: str = ""
    visibility: Visibility = Visibility.DEFAULT
    decorator_names: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "methodName": self.display_name,
            "description": self.description,
            "decoratorNames": list(self.decorator_names),
        }


@dataclass(frozen=True)
class ModuleInfo:
    """A module-registration class and the class names it declares."""
    module_ref_name: str
    file_name: str
    declared_component_names: frozenset[str] = frozenset()

    def to_dict(self) -> dict:
        return {
            "moduleRefName": self.module_ref_name,
            "fileName": self.file_name,
        }


@dataclass(frozen=True)
class RegistrationConfig:
    """Statically resolved fields of a component-registration literal."""
    selector: str | None = None  # None when the selector is not a string literal
    declared_name: str | None = None


@dataclass(frozen=True)
class ApiDetails:
    """Flattened public API of a class."""
    properties: tuple[PropertyInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()

    def to_dict(self) -> dict:
        return {
            "properties": [prop.to_dict() for prop in self.properties],
            "methods": [method.to_dict() for method in self.methods],
        }


@dataclass(frozen=True)
class RawClassInfo:
    """Everything extracted from one top-level class declaration."""
    name: str
    file_name: str
    is_documented_component: bool = False
    extends_name: str | None = None  # Bare base class name, generics stripped
    own_properties: tuple[PropertyInfo, ...] = ()
    own_methods: tuple[MethodInfo, ...] = ()
    doc_tags: CommentTags = field(default_factory=CommentTags)
    registration_config: RegistrationConfig | None = None  # None if not a component

    @property
    def is_component(self) -> bool:
        """True if the class carries the component-registration decorator."""
        return self.registration_config is not None

    @property
    def extend_classes(self) -> tuple[str, ...]:
        return (self.extends_name,) if self.extends_name else ()

    @property
    def own_api(self) -> ApiDetails:
        return ApiDetails(properties=self.own_properties, methods=self.own_methods)

    def to_dict(self) -> dict:
        return {
            "componentRefName": self.name,
            "fileName": self.file_name,
            "selector": self.registration_config.selector if self.registration_config else None,
            "extendClasses": list(self.extend_classes),
            "apiDetails": self.own_api.to_dict(),
        }


@dataclass(frozen=True)
class SourceDoc:
    """Final documentation record of one documented component."""
    component_ref_name: str
    component_doc_name: str
    group_doc_name: str
    description: str
    file_name: str
    selector: str | None
    module_details: ModuleInfo | None
    extend_classes: tuple[str, ...]
    api_details: ApiDetails

    def to_dict(self) -> dict:
        return {
            "componentRefName": self.component_ref_name,
            "componentDocName": self.component_doc_name,
            "groupDocName": self.group_doc_name,
            "description": self.description,
            "fileName": self.file_name,
            "selector": self.selector,
            "moduleDetails": self.module_details.to_dict() if self.module_details else None,
            "extendClasses": list(self.extend_classes),
            "apiDetails": self.api_details.to_dict(),
        }


@dataclass(frozen=True)
class ProjectSourceDocumentation:
    """Documentation model of a whole program.

    Attributes:
        classes_with_docs: One SourceDoc per documented component, in discovery order.
        other_classes: Every other class (modules, undocumented components,
            plain and abstract base classes), in discovery order.
    """
    classes_with_docs: tuple[SourceDoc, ...] = ()
    other_classes: tuple[RawClassInfo, ...] = ()

    def get_other_class(self, name: str) -> RawClassInfo | None:
        for class_info in self.other_classes:
            if class_info.name == name:
                return class_info
        return None

    def to_dict(self) -> dict:
        return {
            "classesWithDocs": [doc.to_dict() for doc in self.classes_with_docs],
            "otherClasses": [info.to_dict() for info in self.other_classes],
        }


@dataclass(frozen=True)
class ParsedFile:
    """Top-level classes and modules found in one source file."""
    file_name: str
    classes: tuple[RawClassInfo, ...] = ()
    modules: tuple[ModuleInfo, ...] = ()
    has_syntax_errors: bool = False
