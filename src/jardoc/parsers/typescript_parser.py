import tree_sitter_typescript
from tree_sitter import Language, Parser

from jardoc.comments import find_doc_comment, is_doc_comment, parse_tag_block
from jardoc.models import ModuleInfo, ParsedFile, RawClassInfo, RegistrationConfig
from jardoc.parsers.base import BaseParser
from jardoc.parsers.members import classify_members
from jardoc.syntax import (
    array_identifier_names,
    node_text,
    object_literal_fields,
    string_literal_value,
)

CLASS_NODE_TYPES = ("class_declaration", "abstract_class_declaration")

DEFAULT_COMPONENT_DECORATOR = "Component"
DEFAULT_MODULE_DECORATOR = "NgModule"


class TypescriptParser(BaseParser):
    """Parser for extracting documentable classes from TypeScript source code using tree-sitter."""

    def __init__(
        self,
        component_decorator: str = DEFAULT_COMPONENT_DECORATOR,
        module_decorator: str = DEFAULT_MODULE_DECORATOR,
        tsx: bool = False,
    ):
        if tsx:
            self.language = Language(tree_sitter_typescript.language_tsx())
        else:
            self.language = Language(tree_sitter_typescript.language_typescript())
        self.parser = Parser(self.language)
        self.component_decorator = component_decorator
        self.module_decorator = module_decorator

    def extract_file(self, source_code: str, file_path: str) -> ParsedFile:
        """Extract top-level classes and module registrations from TypeScript source.

        Nested and local classes are not recognized.

        Args:
            source_code: TypeScript source code to parse
            file_path: File name reported in the extracted records

        Returns:
            ParsedFile with classes and modules in declaration order
        """
        tree = self.parser.parse(bytes(source_code, "utf8"))
        root = tree.root_node

        classes = []
        modules = []
        for declaration, outer in self._top_level_classes(root):
            class_info, module_info = self._extract_class(declaration, outer, file_path)
            if class_info is None:
                continue
            classes.append(class_info)
            if module_info is not None:
                modules.append(module_info)

        return ParsedFile(
            file_name=file_path,
            classes=tuple(classes),
            modules=tuple(modules),
            has_syntax_errors=root.has_error,
        )

    def _top_level_classes(self, root):
        """Yield (class declaration, outermost statement) pairs of the file's top level."""
        for child in root.named_children:
            if child.type in CLASS_NODE_TYPES:
                yield child, child
            elif child.type == "export_statement":
                declaration = child.child_by_field_name("declaration")
                if declaration is not None and declaration.type in CLASS_NODE_TYPES:
                    yield declaration, child

    def _extract_class(self, declaration, outer, file_path: str):
        name_node = declaration.child_by_field_name("name")
        body = declaration.child_by_field_name("body")
        if name_node is None or body is None:
            return None, None
        name = node_text(name_node)

        decorators = []
        if outer is not declaration:
            decorators.extend(child for child in outer.children if child.type == "decorator")
        decorators.extend(child for child in declaration.children if child.type == "decorator")

        registration = None
        module_info = None
        for decorator in decorators:
            decorator_name, config_node = self._decorator_call(decorator)
            if decorator_name == self.component_decorator and registration is None:
                registration = self._registration_config(config_node)
            elif decorator_name == self.module_decorator and module_info is None:
                declarations = object_literal_fields(config_node).get("declarations")
                module_info = ModuleInfo(
                    module_ref_name=name,
                    file_name=file_path,
                    declared_component_names=frozenset(array_identifier_names(declarations)),
                )

        tags = parse_tag_block(self._class_doc_comment(declaration, outer, name_node))
        members = classify_members(body)

        class_info = RawClassInfo(
            name=name,
            file_name=file_path,
            is_documented_component=registration is not None and bool(tags.component),
            extends_name=self._extends_name(declaration),
            own_properties=members.properties,
            own_methods=members.methods,
            doc_tags=tags,
            registration_config=registration,
        )
        return class_info, module_info

    @staticmethod
    def _decorator_call(decorator):
        """Return (decorator name, first call argument node) of a decorator.

        ``@Foo`` and ``@ns.Foo`` yield no argument node.
        """
        expression = next(
            (child for child in decorator.named_children if child.type != "comment"),
            None,
        )
        if expression is None:
            return None, None

        config_node = None
        if expression.type == "call_expression":
            arguments = expression.child_by_field_name("arguments")
            if arguments is not None:
                config_node = next(
                    (arg for arg in arguments.named_children if arg.type != "comment"),
                    None,
                )
            expression = expression.child_by_field_name("function")
            if expression is None:
                return None, config_node

        if expression.type == "member_expression":
            prop = expression.child_by_field_name("property")
            return (node_text(prop) if prop is not None else None), config_node
        if expression.type == "identifier":
            return node_text(expression), config_node
        return None, config_node

    @staticmethod
    def _registration_config(config_node) -> RegistrationConfig:
        fields = object_literal_fields(config_node)
        return RegistrationConfig(
            selector=string_literal_value(fields.get("selector")),
            declared_name=string_literal_value(fields.get("name")),
        )

    @staticmethod
    def _class_doc_comment(declaration, outer, name_node) -> str | None:
        """Find the doc block nearest to the class keyword.

        A block placed between the decorators and ``class`` sits inside the
        declaration (or export statement); otherwise it precedes the
        outermost statement.
        """
        scopes = [(declaration, name_node)]
        if outer is not declaration:
            scopes.append((outer, declaration))

        for scope, stop in scopes:
            doc_comment = None
            for child in scope.children:
                if child.start_byte >= stop.start_byte:
                    break
                if child.type == "comment" and is_doc_comment(node_text(child)):
                    doc_comment = node_text(child)
            if doc_comment is not None:
                return doc_comment

        return find_doc_comment(outer)

    @staticmethod
    def _extends_name(declaration) -> str | None:
        """Return the bare base class name of a class, generic arguments stripped."""
        for child in declaration.named_children:
            if child.type != "class_heritage":
                continue
            for clause in child.named_children:
                if clause.type != "extends_clause":
                    continue
                value = clause.child_by_field_name("value")
                if value is None:
                    return None
                if value.type == "member_expression":
                    prop = value.child_by_field_name("property")
                    if prop is not None:
                        value = prop
                text = node_text(value)
                return text.split("<", 1)[0].split("(", 1)[0].strip() or None
        return None
