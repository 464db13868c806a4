"""Classification of class body members into documented properties and methods."""

from dataclasses import dataclass

from jardoc.comments import is_doc_comment, parse_member_description
from jardoc.models import MethodInfo, PropertyInfo, Visibility
from jardoc.syntax import node_text, string_literal_value

PROPERTY_NODE_TYPES = ("public_field_definition",)
METHOD_NODE_TYPES = ("method_definition", "abstract_method_signature")
OVERLOAD_NODE_TYPE = "method_signature"

_ACCESSOR_KEYWORDS = ("get", "set")


@dataclass(frozen=True)
class ClassMembers:
    """Public members of one class body, in declaration order."""
    properties: tuple[PropertyInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()


def member_visibility(node) -> Visibility:
    """Determine a member's visibility from its accessibility modifier.

    ``#name`` members are private regardless of modifiers.
    """
    for child in node.children:
        if child.type == "accessibility_modifier":
            return Visibility(node_text(child).strip())

    name_node = node.child_by_field_name("name")
    if name_node is not None and name_node.type == "private_property_identifier":
        return Visibility.PRIVATE
    return Visibility.DEFAULT


def _member_name(node) -> str:
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return ""
    return string_literal_value(name_node) or node_text(name_node)


def _is_accessor_or_constructor(node) -> bool:
    if node.type != "method_definition":
        return False
    if _member_name(node) == "constructor":
        return True
    return any(child.type in _ACCESSOR_KEYWORDS for child in node.children)


def _leading_parts(node) -> tuple[list[str], str | None]:
    """Collect decorators and the nearest doc comment nested before a member's name."""
    decorators = []
    doc_comment = None
    name_node = node.child_by_field_name("name")
    for child in node.children:
        if name_node is not None and child.start_byte >= name_node.start_byte:
            break
        if child.type == "decorator":
            decorators.append(node_text(child))
        elif child.type == "comment" and is_doc_comment(node_text(child)):
            doc_comment = node_text(child)
    return decorators, doc_comment


def _declared_type(node) -> str:
    type_node = node.child_by_field_name("type")
    if type_node is None:
        return ""
    if type_node.type == "type_annotation" and type_node.named_children:
        return node_text(type_node.named_children[0])
    return node_text(type_node).lstrip(":").strip()


def classify_members(class_body) -> ClassMembers:
    """Enumerate the public properties and methods of a class body.

    Members are returned in source order. Private and protected members are
    dropped entirely. Decorators are kept as literal text, top line first,
    whether tree-sitter places them beside the member (methods) or inside it
    (fields).

    Args:
        class_body: class_body tree-sitter node

    Returns:
        ClassMembers with public properties and methods
    """
    properties = []
    methods = []
    pending_comment = None
    pending_decorators: list[str] = []
    overload_name = None

    for child in class_body.named_children:
        if child.type == "comment":
            text = node_text(child)
            if is_doc_comment(text):
                pending_comment = text
            continue

        if child.type == "decorator":
            pending_decorators.append(node_text(child))
            continue

        if child.type == OVERLOAD_NODE_TYPE:
            # Overload signatures hand their doc block on to the implementation
            name = _member_name(child)
            if overload_name is not None and overload_name != name:
                pending_comment = None
                pending_decorators = []
            overload_name = name
            _, nested_comment = _leading_parts(child)
            pending_comment = nested_comment or pending_comment
            continue

        if overload_name is not None and (
            child.type != "method_definition" or _member_name(child) != overload_name
        ):
            pending_comment = None
            pending_decorators = []
        overload_name = None

        if child.type in PROPERTY_NODE_TYPES or child.type in METHOD_NODE_TYPES:
            nested_decorators, nested_comment = _leading_parts(child)
            decorators = tuple(pending_decorators + nested_decorators)
            description = parse_member_description(nested_comment or pending_comment)
            visibility = member_visibility(child)

            if visibility.is_public and not _is_accessor_or_constructor(child):
                if child.type in PROPERTY_NODE_TYPES:
                    properties.append(PropertyInfo(
                        name=_member_name(child),
                        declared_type=_declared_type(child),
                        decorator_names=decorators,
                        description=description,
                        visibility=visibility,
                    ))
                else:
                    methods.append(MethodInfo(
                        display_name=f"{_member_name(child)}()",
                        description=description,
                        visibility=visibility,
                        decorator_names=decorators,
                    ))

        # Any other member or statement ends the pending doc block
        pending_comment = None
        pending_decorators = []

    return ClassMembers(properties=tuple(properties), methods=tuple(methods))
