"""Small helpers for reading tree-sitter TypeScript nodes.

Configuration literals are resolved purely syntactically: only string,
template-without-substitution, object and array literals are understood.
Anything else resolves to None.
"""


def node_text(node) -> str:
    """Return the source text covered by a node."""
    return node.text.decode("utf8")


def field_text(node, field_name: str) -> str | None:
    """Return the text of a named field of a node, or None if absent."""
    child = node.child_by_field_name(field_name)
    if child is None:
        return None
    return node_text(child)


def string_literal_value(node) -> str | None:
    """Return the value of a string literal node, quotes removed.

    Template strings are accepted only when they contain no substitution.
    Escape sequences are kept as written.
    """
    if node is None:
        return None
    if node.type == "string":
        return node_text(node)[1:-1]
    if node.type == "template_string":
        if any(child.type == "template_substitution" for child in node.children):
            return None
        return node_text(node)[1:-1]
    return None


def object_literal_fields(node) -> dict:
    """Map property names of an object literal to their value nodes.

    Computed keys, spreads, shorthand properties and methods are skipped.
    Returns an empty dict if the node is not an object literal.
    """
    fields = {}
    if node is None or node.type != "object":
        return fields

    for pair in node.named_children:
        if pair.type != "pair":
            continue
        key_node = pair.child_by_field_name("key")
        value_node = pair.child_by_field_name("value")
        if key_node is None or value_node is None:
            continue
        if key_node.type == "property_identifier":
            key = node_text(key_node)
        else:
            key = string_literal_value(key_node)
        if key is not None and key not in fields:
            fields[key] = value_node
    return fields


def array_identifier_names(node) -> list[str]:
    """Return the identifier elements of an array literal, in order.

    Non-identifier elements (spreads, calls, nested arrays) are skipped.
    """
    if node is None or node.type != "array":
        return []
    names = []
    for element in node.named_children:
        if element.type == "identifier":
            names.append(node_text(element))
        elif element.type == "member_expression":
            prop = element.child_by_field_name("property")
            if prop is not None:
                names.append(node_text(prop))
    return names
