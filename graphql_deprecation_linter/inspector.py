"""Typed AST inspection for deprecated usages."""

from typing import Any, Optional

from graphql import (
    ArgumentNode,
    DirectiveNode,
    DocumentNode,
    FieldNode,
    GraphQLSchema,
    TypeInfo,
    TypeInfoVisitor,
    Visitor,
    visit,
)

UNKNOWN_TYPE = "Unknown Type"


def root_type_names(schema: GraphQLSchema) -> set[str]:
    """Names of the schema's query, mutation and subscription types."""
    roots = (schema.query_type, schema.mutation_type, schema.subscription_type)
    return {root.name for root in roots if root is not None}


def enclosing_name(ancestors: list[Any]) -> str:
    """Name of the nearest field above an argument, else of its directive."""
    directive_name = None
    for ancestor in reversed(ancestors):
        if isinstance(ancestor, FieldNode):
            return ancestor.name.value
        if isinstance(ancestor, DirectiveNode) and directive_name is None:
            directive_name = f"@{ancestor.name.value}"
    return directive_name or UNKNOWN_TYPE


class DeprecationVisitor(Visitor):
    """
    Collect deprecation notices while walking a document with type info.

    Must be wrapped in a TypeInfoVisitor sharing the same TypeInfo so that
    field and argument definitions are bound when each node is entered.
    """

    def __init__(self, type_info: TypeInfo, root_names: set[str], file_path: Optional[str] = None):
        super().__init__()
        self.type_info = type_info
        self.root_names = root_names
        self.suffix = f" in {file_path}" if file_path else ""
        self.notices: set[str] = set()

    def enter_field(self, node: FieldNode, *_args: Any) -> None:
        field_def = self.type_info.get_field_def()
        if not field_def or not field_def.deprecation_reason:
            return

        parent_type = self.type_info.get_parent_type()
        parent_name = parent_type.name if parent_type else UNKNOWN_TYPE
        field_name = node.name.value

        if parent_name in self.root_names:
            notice = f'{parent_name} "{field_name}" is deprecated'
        else:
            notice = f'Field "{parent_name}.{field_name}" is deprecated'
        self.notices.add(notice + self.suffix)

    def enter_argument(self, node: ArgumentNode, _key: Any, parent: Any, _path: Any, ancestors: list[Any]) -> None:
        arg_def = self.type_info.get_argument()
        if not arg_def or not arg_def.deprecation_reason:
            return

        owner = enclosing_name([*ancestors, parent])
        self.notices.add(f'Argument "{node.name.value}" from "{owner}" is deprecated' + self.suffix)


def collect_deprecation_notices(
    schema: GraphQLSchema, doc: DocumentNode, file_path: Optional[str] = None
) -> set[str]:
    """
    Find every deprecated field, root operation field and argument used in a document.

    Args:
        schema: GraphQL schema
        doc: Assembled operation document (need not be valid)
        file_path: When given, appended to every notice as `` in <file_path>``

    Returns:
        Set of human-readable notices
    """
    type_info = TypeInfo(schema)
    visitor = DeprecationVisitor(type_info, root_type_names(schema), file_path)
    visit(doc, TypeInfoVisitor(type_info, visitor))
    return visitor.notices
