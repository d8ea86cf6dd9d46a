"""GraphQL parsing and validation."""

from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    GraphQLSyntaxError,
    Source,
    build_schema,
    parse,
    validate,
    validate_schema,
)

from .errors import DocumentParseError, SchemaLoadError

UNKNOWN_DIRECTIVE_PREFIX = "Unknown directive"


def build_schema_from_sdl(sdl: str, name: str = "schema.graphql") -> GraphQLSchema:
    """
    Build GraphQL schema from SDL source.

    Args:
        sdl: Schema definition language text
        name: Source name used in error messages (usually the file path)

    Returns:
        GraphQLSchema object

    Raises:
        SchemaLoadError: If the SDL is malformed or describes an invalid schema
    """
    try:
        schema = build_schema(Source(sdl, name))
    except GraphQLError as e:
        raise SchemaLoadError(f"Invalid schema in {name}: {e.message}") from e
    except TypeError as e:
        # build_schema reports SDL validation failures as TypeError
        raise SchemaLoadError(f"Invalid schema in {name}: {e}") from e

    errors = validate_schema(schema)
    if errors:
        details = "; ".join(err.message for err in errors)
        raise SchemaLoadError(f"Invalid schema in {name}: {details}")

    return schema


def parse_document(source: str, file_path: str) -> DocumentNode:
    """
    Parse GraphQL document string into AST.

    The source is named after its file so that locations reported later
    (including for fragments merged into other documents) point back to it.

    Raises:
        DocumentParseError: If the document is syntactically invalid
    """
    try:
        return parse(Source(source, file_path))
    except GraphQLSyntaxError as e:
        line, column = (e.locations[0].line, e.locations[0].column) if e.locations else (None, None)
        raise DocumentParseError(file_path, e.message, line, column) from e


def is_unknown_directive_error(error: GraphQLError) -> bool:
    """Client-side directives the schema does not declare are not failures."""
    return error.message.startswith(UNKNOWN_DIRECTIVE_PREFIX)


def validate_document(schema: GraphQLSchema, doc: DocumentNode) -> list[GraphQLError]:
    """
    Validate document against schema.

    Args:
        schema: GraphQL schema
        doc: Assembled operation document

    Returns:
        List of validation errors, without unknown-directive errors
    """
    return [error for error in validate(schema, doc) if not is_unknown_directive_error(error)]
