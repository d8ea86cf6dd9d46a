"""Schema loading."""

from dataclasses import dataclass

from graphql import GraphQLSchema

from . import parser, utils
from .errors import SchemaLoadError


@dataclass
class SchemaProfile:
    """Loaded schema with metadata."""

    path: str
    hash: str
    schema: GraphQLSchema


def load_schema(schema_file: str) -> SchemaProfile:
    """
    Load GraphQL schema from an SDL file.

    Args:
        schema_file: Path to the schema definition file

    Returns:
        SchemaProfile with built schema

    Raises:
        SchemaLoadError: If the file cannot be read or the schema is invalid
    """
    if not utils.is_file(schema_file):
        raise SchemaLoadError(f"Schema file not found: {schema_file}")

    try:
        sdl = utils.read_text(schema_file)
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"Cannot read schema file {schema_file}: {e}") from e

    return SchemaProfile(
        path=schema_file,
        hash=utils.sha256(sdl),
        schema=parser.build_schema_from_sdl(sdl, schema_file),
    )
