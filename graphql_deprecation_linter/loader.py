"""Operation document discovery and parsing."""

from graphql import DocumentNode
from wcmatch import glob

from . import parser, utils
from .errors import DocumentParseError


def find_operation_documents(operations_glob: str, schema_file: str) -> dict[str, DocumentNode]:
    """
    Expand a glob and parse every matched document.

    Args:
        operations_glob: Glob pattern selecting document files; ``**`` is recursive and
            ``{a,b}`` alternatives are expanded
        schema_file: Schema path, excluded from the matches

    Returns:
        Mapping of normalized file path to parsed document, in path order

    Raises:
        DocumentParseError: If a matched file cannot be read or parsed
    """
    documents: dict[str, DocumentNode] = {}

    for match in sorted(glob.glob(utils.expand_path(operations_glob), flags=glob.GLOBSTAR | glob.BRACE)):
        if not utils.is_file(match) or utils.same_path(match, schema_file):
            continue

        file_path = utils.normalize_path(match)
        documents[file_path] = load_document(file_path)

    return documents


def load_document(file_path: str) -> DocumentNode:
    """Read and parse a single document file."""
    try:
        source = utils.read_text(file_path)
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentParseError(file_path, f"cannot read file ({e})") from e
    return parser.parse_document(source, file_path)
