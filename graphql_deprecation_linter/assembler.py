"""Assembly of self-contained operation documents."""

from collections.abc import Iterable
from typing import Optional

from graphql import DocumentNode

from . import utils
from .errors import MissingFragmentError
from .fragments import FragmentGraph


def assemble_operation_document(
    file_path: str, document: DocumentNode, closure: Iterable[str], graph: FragmentGraph
) -> Optional[DocumentNode]:
    """
    Build a validatable document from a source document and its fragment closure.

    Args:
        file_path: Path of the source document, used in error messages
        document: Parsed source document
        closure: Every fragment name the document needs, transitively
        graph: Fragment graph built from all documents

    Returns:
        Operation definitions followed by the closure's fragment definitions,
        or None when the document holds no operation

    Raises:
        MissingFragmentError: If a closure member has no definition
    """
    operations = list(utils.iter_operations(document))
    if not operations:
        return None

    fragments = []
    for name in sorted(closure):
        fragment = graph.fragments_by_name.get(name)
        if fragment is None:
            raise MissingFragmentError(name, file_path)
        fragments.append(fragment)

    return DocumentNode(definitions=tuple(operations + fragments), loc=document.loc)
