"""Utility functions for document loading and AST traversal."""

import hashlib
import json
import os
from pathlib import Path
from typing import Any, Iterator

from graphql import DocumentNode, FragmentDefinitionNode, OperationDefinitionNode


# File system utilities
def ensure_dir(path: str) -> None:
    """Ensure directory exists, creating it if necessary."""
    Path(path).mkdir(parents=True, exist_ok=True)


def exists(path: str) -> bool:
    """Check if file exists."""
    return Path(path).exists()


def is_file(path: str) -> bool:
    """Check if path is a regular file."""
    return Path(path).is_file()


def dirname(path: str) -> str:
    """Get directory name from path."""
    return str(Path(path).parent)


def expand_path(path: str) -> str:
    """Expand ~ in path."""
    return str(Path(path).expanduser())


def normalize_path(path: str) -> str:
    """Normalize a matched path for display (``./a/b`` -> ``a/b``)."""
    return os.path.normpath(path)


def same_path(a: str, b: str) -> bool:
    """Check whether two paths point at the same location."""
    return os.path.abspath(expand_path(a)) == os.path.abspath(expand_path(b))


# File I/O
def read_text(path: str) -> str:
    """Read UTF-8 text file."""
    return Path(path).read_text(encoding="utf-8")


def to_json(data: Any) -> str:
    """Convert data to JSON string."""
    return json.dumps(data, indent=2)


def sha256(text: str) -> str:
    """Calculate short SHA-256 hash of text."""
    return hashlib.sha256(text.encode()).hexdigest()[:16]


# AST traversal helpers
def iter_operations(doc: DocumentNode) -> Iterator[OperationDefinitionNode]:
    """Iterate over all operation definitions in document."""
    for definition in doc.definitions:
        if isinstance(definition, OperationDefinitionNode):
            yield definition


def iter_fragments(doc: DocumentNode) -> Iterator[FragmentDefinitionNode]:
    """Iterate over all fragment definitions in document."""
    for definition in doc.definitions:
        if isinstance(definition, FragmentDefinitionNode):
            yield definition

