"""Fragment resolution, validation and deprecation scanning pipeline."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Optional

from graphql import DocumentNode, GraphQLError, GraphQLSchema

from . import parser, utils
from .assembler import assemble_operation_document
from .fragments import FragmentGraph, list_fragment_dependencies, resolve_fragment_closure
from .inspector import collect_deprecation_notices


@dataclass
class ValidationFinding:
    """A schema validation error found in an assembled document."""

    file_path: str
    message: str
    locations: list[tuple[int, int]] = field(default_factory=list)


@dataclass
class LintResult:
    """Outcome of a lint run over a document set."""

    deprecations: set[str] = field(default_factory=set)
    validation_errors: list[ValidationFinding] = field(default_factory=list)
    documents_scanned: int = 0
    operation_documents: int = 0
    fragment_count: int = 0


def validation_findings(file_path: str, errors: list[GraphQLError]) -> list[ValidationFinding]:
    """
    Convert GraphQL validation errors to findings.

    Args:
        file_path: Operation document the errors belong to
        errors: Validation errors (already filtered)

    Returns:
        List of findings
    """
    return [
        ValidationFinding(
            file_path=file_path,
            message=str(e.message),
            locations=[(l.line, l.column) for l in e.locations or []],
        )
        for e in errors
    ]


def validate_operations_and_report_deprecations(
    schema: GraphQLSchema,
    documents: Mapping[str, DocumentNode],
    graph: FragmentGraph,
    report_files: bool = True,
    on_document: Optional[Callable[[str, DocumentNode], None]] = None,
    on_findings: Optional[Callable[[list[ValidationFinding]], None]] = None,
) -> LintResult:
    """
    Validate every operation document and collect deprecated usages.

    Each document holding operations is assembled with exactly the fragments
    it needs, validated, then walked with type info. Documents holding only
    fragments are skipped.

    Args:
        schema: GraphQL schema
        documents: Mapping of file path to parsed document
        graph: Fragment graph built from the same documents
        report_files: Suffix notices with the operation document's path
        on_document: Called with each assembled document before it is validated
        on_findings: Called with each document's validation findings as soon as
            they are known, so they are shown even if a later document fails

    Returns:
        LintResult with the deduplicated notices of all documents

    Raises:
        MissingFragmentError: If a document needs an undefined fragment
    """
    result = LintResult(documents_scanned=len(documents), fragment_count=len(graph.fragments_by_name))

    for file_path, document in documents.items():
        if not any(utils.iter_operations(document)):
            continue

        closure = resolve_fragment_closure(
            list_fragment_dependencies(document), graph.dependencies_by_fragment_name
        )
        assembled = assemble_operation_document(file_path, document, closure, graph)

        result.operation_documents += 1
        if on_document:
            on_document(file_path, assembled)

        errors = parser.validate_document(schema, assembled)
        findings = validation_findings(file_path, errors)
        result.validation_errors.extend(findings)
        if findings and on_findings:
            on_findings(findings)

        result.deprecations |= collect_deprecation_notices(
            schema, assembled, file_path if report_files else None
        )

    return result
