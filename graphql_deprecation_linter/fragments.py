"""Fragment dependency graph and closure resolution."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from graphql import DocumentNode, FragmentDefinitionNode, FragmentSpreadNode, Node, Visitor, visit

from . import utils
from .errors import DuplicateFragmentError


@dataclass
class FragmentGraph:
    """Fragments known across all documents and their direct dependencies."""

    fragments_by_name: dict[str, FragmentDefinitionNode] = field(default_factory=dict)
    dependencies_by_fragment_name: dict[str, set[str]] = field(default_factory=dict)
    sources_by_name: dict[str, str] = field(default_factory=dict)

    def add(self, fragment: FragmentDefinitionNode, file_path: str, strict: bool = False) -> None:
        """Register a fragment definition; a later definition replaces an earlier one."""
        name = fragment.name.value
        if strict and name in self.fragments_by_name:
            raise DuplicateFragmentError(name, self.sources_by_name[name], file_path)

        self.fragments_by_name[name] = fragment
        self.dependencies_by_fragment_name[name] = list_fragment_dependencies(fragment)
        self.sources_by_name[name] = file_path


class _SpreadCollector(Visitor):
    def __init__(self):
        super().__init__()
        self.names: set[str] = set()

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args) -> None:
        self.names.add(node.name.value)


def list_fragment_dependencies(node: Node) -> set[str]:
    """
    Collect the names of fragments spread directly within a node.

    Works for a single fragment definition as well as for a whole document;
    spreads are not followed into the fragments they name.
    """
    collector = _SpreadCollector()
    visit(node, collector)
    return collector.names


def collect_fragment_dependencies(
    documents: Mapping[str, DocumentNode], strict: bool = False
) -> FragmentGraph:
    """
    Build the fragment graph from every document.

    Args:
        documents: Mapping of file path to parsed document
        strict: Raise DuplicateFragmentError when a fragment name is defined twice

    Returns:
        FragmentGraph with every fragment definition and its direct dependencies
    """
    graph = FragmentGraph()
    for file_path, document in documents.items():
        for fragment in utils.iter_fragments(document):
            graph.add(fragment, file_path, strict=strict)
    return graph


def resolve_fragment_closure(
    fragment_names: Iterable[str], dependencies_by_fragment_name: Mapping[str, Iterable[str]]
) -> set[str]:
    """
    Compute the transitive closure of fragment names.

    The starting names are part of the closure. Each name is expanded at most
    once, so cycles terminate. Names without a recorded dependency set are
    leaves; whether they are actually defined is checked during assembly.
    """
    closure = set(fragment_names)
    pending = list(closure)

    while pending:
        name = pending.pop()
        for dependency in dependencies_by_fragment_name.get(name, ()):
            if dependency in closure:
                continue
            closure.add(dependency)
            pending.append(dependency)

    return closure
