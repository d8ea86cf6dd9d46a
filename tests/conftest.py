import re
from pathlib import Path

import pytest

from graphql_deprecation_linter import parser

FIXTURES = Path(__file__).parent / "fixtures"


def build_schema_with_root_query(sdl: str):
    """Validation requires a Query type; add a placeholder when the SDL has none."""
    if re.search(r"type\sQuery[^a-zA-Z0-9_]", sdl):
        return parser.build_schema_from_sdl(sdl)
    return parser.build_schema_from_sdl("type Query { ok: String } " + sdl)


def make_documents(**sources: str) -> dict:
    """Parse keyword sources into a path -> document mapping (``a_graphql`` -> ``a.graphql``)."""
    return {
        name.replace("_graphql", ".graphql"): parser.parse_document(source, name.replace("_graphql", ".graphql"))
        for name, source in sources.items()
    }


@pytest.fixture
def fixtures_dir():
    return FIXTURES


@pytest.fixture
def in_tests_dir(monkeypatch):
    """Run with the tests directory as working directory so fixture paths are relative."""
    monkeypatch.chdir(FIXTURES.parent)
    return FIXTURES.parent


@pytest.fixture
def fixture_schema():
    return parser.build_schema_from_sdl((FIXTURES / "schema.graphql").read_text(encoding="utf-8"))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the configuration layer reads."""
    for name in (
        "CI",
        "SCHEMA_FILE",
        "OPERATION_FILES_GLOB",
        "REPORT_FILES",
        "STRICT_FRAGMENTS",
        "INPUT_SCHEMA-FILE",
        "INPUT_OPERATION-FILES-GLOB",
        "INPUT_REPORT-FILES",
    ):
        monkeypatch.delenv(name, raising=False)
