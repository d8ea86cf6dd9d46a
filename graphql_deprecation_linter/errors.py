"""Exception hierarchy for gql-deprecations.

Every fatal condition derives from LinterError so the CLI can report it
uniformly and exit with status 1.
"""

from typing import Optional


class LinterError(Exception):
    """Base exception for all fatal linter errors."""


class ConfigError(LinterError):
    """Required configuration is missing or malformed."""


class SchemaLoadError(LinterError):
    """The schema file could not be read, parsed or validated."""


class DocumentParseError(LinterError):
    """An operation document is not valid GraphQL syntax."""

    def __init__(self, file_path: str, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.file_path = file_path
        self.line = line
        self.column = column
        where = file_path if line is None else f"{file_path}:{line}:{column}"
        super().__init__(f"Failed to parse {where}: {message}")


class MissingFragmentError(LinterError):
    """A fragment is spread (directly or transitively) but never defined."""

    def __init__(self, fragment_name: str, file_path: str):
        self.fragment_name = fragment_name
        self.file_path = file_path
        super().__init__(f'Missing fragment "{fragment_name}" in {file_path}')


class DuplicateFragmentError(LinterError):
    """Two documents define a fragment with the same name."""

    def __init__(self, fragment_name: str, first_path: str, second_path: str):
        self.fragment_name = fragment_name
        self.first_path = first_path
        self.second_path = second_path
        super().__init__(
            f'Fragment "{fragment_name}" is defined in both {first_path} and {second_path}'
        )
