"""Output formatting and reporting."""

from dataclasses import asdict

from rich.console import Console
from rich.markup import escape

from . import utils
from .linter import LintResult, ValidationFinding

console = Console()
err_console = Console(stderr=True)

DEPRECATIONS_HEADER = "Deprecated fields found."
SUCCESS_MESSAGE = "No deprecated fields found. GG!"


def emit(result: LintResult, fmt: str) -> None:
    """
    Output lint results.

    Console output covers deprecations only; validation findings are printed
    per document by print_validation_errors while the run progresses.

    Args:
        result: Lint results
        fmt: Output format ("json" or "console")
    """
    if fmt == "json":
        print(
            utils.to_json({
                "deprecations": sorted(result.deprecations),
                "validation_errors": [asdict(f) for f in result.validation_errors],
                "documents": result.documents_scanned,
                "operation_documents": result.operation_documents,
                "fragments": result.fragment_count,
            })
        )
        return

    if result.deprecations:
        err_console.print(f"[bold red]{DEPRECATIONS_HEADER}[/bold red]")
        for notice in sorted(result.deprecations):
            print_plain(err_console, notice)
    else:
        console.print(f"[green]{SUCCESS_MESSAGE}[/green]")


def print_validation_errors(findings: list[ValidationFinding]) -> None:
    """Print one document's validation findings to stderr."""
    err_console.print("[bold yellow]Validation errors:[/bold yellow]")
    for finding in findings:
        where = finding.file_path
        if finding.locations:
            line, col = finding.locations[0]
            where = f"{where}:{line}:{col}"
        print_plain(err_console, f"{finding.message} ({where})")


def print_plain(target: Console, text: str) -> None:
    """Print user-provided text without markup, highlighting or wrapping."""
    target.print(text, markup=False, highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Print a fatal error to stderr."""
    err_console.print("[red]Error:[/red] ", end="")
    print_plain(err_console, message)


def print_progress(message: str) -> None:
    """Print a progress line to stderr."""
    err_console.print(f"[cyan]{escape(message)}[/cyan]", highlight=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a non-fatal warning to stderr."""
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}", highlight=False, soft_wrap=True)
