"""CLI for gql-deprecations."""

from dataclasses import dataclass
from typing import Literal, Optional

import typer

from . import config, loader, schema_loader, utils
from .errors import LinterError
from .fragments import collect_fragment_dependencies
from .linter import LintResult, validate_operations_and_report_deprecations
from .report import emit, print_error, print_progress, print_validation_errors, print_warning

app = typer.Typer(help="Report deprecated GraphQL fields and arguments used by operation documents")

EXIT_DEPRECATIONS = 2


@dataclass
class CheckOptions:
    """Options for check command."""

    output: Literal["console", "json"] = "console"
    verbose: bool = False


@app.command("check")
def check_cmd(
    schema_file: Optional[str] = typer.Option(None, "--schema-file", help="GraphQL SDL schema file"),
    operation_files_glob: Optional[str] = typer.Option(
        None, "--operation-files-glob", help="Glob of operation and fragment documents"
    ),
    report_files: Optional[bool] = typer.Option(
        None, "--report-files/--no-report-files", help="Include the operation file in each notice"
    ),
    strict_fragments: Optional[bool] = typer.Option(
        None, "--strict-fragments/--no-strict-fragments", help="Fail when a fragment name is defined twice"
    ),
    config_file: Optional[str] = typer.Option(None, "--config", help="Config file path"),
    output: str = typer.Option("console", help="Output format (console|json)"),
    verbose: bool = typer.Option(False, help="Print progress to stderr"),
    debug: bool = typer.Option(False, help="Re-raise unexpected errors with a traceback"),
):
    """Check operation documents for deprecated usages."""
    try:
        cfg = config.apply_environment(config.load(config_file))
        cfg.override(
            schema_file=schema_file,
            operation_files_glob=operation_files_glob,
            report_files=report_files,
            strict_fragments=strict_fragments,
        )
        cfg.require()

        opts = CheckOptions(output="json" if output == "json" else "console", verbose=verbose)
        result = run_check(cfg, opts)
        emit(result, opts.output)

        if result.deprecations:
            raise typer.Exit(EXIT_DEPRECATIONS)

    except typer.Exit:
        raise
    except LinterError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        print_error(str(e))
        if debug:
            raise
        raise typer.Exit(1)


@app.command("init")
def init_cmd(
    path: str = typer.Option(config.DEFAULT_CONFIG_PATH, help="Config file to create"),
    force: bool = typer.Option(False, help="Overwrite an existing file"),
):
    """Write an example config file."""
    if utils.exists(path) and not force:
        print_error(f"{path} already exists (use --force to overwrite)")
        raise typer.Exit(1)
    print_progress(f"Wrote {config.create_example_config(path)}")


def run_check(cfg: config.Config, opts: CheckOptions) -> LintResult:
    """
    Run the deprecation check described by a configuration.

    Args:
        cfg: Configuration with schema_file and operation_files_glob set
        opts: Output options

    Returns:
        LintResult with deduplicated notices and validation findings
    """
    def progress(message: str) -> None:
        if opts.verbose:
            print_progress(message)

    documents = loader.find_operation_documents(cfg.operation_files_glob, cfg.schema_file)
    if not documents:
        print_warning(f"No documents matched {cfg.operation_files_glob}")
    progress(f"Loaded {len(documents)} documents")

    graph = collect_fragment_dependencies(documents, strict=cfg.strict_fragments)
    progress(f"Collected {len(graph.fragments_by_name)} fragments")

    profile = schema_loader.load_schema(cfg.schema_file)
    progress(f"Loaded schema {profile.path} ({profile.hash})")

    return validate_operations_and_report_deprecations(
        profile.schema,
        documents,
        graph,
        report_files=cfg.report_files,
        on_document=lambda path, doc: progress(f"Checking {path} ({len(doc.definitions)} definitions)"),
        on_findings=print_validation_errors if opts.output == "console" else None,
    )


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
