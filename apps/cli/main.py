"""CLI application for npmmeta."""

import asyncio
import json
import logging
import sys
from pathlib import Path

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from core.access import is_scoped, restrict_access
from core.errors import (
    AccessCommandFailed,
    InvalidFormat,
    InvalidPackageMetadata,
    RegistryError,
    UnscopedPackage,
)
from core.models import NormalizedPackageRecord
from core.parse_node import parse_package_json
from core.registry_client import DEFAULT_REGISTRY_URL, NpmRegistryClient

console = Console()

EXIT_UNSCOPED = 3


def configure_logging(verbose: bool) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def format_json_output(records: list[NormalizedPackageRecord], include_raw: bool = False) -> str:
    """Format records as JSON; a single record is emitted as an object."""
    data = [record.to_dict(include_raw=include_raw) for record in records]
    return json.dumps(data[0] if len(data) == 1 else data, indent=2)


def format_table_output(record: NormalizedPackageRecord) -> Table:
    """Format a record as a rich table."""
    table = Table(title=f"{record.name}@{record.version}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Description", str(record.description or ""))
    table.add_row("License", str(record.license or ""))
    table.add_row("Published", str(record.latest_version_published_at or ""))
    table.add_row("Registry", f"{record.registry}{'' if record.uses_public_registry else ' (private)'}")
    table.add_row("npm URL", record.npm_url)
    table.add_row("Source", record.source_url or "")
    table.add_row(
        "Dependencies",
        "\n".join(f"{dep.name} {dep.semver_range}" for dep in record.dependencies),
    )
    table.add_row(
        "Contributors",
        "\n".join(
            f"{c.name} <{c.email}>" if c.email else str(c.name) for c in record.contributors
        ),
    )
    return table


def emit(records: list[NormalizedPackageRecord], format_type: str, include_raw: bool, output: str | None) -> None:
    """Print records, or write them to a file as JSON."""
    if output and output != "-":
        Path(output).write_text(format_json_output(records, include_raw))
        console.print(f"Wrote package metadata to {output}")
    elif format_type == "table":
        for record in records:
            console.print(format_table_output(record))
    else:
        typer.echo(format_json_output(records, include_raw))


app = typer.Typer(
    name="npmmeta",
    help="npmmeta - Normalize npm package.json and registry metadata",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """npmmeta - Normalize npm package.json and registry metadata."""
    configure_logging(verbose)


@app.command()
def parse(
    file_path: str = typer.Argument(help="Path to a package.json or registry document (use '-' for stdin)"),
    output: str | None = typer.Option(None, "--out", "-o", help="Write JSON to file (use '-' for stdout)"),
    format_type: str = typer.Option("json", "--format", help="Output format: json or table"),
    include_raw: bool = typer.Option(False, "--raw", help="Include the raw document in JSON output"),
) -> None:
    """Normalize a package.json or registry document."""

    try:
        if file_path == "-":
            content = sys.stdin.read()
        else:
            path_obj = Path(file_path)
            if not path_obj.exists():
                console.print(f"Error: File {file_path} not found", style="red")
                raise typer.Exit(1)
            content = path_obj.read_text()

        record = parse_package_json(content)
        emit([record], format_type, include_raw, output)

    except typer.Exit:
        raise
    except (InvalidFormat, InvalidPackageMetadata) as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)


@app.command()
def fetch(
    package_names: list[str] = typer.Argument(help="Names of the packages to fetch"),
    registry_url: str = typer.Option(
        DEFAULT_REGISTRY_URL, "--registry-url", envvar="NPMMETA_REGISTRY_URL", help="Registry API base URL"
    ),
    timeout: float = typer.Option(30.0, "--timeout", envvar="NPMMETA_TIMEOUT", help="Request timeout in seconds"),
    output: str | None = typer.Option(None, "--out", "-o", help="Write JSON to file (use '-' for stdout)"),
    format_type: str = typer.Option("json", "--format", help="Output format: json or table"),
    include_raw: bool = typer.Option(False, "--raw", help="Include the raw document in JSON output"),
) -> None:
    """Fetch registry documents and normalize them."""

    try:
        client = NpmRegistryClient(registry_url=registry_url, timeout=timeout)
        records = asyncio.run(client.fetch_records(package_names))
        emit(records, format_type, include_raw, output)

    except (RegistryError, InvalidFormat, InvalidPackageMetadata) as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)


@app.command()
def restrict(
    package_name: str = typer.Argument(help="Name of the scoped package, e.g. @owner/name"),
    npm_command: str = typer.Option("npm", "--npm", envvar="NPMMETA_NPM_COMMAND", help="npm executable"),
) -> None:
    """Restrict access to a package published on npm."""

    if not is_scoped(package_name):
        console.print(
            f'Error: Can\'t change the access level of unscoped package {package_name} (use "@owner/name")',
            style="red",
            markup=False,
        )
        raise typer.Exit(EXIT_UNSCOPED)

    try:
        restrict_access(package_name, npm_command=npm_command)
        console.print(f"Restricted access to {package_name}")

    except UnscopedPackage as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(EXIT_UNSCOPED)
    except AccessCommandFailed as e:
        console.print(f"Error: {e}", style="red")
        if e.output:
            console.print(e.output, markup=False)
        raise typer.Exit(1)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", envvar="NPMMETA_HOST", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", envvar="NPMMETA_PORT", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Restart on changes under apps/ and core/"),
) -> None:
    """Serve the npmmeta web application."""
    console.print(f"Serving npmmeta on http://{host}:{port} (API docs at /docs)")
    uvicorn.run(
        "apps.web.main:app",
        host=host,
        port=port,
        reload=reload,
        reload_dirs=["apps", "core"] if reload else None,
    )


if __name__ == "__main__":
    app()
