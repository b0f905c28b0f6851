"""Command-line interface for the Unstructured client."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from unstructured_client import __version__
from unstructured_client.core.client import UnstructuredClient
from unstructured_client.errors import UnstructuredClientError
from unstructured_client.models.config import (
    DEFAULT_BASE_URL,
    ChunkingStrategy,
    ClientConfig,
    OutputFormat,
    PartitionParameters,
    Strategy,
)
from unstructured_client.models.metadata import FILETYPE_ALIASES, FORMAT_RECORDS
from unstructured_client.models.response import PartitionSuccess
from unstructured_client.utils.logging import set_log_level

console = Console(stderr=True)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="unstructured-client")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Unstructured client - partition documents with the Unstructured API."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="partition")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--base-url",
    default=DEFAULT_BASE_URL,
    envvar="UNSTRUCTURED_BASE_URL",
    show_default=True,
    help="Base URL of the Unstructured API",
)
@click.option("--api-key", envvar="UNSTRUCTURED_API_KEY", help="API key")
@click.option("-o", "--output", type=click.Path(), help="Output file path")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--coordinates/--no-coordinates", default=False, help="Return element coordinates")
@click.option("--encoding", help="Text encoding of the input [default: utf-8]")
@click.option(
    "--extract-image-block-types",
    multiple=True,
    help="Element type to extract as base64 image data (repeatable)",
)
@click.option("--gz-uncompressed-content-type", help="Content type of a gzipped file's payload")
@click.option("--hi-res-model-name", help="Inference model for the hi_res strategy")
@click.option("--include-page-breaks/--no-include-page-breaks", default=False)
@click.option("--languages", multiple=True, help="Document language (repeatable)")
@click.option(
    "--output-format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.APPLICATION_JSON.value,
    show_default=True,
)
@click.option(
    "--skip-infer-table-types",
    multiple=True,
    help="Document type to skip table extraction for (repeatable)",
)
@click.option("--starting-page-number", type=int)
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in Strategy]),
    default=Strategy.AUTO.value,
    show_default=True,
)
@click.option(
    "--unique-element-ids/--no-unique-element-ids",
    default=False,
    help="Use UUIDs instead of text hashes as element IDs",
)
@click.option("--xml-keep-tags/--no-xml-keep-tags", default=False)
@click.option(
    "--chunking-strategy",
    type=click.Choice([c.value for c in ChunkingStrategy]),
    help="Chunk elements after partitioning",
)
@click.option("--combine-under-n-chars", type=int)
@click.option("--include-orig-elements/--no-include-orig-elements", default=True)
@click.option("--max-characters", type=int, help="Hard maximum chunk size")
@click.option("--multipage-sections/--no-multipage-sections", default=True)
@click.option("--new-after-n-chars", type=int, help="Soft maximum chunk size")
@click.option("--overlap", type=int, default=0, show_default=True)
@click.option("--overlap-all/--no-overlap-all", default=False)
@click.option("--similarity-threshold", type=float)
def partition_cmd(
    file_path: str,
    base_url: str,
    api_key: Optional[str],
    output: Optional[str],
    verbose: bool,
    **options: object,
) -> None:
    """Partition a document and print its elements as JSON.

    Examples:

        unstructured-client partition report.pdf

        unstructured-client partition report.pdf --strategy hi_res --coordinates

        unstructured-client partition book.epub --chunking-strategy by_title -o out.json
    """
    if verbose:
        set_log_level("DEBUG")

    try:
        params = PartitionParameters(**options)
        config = ClientConfig(base_url=base_url, api_key=api_key)
        with UnstructuredClient(config) as client, console.status(
            f"Partitioning {Path(file_path).name}..."
        ):
            response = client.partition_file(file_path, params)
    except UnstructuredClientError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        sys.exit(1)

    if not isinstance(response, PartitionSuccess):
        console.print("[red]Error: service returned an error response[/red]")
        click.echo(response.to_json(), err=True)
        sys.exit(1)

    output_content = response.to_json()
    if output:
        Path(output).write_text(output_content, encoding="utf-8")
        console.print(
            f"[green]{len(response.elements)} elements written to {output}[/green]"
        )
    else:
        click.echo(output_content)


@cli.command()
def filetypes() -> None:
    """List the file types with format-specific metadata."""
    table = Table(title="Metadata File Types")
    table.add_column("filetype", style="cyan")
    table.add_column("Metadata", style="green")
    table.add_column("Aliases", style="yellow")

    for file_format, record in FORMAT_RECORDS.items():
        aliases = [a for a, f in FILETYPE_ALIASES.items() if f is file_format]
        table.add_row(
            file_format.value,
            record.__name__,
            ", ".join(aliases) if aliases else "",
        )

    Console().print(table)


if __name__ == "__main__":
    cli()
