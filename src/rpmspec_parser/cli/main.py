"""
RPM Spec Parser CLI — inspect the structure of RPM spec files.

Usage:
    rpmspec-parser parse widgets.spec
    rpmspec-parser parse widgets.spec --json
    rpmspec-parser parse widgets.spec --output-dir ./out --format sqlite
    rpmspec-parser tag widgets.spec Version --package widgets-doc
    rpmspec-parser expand widgets.spec "%{name}-%{version}.tar.gz"
"""

import asyncio
import json
import logging

import click

from rpmspec_parser.core.errors import SpecError


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load(spec_file: str):
    from rpmspec_parser.core.parser import RpmSpecParser

    try:
        return RpmSpecParser.from_file(spec_file)
    except SpecError as e:
        raise click.ClickException(str(e)) from e


async def _export(packages, exporter) -> None:
    for package in packages:
        await exporter.export(package)
    await exporter.finalize()


@click.group()
@click.version_option(package_name="rpmspec-parser")
def cli():
    """RPM Spec Parser — split spec files into packages, sections and tags."""
    pass


@cli.command()
@click.argument("spec_file", type=click.Path())
@click.option("--json", "as_json", is_flag=True, help="Print the full parse result as JSON.")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(),
    default=None,
    help="Export package summaries to this directory.",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["json", "sqlite"]),
    default="json",
    help="Export format (with --output-dir).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def parse(spec_file, as_json, output_dir, fmt, verbose):
    """Parse a spec file and summarize its packages."""
    from rich.console import Console
    from rich.table import Table

    from rpmspec_parser.exporters import get_exporter

    _configure_logging(verbose)
    parser = _load(spec_file)
    packages = parser.packages()

    if output_dir:
        asyncio.run(_export(packages, get_exporter(fmt, output_dir)))

    if as_json:
        click.echo(json.dumps(parser.to_dict(), indent=2))
        return

    console = Console()
    table = Table(title=f"{spec_file}")
    table.add_column("Package", style="cyan")
    table.add_column("Version")
    table.add_column("Release")
    table.add_column("Summary")
    table.add_column("Sections", style="green")
    for package in packages:
        name = f"[bold]{package.name}[/bold]" if package.is_main else package.name
        table.add_row(
            name,
            package.version or "",
            package.release or "",
            package.summary or "",
            " ".join(package.sections),
        )
    console.print(table)


@cli.command()
@click.argument("spec_file", type=click.Path())
@click.argument("tag_name")
@click.option("--package", "-p", default=None, help="Package name (default: main package).")
def tag(spec_file, tag_name, package):
    """Print the value of a tag."""
    _configure_logging(False)
    value = _load(spec_file).get_tag_value(package, tag_name)
    if value is None:
        raise click.ClickException(f"Tag {tag_name!r} not set")
    click.echo(value)


@cli.command()
@click.argument("spec_file", type=click.Path())
@click.argument("text")
def expand(spec_file, text):
    """Expand %{macro} placeholders using the spec's macros."""
    _configure_logging(False)
    click.echo(_load(spec_file).expand_macros(text))


if __name__ == "__main__":
    cli()
