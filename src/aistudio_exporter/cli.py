import logging

import click

from .errors import ExportError, UnsupportedFormatError
from .export import export_chunks
from .writers import WriterConfig, create_writer


@click.group()
@click.version_option(
    package_name="aistudio-exporter", message="%(prog)s version %(version)s"
)
@click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Enable debug logging."
)
def cli(verbose: bool) -> None:
    """
    Extracts text chunks from a JSON file into a single text document or database.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_path", metavar="INPUT")
@click.argument("output_path", metavar="OUTPUT")
@click.option(
    "-f",
    "--format",
    "output_format",
    default="txt",
    show_default=True,
    help="Output format: txt or sqlite.",
)
def export(input_path: str, output_path: str, output_format: str) -> None:
    """
    Exports text chunks from JSON to a text file or SQLite database.
    """
    try:
        config = WriterConfig(path=output_path, format=output_format)  # type: ignore
        writer = create_writer(config)
    except UnsupportedFormatError as e:
        raise click.BadParameter(str(e), param_hint="'--format'") from e

    try:
        export_chunks(input_path, writer)
    except ExportError as e:
        raise click.ClickException(str(e)) from e

    click.echo(
        f"Successfully exported from {input_path} to {output_path} "
        f"(format: {output_format})"
    )


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
