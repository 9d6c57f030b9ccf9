"""CLI entry point for trello-spore."""

import logging
from pathlib import Path

import click

from trello_spore.config import load_settings
from trello_spore.exceptions import SporeError
from trello_spore.fetch import DirectoryFetcher, DocFetcher
from trello_spore.pipeline import build_document

DEFAULT_OUTPUT = "trello.json"


@click.command()
@click.option("-o", "--output", default=DEFAULT_OUTPUT, show_default=True, help="Output file path, or '-' for standard output.")
@click.option("-v", "--verbose", is_flag=True, help="Report each region and method as it is processed.")
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML file overriding the API settings.")
@click.option("--from-dir", default=None, type=click.Path(exists=True, file_okay=False, path_type=Path), help="Read <region>.html files from this directory instead of the web.")
@click.option("--strict", is_flag=True, help="Fail when two methods get the same name instead of keeping the last one.")
def main(output: str, verbose: bool, config_path: Path | None, from_dir: Path | None, strict: bool):
    """Build a SPORE description of the Trello API from its HTML documentation."""
    to_stdout = output == "-"
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    def progress(line: str) -> None:
        if verbose:
            click.echo(line, err=to_stdout)

    try:
        settings = load_settings(config_path)
        fetcher = DirectoryFetcher(from_dir) if from_dir else DocFetcher(settings)
        with fetcher:
            assembler = build_document(settings, fetcher, strict=strict, on_progress=progress)
    except SporeError as e:
        raise click.ClickException(str(e)) from e

    text = assembler.to_json()
    if to_stdout:
        click.echo(text)
        return

    try:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
    except OSError as e:
        raise click.ClickException(f"Can't open {output}: {e.strerror or e}") from e
    progress(f"Output written to {output}.")
