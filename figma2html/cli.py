"""figma2html CLI: convert a Figma frame to output/index.html + output/styles.css."""

import logging

import click
import requests

from figma2html import __version__
from figma2html.config import Settings
from figma2html.errors import Figma2HtmlError
from figma2html.figma_client import FigmaClient
from figma2html.generate import generate as generate_files
from figma2html.parser import list_top_frames


def _setup_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(version=__version__, prog_name="figma2html")
def cli() -> None:
    """figma2html - turn Figma frames into static HTML/CSS."""


@cli.command()
@click.option("--file-key", default=None, help="Figma file key (defaults to FIGMA_FILE_KEY).")
@click.option("--frame", "frame_name", default=None, help="Top-level frame name (defaults to FRAME_NAME, else the first frame).")
@click.option("--out", "output_dir", default=None, help="Output directory (defaults to OUTPUT_DIR or ./output).")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
def generate(file_key, frame_name, output_dir, verbose):
    """Write index.html and styles.css for one frame."""
    _setup_logging(verbose)
    try:
        settings = Settings.from_env(file_key=file_key, frame_name=frame_name, output_dir=output_dir)
        index_path, styles_path = generate_files(settings)
    except (Figma2HtmlError, requests.RequestException) as e:
        raise click.ClickException(f"Generation failed: {e}")
    click.echo(f"Wrote {index_path} and {styles_path}")


@cli.command()
@click.option("--file-key", default=None, help="Figma file key (defaults to FIGMA_FILE_KEY).")
def frames(file_key):
    """List the top-level frames of a file."""
    try:
        settings = Settings.from_env(file_key=file_key)
        file_json = FigmaClient(settings.token).get_file(settings.file_key)
    except (Figma2HtmlError, requests.RequestException) as e:
        raise click.ClickException(str(e))
    for frame in list_top_frames(file_json):
        click.echo(f"{frame['page']}\t{frame['id']}\t{frame['name']}")
