import logging
from pathlib import Path

from figma2html.document import html_boilerplate
from figma2html.figma_client import FigmaClient
from figma2html.parser import get_frame_size, list_top_frames, select_frame
from figma2html.render import render_tree

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"
STYLES_FILE = "styles.css"


def convert_frame(node):
    """
    Convert one Figma node into (index.html, styles.css) contents.
    """
    result = render_tree(node)
    page = html_boilerplate(result.html, get_frame_size(node))
    return page, result.stylesheet


def generate(settings, client=None):
    """
    Fetch the file, convert the selected frame and write both files to
    settings.output_dir. Returns the written paths.
    """
    if client is None:
        client = FigmaClient(settings.token)

    file_json = client.get_file(settings.file_key)
    frames = list_top_frames(file_json)
    frame = select_frame(frames, settings.frame_name)
    logger.info("Converting frame '%s' (%s) from page '%s'", frame["name"], frame["id"], frame["page"])

    page, stylesheet = convert_frame(frame["node"])

    out_dir = Path(settings.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    index_path = out_dir / INDEX_FILE
    styles_path = out_dir / STYLES_FILE
    index_path.write_text(page, encoding="utf-8")
    styles_path.write_text(stylesheet, encoding="utf-8")
    logger.info("Wrote %s and %s", index_path, styles_path)
    return index_path, styles_path
