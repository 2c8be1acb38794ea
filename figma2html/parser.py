import re

from figma2html.errors import FrameNotFoundError, NoFramesError
from figma2html.styles import round_half_up

FRAME_TYPES = ('FRAME', 'GROUP', 'COMPONENT', 'INSTANCE')

DEFAULT_FRAME_SIZE = (390, 844)

FILE_KEY_RE = re.compile(r'(?:file|design|proto)/([a-zA-Z0-9]+)')


def parse_file_key(url):
    # Support both old /file/ and new /design/ URLs
    # Also sometimes it is /proto/ for prototypes
    match = FILE_KEY_RE.search(url or '')
    if match:
        return match.group(1)
    return None


def list_top_frames(file_json):
    """
    Get all top-level frames (children of the pages/canvases).
    Returns a list of dicts: {'page', 'id', 'name', 'node'}
    """
    frames = []
    document = file_json.get('document') or {}
    # Document -> Canvas -> Frames
    for page in document.get('children') or []:
        for node in page.get('children') or []:
            if node.get('type') in FRAME_TYPES:
                frames.append({
                    'page': page.get('name'),
                    'id': node.get('id'),
                    'name': node.get('name'),
                    'node': node,
                })
    return frames


def select_frame(frames, name=None):
    """
    Pick the frame to convert: the first one, or the one called `name`.
    """
    if not frames:
        raise NoFramesError('No top-level frames in this file.')
    if not name:
        return frames[0]
    for frame in frames:
        if frame['name'] == name:
            return frame
    raise FrameNotFoundError(name, [f['name'] for f in frames])


def find_node_by_id(node, target_id):
    """
    Recursively find a node by its ID.
    """
    if node.get('id') == target_id:
        return node

    for child in node.get('children') or []:
        found = find_node_by_id(child, target_id)
        if found:
            return found
    return None


def get_frame_size(node):
    # Same rounding as the root node's width/height rule
    bb = (node or {}).get('absoluteBoundingBox')
    if not isinstance(bb, dict):
        bb = {}
    width = round_half_up(bb.get('width'))
    height = round_half_up(bb.get('height'))
    return (
        width if width is not None else DEFAULT_FRAME_SIZE[0],
        height if height is not None else DEFAULT_FRAME_SIZE[1],
    )
