import logging
from dataclasses import dataclass, field

from figma2html.errors import CyclicTreeError
from figma2html.styles import SPECIAL_CASES, base_style

logger = logging.getLogger(__name__)


class ClassNames:
    """
    Hands out n1, n2, ... for one conversion.
    Not thread-safe; a parallel walk would need one sequence per subtree.
    """

    def __init__(self, prefix="n", start=0):
        self.prefix = prefix
        self.seq = start

    def next(self):
        self.seq += 1
        return f"{self.prefix}{self.seq}"


@dataclass
class RenderResult:
    html: str
    css: list = field(default_factory=list)

    @property
    def stylesheet(self):
        return "\n".join(self.css)


def style_to_text(style):
    return "".join(f"{k}:{v};" for k, v in style.items() if v is not None and v != "")


def css_rule(class_name, style):
    return f".{class_name}{{{style_to_text(style)}}}"


def escape_text(text):
    return text.replace("<", "&lt;").replace(">", "&gt;")


def render_tree(root, class_names=None, special_cases=SPECIAL_CASES):
    """
    Render a Figma node and its visible descendants.
    Returns the markup plus one CSS rule per rendered node, in pre-order.
    """
    if class_names is None:
        class_names = ClassNames()
    css = []
    html = _visit(root, None, css, class_names, special_cases, set())
    logger.debug("Rendered %d nodes from %s", len(css), root.get("name", root.get("id")))
    return RenderResult(html=html, css=css)


def _visit(node, parent, css, class_names, special_cases, ancestors):
    if node.get("visible") is False:
        return ""
    if id(node) in ancestors:
        raise CyclicTreeError(f"Node {node.get('id')!r} is its own ancestor")

    cls = class_names.next()
    css.append(css_rule(cls, base_style(node, parent, special_cases)))

    if node.get("type") == "TEXT":
        return f'<p class="{cls}">{escape_text(node.get("characters") or "")}</p>'

    ancestors.add(id(node))
    rendered = [
        _visit(child, node, css, class_names, special_cases, ancestors)
        for child in node.get("children") or []
    ]
    # hidden children render as ""
    children = "\n".join(r for r in rendered if r)
    ancestors.discard(id(node))
    return f'<div class="{cls}">{children}</div>'
