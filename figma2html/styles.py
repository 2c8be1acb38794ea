"""
Figma node -> CSS declaration mapping.

Every helper takes raw Figma REST API node data (plain dicts) and returns a
partial declaration dict, or None/{} when the attribute is absent or not
supported. Nothing here raises on malformed input; unknown data simply emits
no declaration.
"""
import math

AUTO_LAYOUT_MODES = ('HORIZONTAL', 'VERTICAL')

ALIGN_MAP = {
    'MIN': 'flex-start',
    'CENTER': 'center',
    'MAX': 'flex-end',
    'SPACE_BETWEEN': 'space-between',
}

ALIGN_SELF_MAP = {
    'MIN': 'flex-start',
    'CENTER': 'center',
    'MAX': 'flex-end',
    'STRETCH': 'stretch',
}

TEXT_ALIGN_MAP = {
    'LEFT': 'left',
    'CENTER': 'center',
    'RIGHT': 'right',
}


def is_number(value):
    """True for finite ints/floats (bools, NaN and infinities excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def round_half_up(n):
    # Half-up, like the browser-side Math.round the output is compared against
    if not is_number(n):
        return None
    return int(math.floor(n + 0.5))


def _num(n):
    """Render a number without a trailing .0 for integral values."""
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def px(n):
    rounded = round_half_up(n)
    if rounded is None:
        return None
    return f'{rounded}px'


def _visible(items):
    return [i for i in items if isinstance(i, dict) and i.get('visible', True) is not False]


def _channel(value):
    return round_half_up(value * 255) if is_number(value) else 0


def _rgba(color, alpha):
    r = _channel(color.get('r', 0))
    g = _channel(color.get('g', 0))
    b = _channel(color.get('b', 0))
    if not is_number(alpha):
        alpha = 1
    return f'rgba({r}, {g}, {b}, {_num(alpha)})'


def is_auto_layout(node):
    return bool(node) and node.get('layoutMode') in AUTO_LAYOUT_MODES


def color_to_rgba(paint):
    if not isinstance(paint, dict) or paint.get('type') != 'SOLID':
        return None
    color = paint.get('color')
    if not isinstance(color, dict):
        return None
    opacity = paint.get('opacity')
    return _rgba(color, opacity if opacity is not None else 1)


def fill_to_css(fills):
    """
    Map the first visible fill to a background.
    Text nodes get their color through text_to_css instead.
    """
    if not isinstance(fills, list) or not fills:
        return None
    visible = _visible(fills)
    if not visible:
        return None
    first = visible[0]
    kind = first.get('type')

    if kind == 'SOLID':
        color = color_to_rgba(first)
        return {'background': color} if color else None

    if kind == 'GRADIENT_LINEAR' and isinstance(first.get('gradientStops'), list):
        stops = []
        for stop in first['gradientStops']:
            if not isinstance(stop, dict):
                continue
            color = stop.get('color')
            if not isinstance(color, dict):
                color = {}
            position = stop.get('position') or 0
            pos = round_half_up(position * 100) if is_number(position) else 0
            stops.append(f"{_rgba(color, color.get('a', 1))} {pos}%")
        if not stops:
            return None
        return {'background-image': f"linear-gradient({', '.join(stops)})"}

    # IMAGE, radial/angular/diamond gradients, etc.
    return None


def border_to_css(strokes, weight):
    if not isinstance(strokes, list) or not strokes or not weight or px(weight) is None:
        return None
    visible = _visible(strokes)
    if not visible or visible[0].get('type') != 'SOLID':
        return None
    color = color_to_rgba(visible[0])
    if color is None:
        return None
    return {'border': f'{px(weight)} solid {color}'}


def radius_to_css(node):
    corners = node.get('rectangleCornerRadii')
    if isinstance(corners, list) and len(corners) == 4:
        return {'border-radius': ' '.join(px(c) or '0px' for c in corners)}
    radius = px(node.get('cornerRadius'))
    if radius is None:
        return None
    return {'border-radius': radius}


def effects_to_css(effects):
    if not isinstance(effects, list) or not effects:
        return None
    shadows = [e for e in _visible(effects) if e.get('type') == 'DROP_SHADOW']
    if not shadows:
        return None
    shadow = shadows[0]
    color = shadow.get('color')
    if not isinstance(color, dict):
        color = {}
    offset = shadow.get('offset')
    if not isinstance(offset, dict):
        offset = {}
    x = px(offset.get('x')) or '0px'
    y = px(offset.get('y')) or '0px'
    blur = px(shadow.get('radius')) or '0px'
    return {'box-shadow': f"{x} {y} {blur} 0 {_rgba(color, color.get('a', 1))}"}


def autolayout_to_css(node):
    """Auto-layout frames become flex containers."""
    mode = node.get('layoutMode')
    if mode not in AUTO_LAYOUT_MODES:
        return {}
    return {
        'display': 'flex',
        'flex-direction': 'row' if mode == 'HORIZONTAL' else 'column',
        'gap': px(node.get('itemSpacing')),
        'align-items': ALIGN_MAP.get(node.get('counterAxisAlignItems')),
        'justify-content': ALIGN_MAP.get(node.get('primaryAxisAlignItems')),
    }


def padding_to_css(node):
    css = {}
    for side in ('Left', 'Right', 'Top', 'Bottom'):
        value = node.get(f'padding{side}')
        if value is not None:
            css[f'padding-{side.lower()}'] = px(value)
    return css


def text_to_css(node):
    css = {}
    style = node.get('style')
    if not isinstance(style, dict):
        style = {}

    if style.get('fontSize'):
        css['font-size'] = px(style['fontSize'])
    if style.get('fontWeight'):
        css['font-weight'] = _num(style['fontWeight'])
    if style.get('lineHeightPx'):
        css['line-height'] = px(style['lineHeightPx'])
    if style.get('letterSpacing'):
        css['letter-spacing'] = px(style['letterSpacing'])
    if style.get('textDecoration') == 'UNDERLINE':
        css['text-decoration'] = 'underline'
    if style.get('textCase') == 'UPPER':
        css['text-transform'] = 'uppercase'
    if style.get('fontFamily'):
        css['font-family'] = f"'{style['fontFamily']}', system-ui, sans-serif"

    align = TEXT_ALIGN_MAP.get(node.get('textAlignHorizontal'))
    if align:
        css['text-align'] = align

    fill = fill_to_css(node.get('fills')) or {}
    if fill.get('background'):
        css['color'] = fill['background']

    # <p> default margins
    css['margin'] = '0'
    return css


def child_in_auto_layout_css(node):
    css = {}
    if node.get('layoutGrow') == 1:
        css['flex'] = '1 1 auto'
    align_self = ALIGN_SELF_MAP.get(node.get('layoutAlign'))
    if align_self:
        css['align-self'] = align_self
    return css


def _number_or_zero(value):
    return value if is_number(value) else 0


def center_forgot_password(node, parent, css):
    """
    Content-specific hack: "Forgot password" links are centered under the
    form they belong to, whatever their design coordinates say.
    Returns True when it fired.
    """
    if node.get('type') != 'TEXT' or not isinstance(node.get('characters'), str):
        return False
    text = node['characters'].strip().lower()
    if 'forgot' not in text or 'password' not in text:
        return False

    bb = node.get('absoluteBoundingBox')
    if is_auto_layout(parent):
        css['align-self'] = 'center'
        css['width'] = 'auto'
        css['text-align'] = 'center'
        return True

    parent_bb = parent.get('absoluteBoundingBox') if parent else None
    if not isinstance(parent_bb, dict) or not isinstance(bb, dict):
        return False

    pad_left = _number_or_zero(parent.get('paddingLeft'))
    pad_right = _number_or_zero(parent.get('paddingRight'))
    inner = max(0, _number_or_zero(parent_bb.get('width')) - pad_left - pad_right)
    left = pad_left + max(0, (inner - _number_or_zero(bb.get('width'))) / 2)
    css['position'] = 'absolute'
    css['left'] = px(left)
    css['width'] = px(bb.get('width'))
    css['text-align'] = 'center'
    return True


# Applied in order after the general rules and before positioning.
# Pass special_cases=() to base_style to turn them off.
SPECIAL_CASES = (center_forgot_password,)


def _delta(child, parent):
    if not is_number(child) or not is_number(parent):
        return None
    return px(child - parent)


def base_style(node, parent=None, special_cases=SPECIAL_CASES):
    """
    Compute the full declaration dict for one node.

    Sizing and positioning depend on whether the parent is an auto-layout
    frame: flex children are sized and placed by the browser, everything else
    gets explicit width/height and absolute coordinates relative to the parent.
    Later assignments overwrite earlier ones.
    """
    css = {}
    bb = node.get('absoluteBoundingBox')
    if not isinstance(bb, dict):
        bb = None
    parent_is_auto = is_auto_layout(parent)
    is_text = node.get('type') == 'TEXT'

    if not parent_is_auto and bb:
        css['width'] = px(bb.get('width'))
        css['height'] = px(bb.get('height'))

    if not is_text:
        css.update(fill_to_css(node.get('fills')) or {})
    css.update(border_to_css(node.get('strokes'), node.get('strokeWeight')) or {})
    radius = radius_to_css(node)
    if radius:
        css.update(radius)
        css['overflow'] = 'hidden'
    css.update(effects_to_css(node.get('effects')) or {})

    css.update(autolayout_to_css(node))
    css.update(padding_to_css(node))

    if is_text:
        css.update(text_to_css(node))

    if parent_is_auto:
        css.update(child_in_auto_layout_css(node))

    for rule in special_cases:
        rule(node, parent, css)

    parent_bb = parent.get('absoluteBoundingBox') if parent else None
    if parent and not parent_is_auto and bb and isinstance(parent_bb, dict):
        css.setdefault('position', 'absolute')
        # unusable coordinates leave left/top unset
        if css.get('left') is None:
            css['left'] = _delta(bb.get('x', 0), parent_bb.get('x', 0))
        if css.get('top') is None:
            css['top'] = _delta(bb.get('y', 0), parent_bb.get('y', 0))
    else:
        css.setdefault('position', 'relative')

    css['box-sizing'] = 'border-box'
    return css
