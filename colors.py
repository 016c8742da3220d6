from __future__ import annotations
import numbers
import re
from typing import NamedTuple
from geometry import clamp
from helpers import first_within_distance, suggest

class InvalidColorError(ValueError):
    pass

class RGBAColor(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

NAMED_COLORS = {
    'aliceblue': '#f0f8ff',
    'antiquewhite': '#faebd7',
    'aqua': '#00ffff',
    'aquamarine': '#7fffd4',
    'azure': '#f0ffff',
    'beige': '#f5f5dc',
    'bisque': '#ffe4c4',
    'black': '#000000',
    'blanchedalmond': '#ffebcd',
    'blue': '#0000ff',
    'blueviolet': '#8a2be2',
    'brown': '#a52a2a',
    'burlywood': '#deb887',
    'cadetblue': '#5f9ea0',
    'chartreuse': '#7fff00',
    'chocolate': '#d2691e',
    'coral': '#ff7f50',
    'cornflowerblue': '#6495ed',
    'cornsilk': '#fff8dc',
    'crimson': '#dc143c',
    'cyan': '#00ffff',
    'darkblue': '#00008b',
    'darkcyan': '#008b8b',
    'darkgoldenrod': '#b8860b',
    'darkgray': '#a9a9a9',
    'darkgreen': '#006400',
    'darkgrey': '#a9a9a9',
    'darkkhaki': '#bdb76b',
    'darkmagenta': '#8b008b',
    'darkolivegreen': '#556b2f',
    'darkorange': '#ff8c00',
    'darkorchid': '#9932cc',
    'darkred': '#8b0000',
    'darksalmon': '#e9967a',
    'darkseagreen': '#8fbc8f',
    'darkslateblue': '#483d8b',
    'darkslategray': '#2f4f4f',
    'darkslategrey': '#2f4f4f',
    'darkturquoise': '#00ced1',
    'darkviolet': '#9400d3',
    'deeppink': '#ff1493',
    'deepskyblue': '#00bfff',
    'dimgray': '#696969',
    'dimgrey': '#696969',
    'dodgerblue': '#1e90ff',
    'firebrick': '#b22222',
    'floralwhite': '#fffaf0',
    'forestgreen': '#228b22',
    'fuchsia': '#ff00ff',
    'gainsboro': '#dcdcdc',
    'ghostwhite': '#f8f8ff',
    'gold': '#ffd700',
    'goldenrod': '#daa520',
    'gray': '#808080',
    'green': '#008000',
    'greenyellow': '#adff2f',
    'grey': '#808080',
    'honeydew': '#f0fff0',
    'hotpink': '#ff69b4',
    'indianred': '#cd5c5c',
    'indigo': '#4b0082',
    'ivory': '#fffff0',
    'khaki': '#f0e68c',
    'lavender': '#e6e6fa',
    'lavenderblush': '#fff0f5',
    'lawngreen': '#7cfc00',
    'lemonchiffon': '#fffacd',
    'lightblue': '#add8e6',
    'lightcoral': '#f08080',
    'lightcyan': '#e0ffff',
    'lightgoldenrodyellow': '#fafad2',
    'lightgray': '#d3d3d3',
    'lightgreen': '#90ee90',
    'lightgrey': '#d3d3d3',
    'lightpink': '#ffb6c1',
    'lightsalmon': '#ffa07a',
    'lightseagreen': '#20b2aa',
    'lightskyblue': '#87cefa',
    'lightslategray': '#778899',
    'lightslategrey': '#778899',
    'lightsteelblue': '#b0c4de',
    'lightyellow': '#ffffe0',
    'lime': '#00ff00',
    'limegreen': '#32cd32',
    'linen': '#faf0e6',
    'magenta': '#ff00ff',
    'maroon': '#800000',
    'mediumaquamarine': '#66cdaa',
    'mediumblue': '#0000cd',
    'mediumorchid': '#ba55d3',
    'mediumpurple': '#9370db',
    'mediumseagreen': '#3cb371',
    'mediumslateblue': '#7b68ee',
    'mediumspringgreen': '#00fa9a',
    'mediumturquoise': '#48d1cc',
    'mediumvioletred': '#c71585',
    'midnightblue': '#191970',
    'mintcream': '#f5fffa',
    'mistyrose': '#ffe4e1',
    'moccasin': '#ffe4b5',
    'navajowhite': '#ffdead',
    'navy': '#000080',
    'oldlace': '#fdf5e6',
    'olive': '#808000',
    'olivedrab': '#6b8e23',
    'orange': '#ffa500',
    'orangered': '#ff4500',
    'orchid': '#da70d6',
    'palegoldenrod': '#eee8aa',
    'palegreen': '#98fb98',
    'paleturquoise': '#afeeee',
    'palevioletred': '#db7093',
    'papayawhip': '#ffefd5',
    'peachpuff': '#ffdab9',
    'peru': '#cd853f',
    'pink': '#ffc0cb',
    'plum': '#dda0dd',
    'powderblue': '#b0e0e6',
    'purple': '#800080',
    'rebeccapurple': '#663399',
    'red': '#ff0000',
    'rosybrown': '#bc8f8f',
    'royalblue': '#4169e1',
    'saddlebrown': '#8b4513',
    'salmon': '#fa8072',
    'sandybrown': '#f4a460',
    'seagreen': '#2e8b57',
    'seashell': '#fff5ee',
    'sienna': '#a0522d',
    'silver': '#c0c0c0',
    'skyblue': '#87ceeb',
    'slateblue': '#6a5acd',
    'slategray': '#778090',
    'slategrey': '#778090',
    'snow': '#fffafa',
    'springgreen': '#00ff7f',
    'steelblue': '#4682b4',
    'tan': '#d2b48c',
    'teal': '#008080',
    'thistle': '#d8bfd8',
    'tomato': '#ff6347',
    'turquoise': '#40e0d0',
    'violet': '#ee82ee',
    'wheat': '#f5deb3',
    'white': '#ffffff',
    'whitesmoke': '#f5f5f5',
    'yellow': '#ffff00',
    'yellowgreen': '#9acd32',
}

HEX_COLOR_PATTERN = re.compile(r'^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$', re.IGNORECASE)
HEX_DIGITS_PATTERN = re.compile(r'^#([a-f\d]{3}|[a-f\d]{4}|[a-f\d]{6}|[a-f\d]{8})$', re.IGNORECASE)
BARE_HEX6_PATTERN = re.compile(r'^[a-f\d]{6}$', re.IGNORECASE)
SHORT_HEX_PATTERN = re.compile(r'^#[a-f\d]{3}$', re.IGNORECASE)
RGB_FUNCTION_PATTERN = re.compile(r'^rgba?\(([^)]*)\)$')
CHANNEL_PATTERN = re.compile(r'^([-+]?(?:\d+\.?\d*|\.\d+))(%?)$')

MAX_NAME_DISTANCE = 2

def parse_hex_color(hex_str: str) -> tuple[int, int, int]:
    hex_str = hex_str.strip()
    if not HEX_DIGITS_PATTERN.match(hex_str if hex_str.startswith('#') else '#' + hex_str):
        raise InvalidColorError(f"Invalid hex color: {hex_str}")
    hex_str = hex_str.lstrip('#')

    # alpha digits of #rgba / #rrggbbaa are dropped, output alpha is always opaque
    if len(hex_str) in (3, 4):
        r = int(hex_str[0], 16) * 17
        g = int(hex_str[1], 16) * 17
        b = int(hex_str[2], 16) * 17
        return (r, g, b)

    r = int(hex_str[0:2], 16)
    g = int(hex_str[2:4], 16)
    b = int(hex_str[4:6], 16)
    return (r, g, b)

def _parse_channel(value: str) -> int:
    match = CHANNEL_PATTERN.match(value.strip())
    if not match:
        raise InvalidColorError(f"Invalid color channel: {value!r}")
    number = float(match.group(1))
    if match.group(2) == '%':
        number = number * 255 / 100
    return int(clamp(round(number), 0, 255))

def parse_rgb_color(rgb_str: str) -> tuple[int, int, int]:
    rgb_str = rgb_str.strip().lower()

    match = RGB_FUNCTION_PATTERN.match(rgb_str)
    if not match:
        raise InvalidColorError(f"Invalid rgb() color: {rgb_str}")

    values = [v for v in re.split(r'[,\s/]+', match.group(1).strip()) if v]
    if len(values) not in (3, 4):
        raise InvalidColorError(f"rgb() needs 3 or 4 values, got {len(values)}")

    r, g, b = (_parse_channel(v) for v in values[:3])
    if len(values) == 4:
        _parse_channel(values[3])
    return (r, g, b)

def parse_color(color_str: str) -> tuple[int, int, int]:
    color_str = color_str.strip().lower()

    if color_str in NAMED_COLORS:
        return parse_hex_color(NAMED_COLORS[color_str])

    if color_str.startswith('#'):
        return parse_hex_color(color_str)

    if color_str.startswith('rgb'):
        return parse_rgb_color(color_str)

    raise InvalidColorError(f"Unrecognised color: {color_str}")

def is_valid_color(color_str: str) -> bool:
    if not color_str or not isinstance(color_str, str):
        return False
    try:
        parse_color(color_str)
    except InvalidColorError:
        return False
    return True

def to_hex(color_str: str) -> str:
    r, g, b = parse_color(color_str)
    return f"#{r:02x}{g:02x}{b:02x}"

def repair_color_syntax(value: str) -> str:
    color = value.strip()

    if color.startswith('@') or color.startswith('0x'):
        color = '#' + color[2 if color.startswith('0x') else 1:]

    if BARE_HEX6_PATTERN.match(color):
        color = '#' + color

    if SHORT_HEX_PATTERN.match(color):
        color = '#' + color[1] * 2 + color[2] * 2 + color[3] * 2

    return color

def find_closest_color_name(value: str) -> str | None:
    lowered = value.strip().lower()
    if lowered in NAMED_COLORS:
        return lowered
    return first_within_distance(lowered, NAMED_COLORS, MAX_NAME_DISTANCE)

def normalize_color(value: str, strict: bool = False) -> str:
    """Turn user input into ``#rrggbb``.

    Non-strict mode repairs common syntax slips (``@fff``, ``0xff0000``,
    bare ``ff0000``) and accepts names up to two edits away from a CSS
    color name. Strict mode only canonicalises input that is already valid.
    """
    original = value

    if strict:
        if is_valid_color(value):
            return to_hex(value)
        raise InvalidColorError(f"Invalid colour '{original}'.")

    color = repair_color_syntax(value)
    if is_valid_color(color):
        return to_hex(color)

    closest_name = find_closest_color_name(value)
    if closest_name:
        return NAMED_COLORS[closest_name]

    suggestion = suggest(value.strip().lower(), NAMED_COLORS)
    if suggestion:
        raise InvalidColorError(f"Invalid colour '{original}'. Did you mean '{suggestion}'?")
    raise InvalidColorError(f"Invalid colour '{original}'.")

def hex_to_rgba(hex_str: str) -> RGBAColor:
    match = HEX_COLOR_PATTERN.match(hex_str)
    if not match:
        raise InvalidColorError(f"Invalid hex color: {hex_str}")

    return RGBAColor(int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16), 255)

def coerce_color(color) -> RGBAColor:
    if isinstance(color, RGBAColor):
        return color

    if isinstance(color, str):
        return hex_to_rgba(color)

    if isinstance(color, (tuple, list)) and len(color) in (3, 4):
        channels = list(color)
        for channel in channels:
            if isinstance(channel, bool) or not isinstance(channel, numbers.Integral) or not 0 <= channel <= 255:
                raise InvalidColorError(f"Color channels must be integers in 0-255, got {tuple(color)}")
        if len(channels) == 3:
            channels.append(255)
        return RGBAColor(*(int(c) for c in channels))

    raise InvalidColorError(f"Unsupported color value: {color!r}")
