import math
import re
import unicodedata
from xml.sax.saxutils import escape, quoteattr

_HEX_COLOR_RE = re.compile(r'^#?([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$')
_TIKZ_COLOR_NAME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9!.]*$')


def format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError('Cannot format non-finite float for drawing output')
    formatted = f'{value:.4f}'
    formatted = formatted.rstrip('0').rstrip('.')
    if formatted in ('', '-0'):
        return '0'
    return formatted


def _strip_combining(text: str) -> str:
    text = unicodedata.normalize('NFC', text)
    return ''.join(ch for ch in text if unicodedata.category(ch) != 'Mn')


def latex_escape(text: str) -> str:
    text = _strip_combining(text)
    repl = {
        '\\': r'\textbackslash{}',
        '&':  r'\&',
        '%':  r'\%',
        '$':  r'\$',
        '#':  r'\#',
        '_':  r'\_',
        '{':  r'\{',
        '}':  r'\}',
        '~':  r'\textasciitilde{}',
        '^':  r'\textasciicircum{}',
    }
    return ''.join(repl.get(c, c) for c in text)


def xml_text(text: str) -> str:
    return escape(text)


def xml_attr(value: str) -> str:
    """Quoted attribute value, quotes included."""
    return quoteattr(value)


def hex_color(color: str):
    """Return ``RRGGBB`` for ``#rgb``/``#rrggbb`` colors, else ``None``."""
    m = _HEX_COLOR_RE.match(color.strip())
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    return digits.upper()


def is_tikz_color_name(color: str) -> bool:
    return bool(_TIKZ_COLOR_NAME_RE.match(color.strip()))
