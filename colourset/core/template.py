"""Regex-based colour tag substitution for theme templates.

Tags look like ``{{cs0.background}}`` (hex form, ``#RRGGBB``) or
``{{cs2.foreground.rgb}}`` (X colour form, ``rgb:RR/GG/BB``). ``cs0`` is the
base colourset, ``cs1`` onwards are the alternatives.

Anything else between double braces is an error, as is a tag naming a
missing colourset, an unknown role or an unknown form. A tag never becomes
an empty string.
"""

import re
from collections.abc import Sequence

from colourset.core.types import Colourset, TemplateError

# Any {{ ... }} is a tag; its body must read csN.role or csN.role.form
TAG = re.compile(r'\{\{\s*([^{}]*?)\s*\}\}')
INDEX = re.compile(r'cs(\d+)')
FORMS = ('hex', 'rgb')


def lookup_tag(coloursets: Sequence[Colourset], index: int, role: str, form: str = 'hex') -> str:
    """Text for one colour. Raises TemplateError or UnknownRoleError."""
    if not 0 <= index < len(coloursets):
        raise TemplateError(f'No colourset cs{index}: only cs0..cs{len(coloursets) - 1} exist')
    cs = coloursets[index]
    if form not in FORMS:
        raise TemplateError(f'Unknown colour form {form!r}: expected one of {", ".join(FORMS)}')
    if form == 'rgb':
        return cs.as_rgb_string(role)
    return cs.as_hex_string(role)


def parse_tag(body: str) -> tuple[int, str, str]:
    """Split 'cs2.foreground.rgb' into (2, 'foreground', 'rgb'). Raises TemplateError."""
    parts = body.split('.')
    index = INDEX.fullmatch(parts[0])
    if index is None or len(parts) not in (2, 3):
        raise TemplateError(f'Malformed colour tag {{{{{body}}}}}: expected csN.role or csN.role.rgb')
    form = parts[2] if len(parts) == 3 else 'hex'
    return int(index.group(1)), parts[1], form


def fill_template(text: str, coloursets: Sequence[Colourset]) -> str:
    """Replace every colour tag in text."""

    def _sub(m: re.Match) -> str:
        return lookup_tag(coloursets, *parse_tag(m.group(1)))

    return TAG.sub(_sub, text)


def fill_template_file(path: str, coloursets: Sequence[Colourset]) -> str:
    """Read a template from disk and fill it."""
    try:
        with open(path, encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise TemplateError(f'cannot read template {path}: {e.strerror}') from None
    return fill_template(text, coloursets)
