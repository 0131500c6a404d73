"""Report builder — text and JSON output for a generated palette."""

import json
from typing import Any

from colourset.core.types import ROLES, Colourset, Palette


def _label(index: int) -> str:
    return 'base' if index == 0 else f'alt {index}'


def describe(cs: Colourset) -> str:
    """Short human name such as 'hue 60 shade 1' or 'grey shade 3'."""
    if cs.is_grey:
        return f'grey shade {cs.shade}'
    return f'hue {cs.hue} shade {cs.shade}'


def format_text(palette: Palette) -> str:
    """Format palette as human-readable text."""
    lines = []
    header = f'colourset: {len(palette.members)} coloursets'
    if palette.seed is not None:
        header += f' (seed {palette.seed})'
    lines.append(header)
    lines.append('')

    for i, cs in enumerate(palette.members):
        lines.append(f'── cs{i} {_label(i)}: {describe(cs)}')
        for role in ROLES:
            lines.append(f'  {role:<20} {cs.as_hex_string(role)}  {cs.as_rgb_string(role)}')
        lines.append('')

    return '\n'.join(lines)


def colourset_dict(cs: Colourset) -> dict[str, Any]:
    return {
        'hue': cs.hue,
        'shade': cs.shade,
        'colours': {
            role: {
                'hsv': list(cs.colour(role)),
                'hex': cs.as_hex_string(role),
                'rgb': cs.as_rgb_string(role),
            }
            for role in ROLES
        },
    }


def format_json(palette: Palette) -> str:
    """Format palette as JSON."""
    obj: dict[str, Any] = {'seed': palette.seed}
    obj['coloursets'] = []
    for i, cs in enumerate(palette.members):
        entry = {'name': f'cs{i}', 'kind': 'base' if i == 0 else 'alternative'}
        entry.update(colourset_dict(cs))
        obj['coloursets'].append(entry)
    return json.dumps(obj, indent=2)
