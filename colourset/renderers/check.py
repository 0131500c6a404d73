"""Show which clash rule decides each pair of coloursets.

Without --against, every pair in the generated palette is listed (a
generated palette is always all "ok"). With --against HUE:SHADE (repeatable),
the base colourset is compared with each given colourset instead, which
shows why the generators would reject that combination.

Example:
    uv run colourset check --hue 360 --shade 2 --against 65:1 --against 200:3
"""

from itertools import combinations

import numpy as np

from colourset.core import oracle
from colourset.core.generator import create
from colourset.core.report import describe
from colourset.core.types import Colourset, ConfigError, Palette, Renderer

renderer = Renderer(
    name='check',
    help='List pairs of coloursets with the clash rule that decides them.',
)


def parse_pair(text: str) -> tuple[int, int]:
    """Parse 'HUE:SHADE' into a (hue, shade) tuple."""
    hue, sep, shade = text.partition(':')
    try:
        return int(hue), int(shade) if sep else 0
    except ValueError:
        raise ConfigError(f'check: expected HUE:SHADE, got {text!r}') from None


def _line(i: int, a: Colourset, j: int, b: Colourset) -> str:
    rule = oracle.explain(a, b)
    verdict = 'CLASH' if rule.clash else 'ok'
    return f'cs{i} ({describe(a)}) / cs{j} ({describe(b)}): {verdict} — {rule.name}'


@renderer.run
def run(palette: Palette, args) -> str:
    against = getattr(args, 'against', None) or []
    if against:
        # an unset shade is drawn from the palette's own generator
        rng = palette.rng if palette.rng is not None else np.random.default_rng(palette.seed)
        members = [palette.base] + [create(*parse_pair(p), rng=rng) for p in against]
        lines = [_line(0, palette.base, j, b) for j, b in enumerate(members[1:], start=1)]
    else:
        lines = [_line(i, a, j, b) for (i, a), (j, b) in combinations(enumerate(palette.members), 2)]
    if not lines:
        lines.append('check: only one colourset, nothing to compare')
    return '\n'.join(lines) + '\n'
