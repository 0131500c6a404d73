"""Rule-of-thumb judgement of whether two coloursets look bad together.

This is a subjective assessment, not a colour-distance model. Only the
(hue, shade) pair of each colourset is consulted.

Rules are evaluated in order and the first match decides. Every band rule is
tried with the arguments in both orders, so clashes(a, b) == clashes(b, a).
A few grey rules come first, then "within 30 degrees always looks good",
then the tuned clash bands.
"""

from collections.abc import Callable
from dataclasses import dataclass

from colourset.core.types import GREY, Colourset

# (hue, shade)
Side = tuple[int, int]


@dataclass(frozen=True)
class Rule:
    name: str
    test: Callable[[Side, Side], bool]
    clash: bool


def _either(test: Callable[[Side, Side], bool]) -> Callable[[Side, Side], bool]:
    """Make a one-directional band test symmetric."""

    def both(a: Side, b: Side) -> bool:
        return test(a, b) or test(b, a)

    return both


def _analogous(a: Side, b: Side) -> bool:
    return abs(a[0] - b[0]) <= 30


def _glary_vs_dull(a: Side, b: Side) -> bool:
    (h1, s1), (h2, s2) = a, b
    if h1 == h2:
        return False

    def glary(h: int, s: int) -> bool:
        return s == 3 and (h < 200 or h > 280)

    return (glary(h1, s1) and s2 in (2, 4)) or (glary(h2, s2) and s1 in (2, 4))


RULES: tuple[Rule, ...] = (
    # yellow doesn't go with grey
    Rule('grey vs yellow', _either(lambda a, b: a[0] == GREY and 50 <= b[0] <= 80), True),
    # orange only looks good with grey if it's dark
    Rule('grey vs orange', _either(lambda a, b: a[0] == GREY and 10 < b[0] < 50 and b[1] > 1), True),
    Rule('grey goes with anything', lambda a, b: a[0] == GREY or b[0] == GREY, False),
    Rule('analogous hues', _analogous, False),
    Rule(
        'rose vs yellow/green',
        _either(lambda a, b: 0 <= a[0] < 10 and a[1] == 4 and 60 <= b[0] < 70 and b[1] != 4),
        True,
    ),
    Rule('orange vs green', _either(lambda a, b: 10 < a[0] <= 40 and 1 < a[1] < 4 and 60 < b[0] <= 100), True),
    Rule('purple vs pinky-red', _either(lambda a, b: 270 <= a[0] < 280 and 330 <= b[0] < 340 and b[1] > 1), True),
    Rule(
        'violet vs pink/red',
        _either(lambda a, b: 280 <= a[0] < 360 and (340 <= b[0] < 360 or 0 <= b[0] < 50)),
        True,
    ),
    Rule(
        'orange vs dark green',
        _either(lambda a, b: 10 < a[0] <= 40 and a[1] in (2, 3) and 100 < b[0] <= 130),
        True,
    ),
    Rule(
        'purple vs tomato-red/rose',
        _either(lambda a, b: 260 <= a[0] < 280 and (350 <= b[0] < 360 or 0 <= b[0] <= 10)),
        True,
    ),
    Rule(
        'purple/pink vs orange/yellow/green',
        _either(lambda a, b: 280 <= a[0] < 350 and 10 <= b[0] < 80),
        True,
    ),
    Rule(
        'orange/yellow vs green/cyan',
        _either(lambda a, b: 10 < a[0] < 90 and a[1] != 1 and 130 < b[0] < 210 and b[1] != 1),
        True,
    ),
    Rule(
        'khaki vs green/cyan',
        _either(lambda a, b: 50 < a[0] < 70 and a[1] == 1 and 130 < b[0] < 210 and b[1] != 1),
        True,
    ),
    Rule('turquoise/cyan vs orchid', _either(lambda a, b: 150 < a[0] < 200 and 270 < b[0] < 320), True),
    Rule('blue/purple vs orange', _either(lambda a, b: 240 < a[0] < 290 and 0 < b[0] < 50), True),
    Rule('violet/pink vs yellow/green', _either(lambda a, b: 290 <= a[0] < 350 and 50 <= b[0] < 110), True),
    # unless they're the same hue
    Rule('glary vs dull or pale', _glary_vs_dull, True),
    # even though red does
    Rule(
        'pink vs green/yellow',
        _either(lambda a, b: 0 <= a[0] < 30 and a[1] == 4 and 60 < b[0] <= 120 and b[1] != 4),
        True,
    ),
    Rule(
        'pale orange vs green',
        _either(lambda a, b: 30 <= a[0] < 50 and a[1] == 4 and 90 < b[0] <= 130 and b[1] != 4),
        True,
    ),
    Rule(
        'glary red vs khaki',
        _either(lambda a, b: 0 <= a[0] < 30 and a[1] == 3 and 50 < b[0] < 70 and b[1] != 3),
        True,
    ),
)

DEFAULT = Rule('no objection', lambda a, b: True, False)


def explain(a: Colourset, b: Colourset) -> Rule:
    """Return the rule that decides whether a and b clash."""
    sa = (a.hue, a.shade)
    sb = (b.hue, b.shade)
    for rule in RULES:
        if rule.test(sa, sb):
            return rule
    return DEFAULT


def clashes(a: Colourset, b: Colourset) -> bool:
    """True if the two coloursets would be ugly together."""
    return explain(a, b).clash
