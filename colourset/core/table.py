"""The colour table: (hue, shade) -> five HSV triples.

Shade 1 is a dark background with a light foreground, shade 4 a light
background with a dark foreground. Hue 360 selects the achromatic tables.
The literals are hand-tuned and must not be "corrected".
"""

from colourset.core.types import GREY, HSV, ROLES

# Grey: value per role (hue and saturation are always 0)
_GREY_VALUES: dict[int, dict[str, float]] = {
    1: {'foreground': 0.99, 'foreground_inactive': 0.70, 'background': 0.40, 'topshadow': 0.50, 'bottomshadow': 0.30},  # darkest
    2: {'foreground': 0.95, 'foreground_inactive': 0.80, 'background': 0.60, 'topshadow': 0.70, 'bottomshadow': 0.50},
    3: {'foreground': 0.05, 'foreground_inactive': 0.60, 'background': 0.75, 'topshadow': 0.85, 'bottomshadow': 0.65},
    4: {'foreground': 0.20, 'foreground_inactive': 0.55, 'background': 0.88, 'topshadow': 0.96, 'bottomshadow': 0.78},  # lightest
}  # fmt: skip

# Chromatic: (saturation, value) per role
_CHROMATIC: dict[int, dict[str, tuple[float, float]]] = {
    1: {
        'foreground': (0.10, 0.99),
        'foreground_inactive': (0.30, 0.80),
        'background': (0.90, 0.60),
        'topshadow': (0.70, 0.75),
        'bottomshadow': (0.90, 0.40),
    },
    2: {
        'foreground': (0, 0.99),
        'foreground_inactive': (0.30, 0.90),
        'background': (0.80, 0.80),
        'topshadow': (0.50, 0.95),
        'bottomshadow': (0.80, 0.65),
    },
    3: {
        'foreground': (0.99, 0.05),
        'foreground_inactive': (0.90, 0.60),
        'background': (0.85, 0.95),
        'topshadow': (0.50, 0.99),
        'bottomshadow': (0.70, 0.80),
    },
    4: {
        'foreground': (0.90, 0.20),
        'foreground_inactive': (0.40, 0.55),
        'background': (0.30, 0.90),
        'topshadow': (0.20, 0.95),
        'bottomshadow': (0.40, 0.75),
    },
}

# Blue/purple are too dark for the general shade 3 set
_BLUE_PURPLE_3: dict[str, tuple[float, float]] = {
    'foreground': (0.99, 0.05),
    'foreground_inactive': (0.90, 0.60),
    'background': (0.50, 0.85),
    'topshadow': (0.50, 0.95),
    'bottomshadow': (0.70, 0.75),
}


def _is_blue_purple(hue: int) -> bool:
    return 220 < hue < 280


def lookup(hue: int, shade: int) -> dict[str, HSV]:
    """Return role -> HSV for a hue in [0, 360] and a shade in 1..4."""
    if hue == GREY:
        values = _GREY_VALUES[shade]
        return {role: HSV(0, 0, values[role]) for role in ROLES}

    if shade == 3 and _is_blue_purple(hue):
        sv = _BLUE_PURPLE_3
    else:
        sv = _CHROMATIC[shade]
    return {role: HSV(hue, *sv[role]) for role in ROLES}
