"""HSV to RGB24 conversion and the two text forms of a colour.

Conversion goes through PIL.ImageColor, which accepts CSS-style
``hsv(h, s%, v%)`` strings and rounds each channel to the nearest integer.
Callers only ever supply valid HSV (H in 0-360, S and V in 0-1).
"""

from PIL import ImageColor


def hsv_to_rgb(hsv: tuple[float, float, float]) -> tuple[int, int, int]:
    """Convert an (h, s, v) triple to an (r, g, b) tuple of 0-255 ints."""
    h, s, v = hsv
    r, g, b = ImageColor.getrgb(f'hsv({h:g},{s * 100:g}%,{v * 100:g}%)')[:3]
    return (r, g, b)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    """Upper-case #RRGGBB."""
    r, g, b = rgb
    return f'#{r:02X}{g:02X}{b:02X}'


def rgb_to_xcolor(rgb: tuple[int, int, int]) -> str:
    """X11 colour string rgb:RR/GG/BB."""
    r, g, b = rgb
    return f'rgb:{r:02X}/{g:02X}/{b:02X}'
