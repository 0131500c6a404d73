"""CSS custom properties for every colourset role.

One property per colourset and role, named --cs<N>-<role> with
underscores turned into dashes:

    :root {
      --cs0-background: #99990F;
      --cs0-foreground-inactive: #CCCC8F;
      ...
    }

Example:
    uv run colourset css --hue 30 -n 2 -o theme.css
"""

from colourset.core.types import ROLES, Palette, Renderer

renderer = Renderer(
    name='css',
    help='CSS custom properties (--csN-role) inside :root.',
)


def property_name(index: int, role: str) -> str:
    return f'--cs{index}-{role.replace("_", "-")}'


@renderer.run
def run(palette: Palette, args) -> str:
    lines = [':root {']
    for i, cs in enumerate(palette.members):
        for role in ROLES:
            lines.append(f'  {property_name(i, role)}: {cs.as_hex_string(role)};')
    lines.append('}')
    return '\n'.join(lines) + '\n'
