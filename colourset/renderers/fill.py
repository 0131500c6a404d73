"""Fill colour tags in a template file.

Tags:
    {{cs0.background}}        hex form, #RRGGBB
    {{cs1.foreground.rgb}}    X colour form, rgb:RR/GG/BB

cs0 is the base colourset, cs1 onwards the alternatives (-n sets how many).
Anything else in double braces is an error, as is a tag naming a colourset
that wasn't generated, an unknown role or a form other than hex/rgb. Nothing
is written in that case.

Requires --template.

Example:
    uv run colourset fill --hue 200 -n 2 -t theme.in -o theme.rc
"""

from colourset.core.template import fill_template_file
from colourset.core.types import Palette, Renderer, TemplateError

renderer = Renderer(
    name='fill',
    help='Substitute {{csN.role}} tags in a --template file.',
)


@renderer.run
def run(palette: Palette, args) -> str:
    template = getattr(args, 'template', None)
    if not template:
        raise TemplateError('fill: --template file required')
    return fill_template_file(template, palette.members)
