"""Tests for the report builder, the renderer registry and each renderer."""

import argparse
import json
from pathlib import Path

import numpy as np
import pytest
from colourset.core.generator import create
from colourset.core.report import describe, format_json, format_text
from colourset.core.types import ROLES, ConfigError, Palette, TemplateError
from colourset.registry import discover, get, module_doc, names, summary
from colourset.renderers.check import parse_pair
from colourset.renderers.css import property_name
from colourset.renderers.swatch import BLOCK_H, BLOCK_W, swatch_array
from PIL import Image


@pytest.fixture
def palette() -> Palette:
    return Palette(base=create(60, 1), alternatives=[create(360, 1), create(90, 1)], seed=3)


def _args(**kwargs) -> argparse.Namespace:
    defaults = {'output': None, 'template': None, 'against': None}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class TestRegistry:
    def test_discovers_all(self):
        assert set(discover()) == {'check', 'css', 'fill', 'json', 'list', 'swatch', 'xresources'}

    def test_discover_is_cached(self):
        assert discover() is discover()

    def test_names_sorted(self):
        assert names() == ['check', 'css', 'fill', 'json', 'list', 'swatch', 'xresources']

    def test_get_unknown(self):
        with pytest.raises(KeyError, match='Available'):
            get('pdf')

    def test_module_doc_first_line(self):
        assert module_doc('fill').startswith('Fill colour tags')

    def test_summary_is_first_doc_line(self):
        assert summary('fill') == module_doc('fill').splitlines()[0]

    def test_module_doc_unknown(self):
        with pytest.raises(KeyError):
            module_doc('pdf')


class TestReport:
    def test_describe(self):
        assert describe(create(60, 1)) == 'hue 60 shade 1'
        assert describe(create(360, 3)) == 'grey shade 3'

    def test_text(self, palette):
        text = format_text(palette)
        assert 'colourset: 3 coloursets (seed 3)' in text
        assert '── cs0 base: hue 60 shade 1' in text
        assert '── cs1 alt 1: grey shade 1' in text
        assert '#99990F' in text
        assert 'rgb:99/99/0F' in text

    def test_json(self, palette):
        obj = json.loads(format_json(palette))
        assert obj['seed'] == 3
        assert [c['name'] for c in obj['coloursets']] == ['cs0', 'cs1', 'cs2']
        assert obj['coloursets'][0]['kind'] == 'base'
        bg = obj['coloursets'][0]['colours']['background']
        assert bg == {'hsv': [60, 0.9, 0.6], 'hex': '#99990F', 'rgb': 'rgb:99/99/0F'}
        assert set(obj['coloursets'][1]['colours']) == set(ROLES)


class TestTextRenderers:
    def test_list(self, palette):
        assert get('list').execute(palette, _args()) == format_text(palette)

    def test_json(self, palette):
        assert json.loads(get('json').execute(palette, _args()))['seed'] == 3

    def test_css_property_name(self):
        assert property_name(2, 'foreground_inactive') == '--cs2-foreground-inactive'

    def test_css(self, palette):
        css = get('css').execute(palette, _args())
        assert css.startswith(':root {')
        assert '  --cs0-background: #99990F;' in css
        assert css.count(';') == 3 * len(ROLES)

    def test_xresources(self, palette):
        out = get('xresources').execute(palette, _args())
        assert 'colourset.cs0.background: rgb:99/99/0F' in out
        assert '! cs1: hue 360 shade 1' in out

    def test_fill(self, palette, tmp_path: Path) -> None:
        tpl = tmp_path / 'theme.in'
        tpl.write_text('{{cs0.background}} {{cs2.foreground.rgb}}')
        out = get('fill').execute(palette, _args(template=str(tpl)))
        assert out == f'#99990F {palette.alternatives[1].as_rgb_string("foreground")}'

    def test_fill_requires_template(self, palette):
        with pytest.raises(TemplateError):
            get('fill').execute(palette, _args())


class TestCheck:
    def test_parse_pair(self):
        assert parse_pair('65:1') == (65, 1)

    def test_parse_pair_without_shade(self):
        assert parse_pair('65') == (65, 0)

    def test_parse_pair_bad(self):
        with pytest.raises(ConfigError):
            parse_pair('red:1')

    def test_palette_pairs(self, palette):
        out = get('check').execute(palette, _args())
        lines = out.strip().splitlines()
        assert len(lines) == 3
        assert lines[0].startswith('cs0 (hue 60 shade 1) / cs1 (grey shade 1): CLASH')

    def test_against(self):
        palette = Palette(base=create(360, 2))
        out = get('check').execute(palette, _args(against=['65:1', '200:3']))
        lines = out.strip().splitlines()
        assert lines[0] == 'cs0 (grey shade 2) / cs1 (hue 65 shade 1): CLASH — grey vs yellow'
        assert lines[1] == 'cs0 (grey shade 2) / cs2 (hue 200 shade 3): ok — grey goes with anything'

    def test_against_unset_shade_uses_palette_rng(self):
        palette = Palette(base=create(360, 2), rng=np.random.default_rng(5))
        expected = int(np.random.default_rng(5).integers(1, 5))
        out = get('check').execute(palette, _args(against=['120']))
        assert f'cs1 (hue 120 shade {expected})' in out

    def test_against_unset_shade_follows_seed(self):
        out = [get('check').execute(Palette(base=create(360, 2), seed=8), _args(against=['120'])) for _ in range(2)]
        assert out[0] == out[1]

    def test_single_colourset(self):
        out = get('check').execute(Palette(base=create(100, 2)), _args())
        assert 'nothing to compare' in out


class TestSwatch:
    def test_array_shape(self, palette):
        arr = swatch_array(palette.members)
        assert arr.shape == (3 * BLOCK_H, len(ROLES) * BLOCK_W, 3)
        assert arr.dtype == np.uint8

    def test_block_colours(self, palette):
        arr = swatch_array(palette.members)
        # corner of the first block is the base background
        assert tuple(arr[0, 0]) == (153, 153, 15)
        # second row, fourth block is the grey foreground
        assert tuple(arr[BLOCK_H, 3 * BLOCK_W]) == (252, 252, 252)

    def test_foreground_bar(self, palette):
        arr = swatch_array(palette.members)
        assert tuple(arr[BLOCK_H // 2, BLOCK_W // 2]) == palette.base.as_rgb('foreground')

    def test_writes_png(self, palette, tmp_path: Path) -> None:
        out = tmp_path / 'sub' / 'swatch.png'
        msg = get('swatch').execute(palette, _args(output=str(out)))
        assert 'swatch: wrote' in msg
        img = Image.open(out)
        assert img.format == 'PNG'
        assert img.size == (len(ROLES) * BLOCK_W, 3 * BLOCK_H)

    def test_requires_output(self, palette):
        with pytest.raises(ConfigError):
            get('swatch').execute(palette, _args())
