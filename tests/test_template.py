"""Tests for colourset.core.template — {{csN.role}} tag substitution."""

from pathlib import Path

import pytest
from colourset.core.generator import create
from colourset.core.template import fill_template, fill_template_file
from colourset.core.types import TemplateError, UnknownRoleError


@pytest.fixture
def coloursets():
    return [create(60, 1), create(360, 1)]


class TestFillTemplate:
    def test_hex_tag(self, coloursets):
        assert fill_template('bg={{cs0.background}}', coloursets) == 'bg=#99990F'

    def test_rgb_tag(self, coloursets):
        assert fill_template('{{cs0.background.rgb}}', coloursets) == 'rgb:99/99/0F'

    def test_explicit_hex_form(self, coloursets):
        assert fill_template('{{cs1.background.hex}}', coloursets) == '#666666'

    def test_second_colourset(self, coloursets):
        assert fill_template('{{cs1.foreground}}', coloursets) == '#FCFCFC'

    def test_role_with_underscore(self, coloursets):
        out = fill_template('{{cs0.foreground_inactive.rgb}}', coloursets)
        assert out == coloursets[0].as_rgb_string('foreground_inactive')

    def test_whitespace_inside_braces(self, coloursets):
        assert fill_template('{{ cs0.background }}', coloursets) == '#99990F'

    def test_multiple_tags(self, coloursets):
        text = '*background: {{cs0.background}}\n*foreground: {{cs0.foreground}}\n'
        out = fill_template(text, coloursets)
        assert '{{' not in out
        assert out.count('#') == 2

    def test_text_without_tags_unchanged(self, coloursets):
        assert fill_template('no tags {here}', coloursets) == 'no tags {here}'

    def test_index_out_of_range(self, coloursets):
        with pytest.raises(TemplateError, match='cs2'):
            fill_template('{{cs2.background}}', coloursets)

    def test_unknown_role(self, coloursets):
        with pytest.raises(UnknownRoleError):
            fill_template('{{cs0.border}}', coloursets)

    def test_role_outside_word_chars(self, coloursets):
        with pytest.raises(UnknownRoleError):
            fill_template('{{cs0.fore-ground}}', coloursets)

    def test_unknown_form(self, coloursets):
        with pytest.raises(TemplateError, match='hexx'):
            fill_template('{{cs0.foreground.hexx}}', coloursets)

    @pytest.mark.parametrize('tag', ['{{}}', '{{cs0}}', '{{colour.background}}', '{{cs0.background.rgb.x}}'])
    def test_malformed_tag(self, coloursets, tag):
        with pytest.raises(TemplateError, match='Malformed'):
            fill_template(f'x {tag} y', coloursets)


class TestFillTemplateFile:
    def test_reads_file(self, tmp_path: Path, coloursets) -> None:
        f = tmp_path / 'theme.in'
        f.write_text('color: {{cs0.background}};\n')
        assert fill_template_file(str(f), coloursets) == 'color: #99990F;\n'

    def test_missing_file(self, tmp_path: Path, coloursets) -> None:
        with pytest.raises(TemplateError, match='cannot read template'):
            fill_template_file(str(tmp_path / 'missing.in'), coloursets)
