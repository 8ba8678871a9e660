"""Unit tests for the command-line interface."""

import json

import pytest
from PIL import Image

from shape_cli import _create_argument_parser, main
from shape_lib.domain import Shape
from shape_lib.export import export_document, read_ico_directory


@pytest.fixture
def document(tmp_path):
    path = tmp_path / 'icon-layers.json'
    path.write_text(export_document([Shape(radius=90, fill_color='#4D96FF')]))
    return path


@pytest.mark.usefixtures('restore_logging')
class TestCli:

    def test_parser_requires_command(self):
        with pytest.raises(SystemExit):
            _create_argument_parser().parse_args([])

    def test_export_svg(self, document, tmp_path):
        out = tmp_path / 'icon.svg'
        assert main(['export', str(document), '--format', 'svg', '-o', str(out)]) == 0
        assert out.read_text().startswith('<?xml')

    def test_export_ico(self, document, tmp_path):
        out = tmp_path / 'favicon.ico'
        assert main(['export', str(document), '-f', 'ico', '-o', str(out)]) == 0
        assert len(read_ico_directory(out.read_bytes())) == 6

    def test_export_png_size(self, document, tmp_path):
        out = tmp_path / 'icon.png'
        assert main(['export', str(document), '-f', 'png', '-s', '40', '-o', str(out)]) == 0
        assert Image.open(out).size == (40, 40)

    def test_export_rejects_bad_document(self, tmp_path, capsys):
        bad = tmp_path / 'bad.json'
        bad.write_text('{"shapes": 1}')
        assert main(['export', str(bad), '-o', str(tmp_path / 'x.svg')]) == 1
        assert 'Error' in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        assert main(['export', str(tmp_path / 'missing.json'), '-o', str(tmp_path / 'x')]) == 1

    def test_demo(self, tmp_path):
        out = tmp_path / 'demo.json'
        assert main(['demo', 'rainbowBurst', '-o', str(out)]) == 0
        assert len(json.loads(out.read_text())['shapes']) == 7

    def test_unknown_demo(self, tmp_path, capsys):
        assert main(['demo', 'nope', '-o', str(tmp_path / 'd.json')]) == 1
        assert 'geminEye' in capsys.readouterr().err

    def test_palette(self, capsys):
        assert main(['palette', '--seed', '4', '--base', '#6BCF7F']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['base'] == '#6bcf7f'
