from __future__ import annotations

import pytest
from PIL import Image

from main import EXIT_IO, EXIT_OK, EXIT_USAGE, VERSION, main


@pytest.fixture
def workdir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_help(capsys: pytest.CaptureFixture) -> None:
    assert main(['--help']) == EXIT_OK
    out = capsys.readouterr().out
    assert 'Usage:' in out
    assert 'Supported shapes:' in out
    assert main([]) == EXIT_OK


def test_version(capsys: pytest.CaptureFixture) -> None:
    assert main(['--version']) == EXIT_OK
    assert VERSION in capsys.readouterr().out


def test_creates_default_filename(workdir, capsys: pytest.CaptureFixture) -> None:
    assert main(['circle', '32', '32', 'red']) == EXIT_OK
    output = workdir / 'circle_32x32.png'
    assert output.exists()
    assert '[OK] Created circle_32x32.png' in capsys.readouterr().out
    with Image.open(output) as image:
        assert image.size == (32, 32)
        assert image.getpixel((16, 16)) == (255, 0, 0, 255)


def test_positional_output_name(workdir) -> None:
    assert main(['heart', '40', '40', 'pink', 'love.png']) == EXIT_OK
    assert (workdir / 'love.png').exists()


def test_output_option_wins(workdir) -> None:
    assert main(['star', '40', '40', 'gold', 'ignored.png', '-o', 'chosen.png']) == EXIT_OK
    assert (workdir / 'chosen.png').exists()
    assert not (workdir / 'ignored.png').exists()


def test_old_format_means_rectangle(workdir, capsys: pytest.CaptureFixture) -> None:
    assert main(['3', '3', 'red']) == EXIT_OK
    captured = capsys.readouterr()
    assert 'Deprecated' in captured.err
    assert 'Deprecated' not in captured.out
    with Image.open(workdir / 'rectangle_3x3.png') as image:
        assert image.getpixel((2, 2)) == (255, 0, 0, 255)


def test_fuzzy_shape_name(workdir) -> None:
    assert main(['circel', '20', '20', 'blue']) == EXIT_OK
    assert (workdir / 'circle_20x20.png').exists()


def test_strict_shape_name(workdir, capsys: pytest.CaptureFixture) -> None:
    assert main(['circel', '20', '20', 'blue', '--strict-shape']) == EXIT_USAGE
    assert "Invalid shape 'circel'" in capsys.readouterr().err


def test_strict_color(workdir) -> None:
    assert main(['circle', '20', '20', 'bleu', '-s']) == EXIT_USAGE
    assert main(['circle', '20', '20', 'blue', '-s']) == EXIT_OK


@pytest.mark.parametrize("args", [
    ['circle', '-1', '20', 'red'],
    ['circle', '0', '20', 'red'],
    ['circle', '20', 'abc', 'red'],
    ['circle', '20', '20', 'qqqqqqqqqqqq'],
    ['circle', '5', '5', 'red'],
    ['circle', '20', '20'],
    ['circle', '20', '20', 'red', 'a.png', 'b.png'],
    ['star', '20', '20', 'red', '--points', 'two'],
    ['star', '20', '20', 'red', '--points', '2'],
    ['arrow', '60', '40', 'red', '--direction', 'sideways'],
    ['donut', '20', '20', 'red', '--thickness', '0'],
    ['cross', '20', '20', 'red', '--bar'],
    ['circle', '20', '20', 'red', '--bogus'],
])
def test_usage_errors(workdir, args: list, capsys: pytest.CaptureFixture) -> None:
    assert main(args) == EXIT_USAGE
    assert capsys.readouterr().err.startswith('Error:')
    assert list(workdir.iterdir()) == []


def test_existing_file_requires_force(workdir) -> None:
    target = workdir / 'circle_20x20.png'
    target.write_bytes(b'keep me')
    assert main(['circle', '20', '20', 'red']) == EXIT_USAGE
    assert target.read_bytes() == b'keep me'

    assert main(['circle', '20', '20', 'red', '--force']) == EXIT_OK
    assert target.read_bytes().startswith(b'\x89PNG')


def test_unwritable_destination(workdir, capsys: pytest.CaptureFixture) -> None:
    assert main(['circle', '20', '20', 'red', '-o', 'missing/out.png']) == EXIT_IO
    assert 'Failed to generate PNG' in capsys.readouterr().err


def test_shape_options_reach_the_renderer(workdir) -> None:
    assert main(['donut', '40', '40', 'red', '--thickness', '0.2']) == EXIT_OK
    with Image.open(workdir / 'donut_40x40.png') as image:
        assert image.getpixel((20, 20)) == (0, 0, 0, 0)

    assert main(['arrow', '60', '40', 'red', 'up.png', '--direction', 'UP']) == EXIT_OK
    assert main(['star', '40', '40', 'red', 'six.png', '--points', '6']) == EXIT_OK
    assert main(['cross', '40', '40', 'red', 'bar.png', '--bar', '4']) == EXIT_OK
    for name in ['up.png', 'six.png', 'bar.png']:
        assert (workdir / name).exists()


def test_verbose_prints_warnings(workdir, capsys: pytest.CaptureFixture) -> None:
    assert main(['circle', '40', '20', 'red', '-v']) == EXIT_OK
    captured = capsys.readouterr()
    assert 'WARNING: circle looks best with aspect ratio 1.0:1 (try 20x20)' in captured.err
    assert 'Dimension check' not in captured.out
    assert 'Generating circle 40x20 PNG with color #ff0000' in captured.out


def test_quiet_run_prints_no_report(workdir, capsys: pytest.CaptureFixture) -> None:
    assert main(['circle', '40', '20', 'red']) == EXIT_OK
    assert 'Dimension check' not in capsys.readouterr().err
