import imageio.v3 as iio
import pytest

from ddsview.cli import main

from ddsbuild import BLUE, RED, make_dds, make_block, solid_block


@pytest.fixture
def red_blue_dds(tmp_path):
    path = tmp_path / "texture.dds"
    codes = [0] * 8 + [1] * 8
    path.write_bytes(make_dds(4, 4, [make_block(color0=RED, color1=BLUE, color_codes=codes)]))
    return path


def test_info(red_blue_dds, capsys):
    main([str(red_blue_dds)])
    out = capsys.readouterr().out
    assert "DDS File Information" in out
    assert "Dimensions: 4x4" in out


def test_convert(red_blue_dds, tmp_path, capsys):
    output = tmp_path / "out.png"
    main([str(red_blue_dds), '-o', str(output)])
    assert "Saved to" in capsys.readouterr().out

    pixels = iio.imread(output)
    assert pixels.shape == (4, 4, 4)
    assert pixels[0, 0].tolist() == [255, 0, 0, 255]
    assert pixels[3, 0].tolist() == [0, 0, 255, 255]


def test_convert_flipped(red_blue_dds, tmp_path):
    output = tmp_path / "out.png"
    main([str(red_blue_dds), '-o', str(output), '--flip', '--clip', 'legacy'])
    pixels = iio.imread(output)
    assert pixels[0, 0].tolist() == [0, 0, 255, 255]


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.dds")])
    assert excinfo.value.code == 1
    assert "Failed to open file" in capsys.readouterr().out


def test_unsupported_format(tmp_path, capsys):
    path = tmp_path / "dxt1.dds"
    path.write_bytes(make_dds(4, 4, [solid_block(RED)], fourcc=b'DXT1'))
    with pytest.raises(SystemExit) as excinfo:
        main([str(path), '-o', str(tmp_path / "out.png")])
    assert excinfo.value.code == 1
    assert "Cannot convert to image" in capsys.readouterr().out


def test_invalid_file(tmp_path, capsys):
    path = tmp_path / "junk.dds"
    path.write_bytes(b'\x00' * 256)
    with pytest.raises(SystemExit):
        main([str(path)])
    assert "Not a DDS file" in capsys.readouterr().out
