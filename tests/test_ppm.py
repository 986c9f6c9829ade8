import pytest

from percolation.ppm import to_greyscale, write_ppm


def test_to_greyscale_rescales_and_upscales():
    pixels = to_greyscale([0, 1, 2, 2], 2, 2, 0, 2, upscale=2)
    assert pixels.shape == (4, 4)
    assert pixels[0].tolist() == [0, 0, 127, 127]
    assert pixels[3].tolist() == [255, 255, 255, 255]


def test_to_greyscale_rejects_bad_arguments():
    with pytest.raises(ValueError):
        to_greyscale([0, 0], 1, 2, 1, 1)
    with pytest.raises(ValueError):
        to_greyscale([0, 0], 1, 2, 0, 2, upscale=0)
    with pytest.raises(ValueError):
        to_greyscale([0, 0, 0], 1, 2, 0, 2)


def test_write_ppm_layout(tmp_path):
    path = write_ppm(tmp_path / "grid.ppm", [0, 2, 1], 1, 3, 0, 2)
    lines = path.read_text(encoding="ascii").splitlines()
    assert lines[0] == "P3"
    assert lines[1] == "3 1"
    assert lines[2] == "255"
    assert lines[3] == "0 0 0 255 255 255 127 127 127"
    assert len(lines) == 4
