"""Tests for buffer conversion, PNG encoding and the matplotlib preview."""

import numpy as np
import pytest
from PIL import Image

from pyflowtex import ComputationError
from pyflowtex.misc import encode_png, load_png, save_png, to_image
from pyflowtex.rastermanip import check_unit_range, scalar_to_rgba, to_uint8, to_uint16


def _gradient_field(ny=4, nx=6):
    return np.tile(np.linspace(0.0, 1.0, ny, dtype=np.float32)[:, None], (1, nx))


def test_scalar_to_rgba():
    field = np.array([[0.0, 0.25], [0.5, 1.0]], dtype=np.float32)
    pixels = scalar_to_rgba(field)
    assert pixels.shape == (2, 2, 4)
    assert pixels.dtype == np.float32
    for c in range(3):
        assert np.array_equal(pixels[..., c], field)
    assert np.all(pixels[..., 3] == 1.0)


def test_scalar_to_rgba_rejects_rgba():
    with pytest.raises(ValueError):
        scalar_to_rgba(np.zeros((2, 2, 4)))


@pytest.mark.parametrize("bad", [np.array([0.5, np.nan]), np.array([-0.1, 0.5]), np.array([1.01])])
def test_check_unit_range(bad):
    with pytest.raises(ComputationError):
        check_unit_range(bad)


def test_check_unit_range_accepts_bounds():
    check_unit_range(np.array([0.0, 0.5, 1.0]))
    check_unit_range(np.zeros((0, 3)))


def test_quantization():
    values = np.array([0.0, 0.5, 1.0], dtype=np.float32)
    assert to_uint8(values).tolist() == [0, 128, 255]
    assert to_uint16(values).tolist() == [0, 32768, 65535]


def test_encode_png_signature():
    data = encode_png(scalar_to_rgba(_gradient_field()))
    assert data[:8] == b"\x89PNG\r\n\x1a\n"


def test_saved_image_has_y_up(tmp_path):
    field = _gradient_field(ny=4, nx=6)  # row 0 (bottom) is black, row 3 (top) is white
    path = save_png(field, tmp_path / "grad.png")
    with Image.open(path) as img:
        assert img.mode == "RGBA"
        assert img.size == (6, 4)
        arr = np.asarray(img)
    assert np.all(arr[0, :, 0] == 255)
    assert np.all(arr[-1, :, 0] == 0)
    assert np.all(arr[..., 3] == 255)


def test_save_load_round_trip(tmp_path):
    pixels = scalar_to_rgba(np.random.default_rng(1).random((5, 7)).astype(np.float32))
    path = save_png(pixels, tmp_path / "nested" / "dir" / "tex.png")
    assert path.exists()
    loaded = load_png(path)
    assert loaded.shape == pixels.shape
    assert loaded.dtype == np.float32
    assert np.allclose(loaded, pixels, atol=0.5 / 255 + 1e-6)


def test_uint16_png(tmp_path):
    field = _gradient_field(ny=8, nx=3)
    path = save_png(scalar_to_rgba(field), tmp_path / "gray16.png", uint16=True)
    with Image.open(path) as img:
        assert img.mode.startswith("I")
        assert img.size == (3, 8)
    loaded = load_png(path)
    assert np.allclose(loaded[..., 0], field, atol=1e-4)
    assert np.allclose(loaded[..., 3], 1.0)


def test_to_image_rejects_out_of_range():
    with pytest.raises(ComputationError):
        to_image(np.full((2, 2), 1.5, dtype=np.float32))


def test_to_image_rejects_bad_shape():
    with pytest.raises(ValueError):
        to_image(np.zeros((2, 2, 3), dtype=np.float32))


def test_preview_does_not_modify_buffer():
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from pyflowtex.visu import preview

    pixels = scalar_to_rgba(_gradient_field())
    before = pixels.copy()
    fig = preview(pixels, title="flow", show=False)
    assert fig.axes[0].get_title() == "flow"
    assert np.array_equal(pixels, before)
    plt.close(fig)

    fig = preview(_gradient_field(), show=False)
    assert len(fig.axes[0].images) == 1
    plt.close(fig)
