import numpy as np

from ddsview.dds import DDS, DecodedImage, flip_vertically

from ddsbuild import BLUE, GREEN, RED, make_dds, solid_block


def make_image(width, height, depth=1):
    pixels = np.arange(width * height * depth * 4, dtype=np.uint32).astype(np.uint8)
    return DecodedImage(width, height, depth, pixels.reshape(depth, height, width, 4))


def test_rows_are_reversed():
    image = make_image(2, 3)
    rows = [image.pixels[0, y].copy() for y in range(3)]
    flip_vertically(image)
    assert np.array_equal(image.pixels[0, 0], rows[2])
    assert np.array_equal(image.pixels[0, 1], rows[1])
    assert np.array_equal(image.pixels[0, 2], rows[0])


def test_flip_twice_restores_buffer():
    image = make_image(5, 6)
    original = image.tobytes()
    flip_vertically(image)
    assert image.tobytes() != original
    flip_vertically(image)
    assert image.tobytes() == original


def test_only_first_slice_is_flipped():
    image = make_image(3, 4, depth=2)
    second = image.pixels[1].copy()
    flip_vertically(image)
    assert np.array_equal(image.pixels[1], second)


def test_single_row_is_unchanged():
    image = make_image(4, 1)
    original = image.tobytes()
    flip_vertically(image)
    assert image.tobytes() == original


def test_to_image_flip():
    dds = DDS.from_bytes(make_dds(4, 8, [solid_block(RED), solid_block(BLUE)]))
    plain = dds.to_image()
    flipped = dds.to_image(flip=True)
    assert flipped.to_array()[0, 0].tolist() == [0, 0, 255, 255]
    assert flipped.to_array()[7, 3].tolist() == [255, 0, 0, 255]
    assert flip_vertically(flipped).tobytes() == plain.tobytes()


def test_flip_keeps_length():
    dds = DDS.from_bytes(make_dds(6, 5, [solid_block(GREEN)] * 4))
    image = dds.to_image(flip=True)
    assert len(image.tobytes()) == 6 * 5 * 4
