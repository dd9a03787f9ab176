import pytest

from raycub.image import Image, draw_line, pack_rgba

RED = 0xFF0000FF


def test_pack_rgba_channel_order():
    assert pack_rgba(0x11, 0x22, 0x33, 0x44) == 0x11223344
    assert pack_rgba(255, 0, 0, 255) == RED


def test_new_image_is_blank():
    image = Image(4, 3)
    assert len(image.pixels) == 4 * 3 * 4
    assert all(b == 0 for b in image.pixels)


def test_put_and_get_pixel_round_trip():
    image = Image(5, 5)
    image.put_pixel(2, 3, 0x5C94FCFF)
    assert image.get_pixel(2, 3) == 0x5C94FCFF
    assert image.get_pixel(3, 2) == 0


def test_pixel_bytes_are_rgba_order():
    image = Image(2, 2)
    image.put_pixel(1, 0, 0x11223344)
    assert bytes(image.pixels[4:8]) == bytes([0x11, 0x22, 0x33, 0x44])


def test_fill_sets_every_pixel():
    image = Image(3, 2)
    image.fill(0x00A000FF)
    assert {image.get_pixel(x, y) for x in range(3) for y in range(2)} == {0x00A000FF}


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_range_pixel_raises(x, y):
    image = Image(3, 2)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, RED)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size_raises(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


def test_horizontal_line():
    image = Image(10, 3)
    draw_line(image, 2, 1, 7, 1, RED)
    lit = {(x, y) for x in range(10) for y in range(3) if image.get_pixel(x, y)}
    assert lit == {(x, 1) for x in range(2, 8)}


def test_diagonal_line_both_directions():
    forward = Image(6, 6)
    backward = Image(6, 6)
    draw_line(forward, 0, 0, 4, 4, RED)
    draw_line(backward, 4, 4, 0, 0, RED)
    assert forward.pixels == backward.pixels
    assert all(forward.get_pixel(i, i) == RED for i in range(5))


def test_line_is_clipped_to_image():
    image = Image(4, 4)
    draw_line(image, 0, 2, 9, 2, RED)
    assert all(image.get_pixel(x, 2) == RED for x in range(4))
    assert image.get_pixel(0, 0) == 0