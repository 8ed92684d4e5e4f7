from raytracer.color import Color
from raytracer.pixel import Pixel


def test_default_pixel_is_black_at_origin():
    p = Pixel()
    assert (p.x, p.y) == (0, 0)
    assert p.color == Color(0.0, 0.0, 0.0)


def test_str_format():
    assert str(Pixel(3, 4, Color(0.5, 1.0, 0.0))) == "Pixel[3,4](0.5,1,0)"


def test_color_can_be_assigned():
    p = Pixel(1, 2)
    p.color = Color(1.0, 1.0, 1.0)
    assert str(p) == "Pixel[1,2](1,1,1)"