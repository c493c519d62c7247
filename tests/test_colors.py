import pytest

from horus_ui.colors import Color16, Color256, Rgb, describe_color, terminal_color


def test_describe_basic_colours():
    assert describe_color(Color16(0)) == "Black"
    assert describe_color(Color16(8)) == "Dark Gray"
    assert describe_color(Color16(15)) == "Gray"


def test_describe_basic_out_of_table():
    assert describe_color(Color16(20)) == "ANSI 20"


def test_describe_extended_and_rgb():
    assert describe_color(Color256(42)) == "256:42"
    assert describe_color(Rgb(1, 2, 3)) == "RGB(1,2,3)"


def test_describe_none_uses_label():
    assert describe_color(None) == "Default"
    assert describe_color(None, "None") == "None"


def test_terminal_colour_named():
    assert terminal_color(Color16(0)) == "Black"
    assert terminal_color(Color16(8)) == "DarkGray"
    assert terminal_color(Color16(14)) == "LightCyan"


def test_terminal_colour_fallbacks():
    assert terminal_color(Color16(99)) == "White"
    assert terminal_color(None) == "White"


def test_terminal_colour_indexed_and_rgb():
    assert terminal_color(Color256(200)) == 200
    assert terminal_color(Rgb(10, 20, 30)) == (10, 20, 30)


@pytest.mark.parametrize("factory", [lambda: Color16(256), lambda: Color256(-1), lambda: Rgb(0, 300, 0)])
def test_out_of_range_rejected(factory):
    with pytest.raises(ValueError):
        factory()


def test_colours_are_values():
    assert Color16(3) == Color16(3)
    assert {Rgb(1, 2, 3), Rgb(1, 2, 3)} == {Rgb(1, 2, 3)}