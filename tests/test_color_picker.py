import pytest

from horus_ui.color_picker import (
    ColorPicker,
    ColorPickerMode,
    NavDirection,
    RgbField,
    color_name,
)
from horus_ui.colors import Color16, Color256, Rgb


def rgb_picker():
    picker = ColorPicker()
    picker.switch_to_rgb()
    return picker


def type_text(picker, text):
    for ch in text:
        picker.input_char(ch)


def test_color_names():
    assert color_name(0) == "Black"
    assert color_name(8) == "DarkGray"
    assert color_name(15) == "Gray"
    assert color_name(16) == "Unknown"


def test_new_picker_has_no_color():
    picker = ColorPicker()
    assert picker.mode is ColorPickerMode.BASIC16
    assert picker.selected_color() is None
    assert picker.is_open is False


def test_open_resets_mode_and_selection():
    picker = ColorPicker()
    picker.cycle_mode()
    picker.selected_basic = 7
    picker.open()
    assert picker.is_open is True
    assert picker.mode is ColorPickerMode.BASIC16
    assert picker.selected_basic == 0
    picker.close()
    assert picker.is_open is False


def test_cycle_mode_round_trip():
    picker = ColorPicker()
    seen = []
    for _ in range(3):
        picker.cycle_mode()
        seen.append((picker.mode, picker.show_extended))
    assert seen == [
        (ColorPickerMode.EXTENDED256, True),
        (ColorPickerMode.RGB_INPUT, False),
        (ColorPickerMode.BASIC16, False),
    ]


def test_toggle_extended():
    picker = ColorPicker()
    picker.toggle_extended()
    assert picker.mode is ColorPickerMode.EXTENDED256
    picker.toggle_extended()
    assert picker.mode is ColorPickerMode.BASIC16


def test_move_selection_clamps_basic():
    picker = ColorPicker()
    picker.move_selection(100)
    assert picker.selected_basic == 15
    assert picker.selected_color() == Color16(15)
    picker.move_selection(-100)
    assert picker.selected_color() == Color16(0)


def test_move_selection_clamps_extended():
    picker = ColorPicker()
    picker.toggle_extended()
    picker.move_selection(1000)
    assert picker.selected_color() == Color256(255)


def test_move_selection_moves_rgb_fields_without_wrapping():
    picker = rgb_picker()
    picker.move_selection(-1)
    assert picker.rgb_input.editing_field is RgbField.RED
    for _ in range(5):
        picker.move_selection(1)
    assert picker.rgb_input.editing_field is RgbField.HEX


def test_left_and_right_wrap_in_basic_grid():
    picker = ColorPicker()
    picker.move_direction(NavDirection.LEFT)
    assert picker.selected_basic == 15
    picker.move_direction(NavDirection.RIGHT)
    assert picker.selected_basic == 0
    assert picker.selected_color() == Color16(0)


def test_down_moves_by_row_width_and_up_returns():
    picker = ColorPicker()
    start = picker.selected_basic
    picker.move_direction(NavDirection.DOWN)
    assert picker.selected_basic == start + picker.basic_cols
    picker.move_direction(NavDirection.UP)
    assert picker.selected_basic == start


def test_down_on_last_row_and_up_on_first_row_stay():
    picker = ColorPicker()
    picker.move_direction(NavDirection.UP)
    assert picker.selected_basic == 0
    picker.move_selection(15)
    picker.move_direction(NavDirection.DOWN)
    assert picker.selected_basic == 15


def test_extended_grid_uses_its_column_count():
    picker = ColorPicker()
    picker.toggle_extended()
    picker.move_direction(NavDirection.DOWN)
    assert picker.selected_extended == picker.extended_cols
    picker.move_direction(NavDirection.LEFT)
    assert picker.selected_color() == Color256(picker.extended_cols - 1)


def test_rgb_left_right_cycle_through_fields():
    picker = rgb_picker()
    for _ in range(4):
        picker.move_direction(NavDirection.RIGHT)
    assert picker.rgb_input.editing_field is RgbField.RED
    picker.move_direction(NavDirection.LEFT)
    assert picker.rgb_input.editing_field is RgbField.HEX
    picker.move_direction(NavDirection.UP)
    assert picker.rgb_input.editing_field is RgbField.HEX


def test_input_ignored_outside_rgb_mode():
    picker = ColorPicker()
    picker.input_char("5")
    assert picker.rgb_input.r == ""


def test_decimal_fields_accept_three_digits_only():
    picker = rgb_picker()
    type_text(picker, "12x34")
    assert picker.rgb_input.r == "123"


def test_decimal_fields_make_rgb_color():
    picker = rgb_picker()
    type_text(picker, "12")
    picker.move_direction(NavDirection.RIGHT)
    type_text(picker, "34")
    picker.move_direction(NavDirection.RIGHT)
    type_text(picker, "56")
    assert picker.selected_color() == Rgb(12, 34, 56)


def test_out_of_range_component_gives_no_color():
    picker = rgb_picker()
    type_text(picker, "999")
    picker.move_direction(NavDirection.RIGHT)
    type_text(picker, "1")
    picker.move_direction(NavDirection.RIGHT)
    type_text(picker, "1")
    assert picker.selected_color() is None


def test_hex_is_uppercased_and_parsed():
    picker = rgb_picker()
    picker.rgb_input.editing_field = RgbField.HEX
    type_text(picker, "ffffffff")
    assert picker.rgb_input.hex == "FFFFFF"
    assert picker.selected_color() == Rgb(255, 255, 255)


def test_hex_takes_precedence_over_decimal():
    picker = rgb_picker()
    type_text(picker, "12")
    picker.rgb_input.g = "34"
    picker.rgb_input.b = "56"
    picker.rgb_input.editing_field = RgbField.HEX
    type_text(picker, "000000")
    assert picker.selected_color() == Rgb(0, 0, 0)


def test_backspace_keeps_last_color_when_nothing_parses():
    picker = rgb_picker()
    picker.rgb_input.editing_field = RgbField.HEX
    type_text(picker, "FFFFFF")
    picker.backspace()
    assert picker.rgb_input.hex == "FFFFF"
    assert picker.selected_color() == Rgb(255, 255, 255)


def test_input_char_requires_single_character():
    with pytest.raises(ValueError):
        rgb_picker().input_char("12")