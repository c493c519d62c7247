# horus_ui

The interactive pieces of a statusline configurator, kept free of any
terminal library. Each component holds its own editing state and produces
the plain text and sizes a front end needs to draw it. The package has no
dependencies beyond the standard library.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## What is inside

- `horus_ui.colors` – frozen `Color16`, `Color256` and `Rgb` colour values
  (components must be integers in 0..255, otherwise `ValueError`).
  `describe_color(color, none_label)` gives a readable label such as
  `"Light Red"`, `"256:42"` or `"RGB(1,2,3)"`, and `none_label` for `None`.
  `terminal_color(color)` gives what a front end should draw: a colour name
  for basic colours, a palette index for 256 colours, an `(r, g, b)` tuple for
  RGB, and `"White"` for `None`.
- `horus_ui.color_picker` – `ColorPicker`, with three modes
  (`ColorPickerMode.BASIC16`, `EXTENDED256`, `RGB_INPUT`). Arrow keys map to
  `move_direction(NavDirection...)`, which moves through the swatch grid
  (wrapping left and right) or between RGB fields; `move_selection(delta)`
  steps with clamping; `cycle_mode()`, `toggle_extended()` and
  `switch_to_rgb()` change mode; `input_char()` and `backspace()` edit the
  R, G, B (up to three digits) and hex (up to six hex digits) fields;
  `selected_color()` gives the result. `RgbInput` holds the typed text and
  `color_name(index)` names the sixteen basic colours.
- `horus_ui.color_view` – sizes and text of the colour picker:
  `basic_columns`, `extended_columns`, `extended_page` (the palette indices on
  the page holding the selection), `mode_text`, `preview_text`, `rgb_text`,
  `hex_text` and `swatch_text`.
- `horus_ui.icon_selector` – `IconSelector` over the built-in `plain_icons()`
  and `nerd_font_icons()` lists of `IconInfo`. `open(style)` takes an
  `IconStyle` or one of `"plain"`, `"nerd_font"`, `"powerline"`. It supports
  custom icon entry (`start_custom_input`, `input_char`, `backspace`,
  `finish_custom_input`), list scrolling with `scroll_offset(view_height)`,
  and the popup text from `style_text`, `custom_text` and `actions_text`.
- `horus_ui.separator_editor` – `SeparatorEditor` with the
  `default_presets()` list of `SeparatorPreset`, free text input, preset
  navigation with `move_preset_selection`, `clear()`, `separator()` and
  `preset_lines()` for display.
- `horus_ui.name_input` – `NameInput`, which accepts a name made of ASCII
  letters, digits, `_` and `-`; `value()` returns the stripped name or `None`,
  `display_text()` the field text, and `popup_rect(width, height)` an
  `(x, y, width, height)` placement that leaves the bottom help lines
  uncovered.
- `horus_ui.help` – the key help bar: `help_items(HelpContext...)` for the
  main screen, colour picker or icon selector, `wrap_help` and `help_lines`
  to wrap shortcuts to a width, and `help_height` for the bar's height
  (3 to 8 lines, borders included).
- `horus_ui.theme_selector` – the wrapped theme list: `wrap_themes`,
  `theme_selector_text` (ending with the separator in use),
  `theme_selector_height` and `theme_selector_title` (starred when modified).
- `horus_ui.events` – `handle_key_event(key)` turns a key into an `AppEvent`.
  A single character is a typed character; longer strings name a special key
  such as `"Up"`, `"Down"`, `"Enter"` or `"Tab"`.
- `horus_ui.editor` – `EditorComponent` tracks which segment is being edited.

## Example

    from horus_ui.color_picker import ColorPicker, ColorPickerMode, NavDirection
    from horus_ui.colors import describe_color

    picker = ColorPicker()
    picker.open()
    picker.move_direction(NavDirection.RIGHT)
    print(describe_color(picker.selected_color(), "Default"))  # Red

    picker.cycle_mode()
    picker.cycle_mode()
    assert picker.mode is ColorPickerMode.RGB_INPUT

## What it does not do

This package holds state and produces text; it is not a configurator on its
own. It draws nothing to a terminal, reads no keyboard input, has no command
to start, and does not load, save or preview statusline configurations or
theme files. The theme list, the current theme and the separator are passed
in by the caller.