from horus_ui.theme_selector import (
    theme_selector_height,
    theme_selector_text,
    theme_selector_title,
    wrap_themes,
)

THEMES = ["default", "minimal", "gruvbox", "nord"]


def test_wide_box_puts_everything_on_one_line():
    lines = wrap_themes(THEMES, "nord", 200)
    assert len(lines) == 1
    for theme in THEMES:
        assert theme in lines[0]
    assert lines[0].startswith("[ ] default")
    assert lines[0].endswith("[✓] nord")


def test_narrow_box_puts_one_theme_per_line():
    lines = wrap_themes(THEMES, "gruvbox", 12)
    assert len(lines) == len(THEMES)
    for line, theme in zip(lines, THEMES):
        assert line.endswith(theme)
        assert not line.startswith(" ")
    assert lines[2].startswith("[✓]")


def test_first_entry_always_placed_even_if_too_wide():
    lines = wrap_themes(["a-very-long-theme-name"], "x", 4)
    assert lines == ["[ ] a-very-long-theme-name"]


def test_exactly_one_current_marker():
    for width in (10, 30, 80):
        text = "\n".join(wrap_themes(THEMES, "minimal", width))
        assert text.count("[✓]") == 1
        assert text.count("[ ]") == len(THEMES) - 1


def test_height_matches_lines_plus_borders():
    for width in (10, 25, 40, 200):
        assert theme_selector_height(THEMES, "default", width) == len(
            wrap_themes(THEMES, "default", width)
        ) + 2


def test_height_of_empty_list():
    assert wrap_themes([], "default", 80) == []
    assert theme_selector_height([], "default", 80) == 3


def test_text_ends_with_separator():
    text = theme_selector_text(THEMES, "default", " | ", 200)
    lines = text.split("\n")
    assert lines[-1] == 'Separator: " | "'
    assert lines[:-1] == wrap_themes(THEMES, "default", 200)


def test_title():
    assert theme_selector_title(False) == "Themes"
    assert theme_selector_title(True) == "Themes*"