import pytest

from horus_ui.events import AppEvent, handle_key_event


@pytest.mark.parametrize(
    "key, expected",
    [
        ("q", AppEvent.QUIT),
        ("s", AppEvent.SAVE),
        ("Up", AppEvent.MOVE_UP),
        ("Down", AppEvent.MOVE_DOWN),
        ("Enter", AppEvent.EDIT),
        (" ", AppEvent.TOGGLE),
        ("Tab", AppEvent.SWITCH_PANEL),
        ("c", AppEvent.OPEN_COLOR_PICKER),
        ("i", AppEvent.OPEN_ICON_SELECTOR),
    ],
)
def test_known_keys(key, expected):
    assert handle_key_event(key) is expected


@pytest.mark.parametrize("key", ["x", "Q", "Esc", "Backspace", "1"])
def test_unknown_keys(key):
    assert handle_key_event(key) is AppEvent.UNKNOWN


def test_named_keys_case_insensitive():
    assert handle_key_event("TAB") is AppEvent.SWITCH_PANEL
    assert handle_key_event("up") is AppEvent.MOVE_UP