"""Editing state and text layout for the popups and bars of a terminal statusline configurator."""

__version__ = "1.1.2"