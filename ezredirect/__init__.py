"""Address-bar shortcut redirector."""

__version__ = "1.0.0"
