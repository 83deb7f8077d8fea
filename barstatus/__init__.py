"""Status line generator for status bars: components, configuration and command line."""

__version__ = "1.0"