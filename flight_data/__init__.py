"""Flight Data public site: welcome page and logo component."""

__version__ = "0.1.0"
