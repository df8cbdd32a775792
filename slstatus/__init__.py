"""Status monitor that collects system information for window manager bars."""

__version__ = "1.0"