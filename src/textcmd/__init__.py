"""textcmd — selection command engine for line-oriented text transforms."""

__version__ = "0.1.0"
