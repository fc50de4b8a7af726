"""RFC 822 header values, headers and messages, with string and file helpers."""

__version__ = "0.9.7"