"""0x0 - command-line uploader for 0x0-style file hosts."""

__version__ = "0.1.0"
