"""vra-cli — client library and CLI for the vRealize Automation catalog API."""

__version__ = "0.1.0"
