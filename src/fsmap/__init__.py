"""fsmap - interactive node-link map of a directory tree."""

__version__ = "0.1.0"
