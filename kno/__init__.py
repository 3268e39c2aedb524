"""kno - short addresses for a plain-text notes tree."""

__version__ = "0.3.0"
