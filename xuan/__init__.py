"""Load the Unihan database files and look up CJK ideographs by character, code point or U+ notation."""

__version__ = "0.1.0"