"""Expand compact abbreviations into indented HTML and JSX markup."""

__version__ = "0.1.0"