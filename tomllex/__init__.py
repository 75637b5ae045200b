"""Lexical building blocks for reading TOML: trivia, numbers, dates, strings and keys, with source spans."""

__version__ = "0.1.0"