"""Parsers for URLs, file names and problem pages."""
