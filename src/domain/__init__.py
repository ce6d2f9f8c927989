"""Domain models, parsers and errors."""
