"""Command-line interface for skillbuild."""
