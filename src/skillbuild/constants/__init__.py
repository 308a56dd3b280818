"""Shared constants for skillbuild."""
