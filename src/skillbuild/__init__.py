"""skillbuild: validate and compile Agent Skills rule directories."""

__version__ = "0.1.0"
