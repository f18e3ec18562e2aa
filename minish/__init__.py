"""A small interactive command shell: word splitting, quoting, variable expansion and a few builtins."""

__version__ = "0.1.0"
__all__ = ["__version__"]