"""Parse C headers and generate Aether language bindings from them."""

__version__ = "0.1.0"
__all__ = ["model", "header", "generator", "cli"]