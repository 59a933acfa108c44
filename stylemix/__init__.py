"""StyleMix: build-time CSS mixins and unit helpers."""

__version__ = "0.1.0"
